"""mailsig CLI -- show which lock a message would get.

Thin wrapper around :mod:`mailsig.sdk` using click.
"""

from __future__ import annotations

import json
import logging

import click

from mailsig.protocol import InvalidMessageError, MailSigError
from mailsig.sdk.config import EvaluatorConfig
from mailsig.sdk.evaluator import evaluate_message_context


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _load_messages(stream) -> list:
    """Read one message object or a list of them from a JSON stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as exc:
        raise MailSigError(f"Invalid JSON: {exc}") from exc
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise MailSigError(f"Expected a message object or a list, got {type(data).__name__}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="mailsig")
@click.option("--verbose", "-v", is_flag=True, help="Log normalization warnings and verdicts.")
def cli(verbose: bool) -> None:
    """mailsig -- signature lock display for mail messages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# mailsig evaluate
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("source", type=click.File("r"))
@click.option(
    "--sent-by-me/--received",
    "sent_by_me",
    default=None,
    help="Override sender detection for every message.",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
def evaluate(source, sent_by_me: bool | None, as_json: bool) -> None:
    """Print the lock verdict for each message in SOURCE (a JSON file, or -)."""
    try:
        config = EvaluatorConfig()
        messages = _load_messages(source)
        results = []
        for index, message in enumerate(messages):
            try:
                ctx, verdict = evaluate_message_context(
                    message, config, is_sent_by_me=sent_by_me
                )
            except InvalidMessageError as exc:
                raise InvalidMessageError(f"Message {index}: {exc}") from exc
            results.append(
                {
                    "id": message.get("ID", str(index)),
                    "verdict": verdict.value,
                    "show_lock": verdict.show_lock,
                    "show_alert": verdict.show_alert,
                    "verification_status": ctx.verification_status.name,
                }
            )
    except MailSigError as exc:
        _error(f"Error: {exc}")
        return

    if as_json:
        click.echo(json.dumps(results, indent=2))
        return
    for row in results:
        click.echo(f"{row['id']} {row['verdict']}")


# ---------------------------------------------------------------------------
# mailsig policy
# ---------------------------------------------------------------------------


@cli.command()
def policy() -> None:
    """Show the effective signing policy configuration."""
    try:
        config = EvaluatorConfig()
    except MailSigError as exc:
        _error(f"Error: {exc}")
        return

    click.echo(f"Signature start: {config.signing_policy_start}")
    addresses = ", ".join(sorted(config.self_addresses)) or "(none)"
    click.echo(f"Self addresses:  {addresses}")
    click.echo(f"Config dir:      {config.data_dir}")
