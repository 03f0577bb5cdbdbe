"""CLI tests using click.testing.CliRunner.

Uses the MAILSIG_HOME env var (set by the autouse fixture) to isolate
configuration per test.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mailsig.cli.main import cli
from mailsig.protocol.types import SIGNATURE_START


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


@pytest.fixture
def messages_file(tmp_path: Path, raw_message: dict) -> Path:
    received = dict(raw_message, ID="msg-2", IsSentByMe=False, Verified=2)
    plain = dict(raw_message, ID="msg-3", IsEncrypted=0)
    path = tmp_path / "messages.json"
    path.write_text(json.dumps([raw_message, received, plain]))
    return path


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("evaluate", "policy"):
        assert cmd in result.output


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_evaluate_plain_output(runner: CliRunner, messages_file: Path):
    result = runner.invoke(
        cli, ["evaluate", str(messages_file)], env={"MAILSIG_SELF_ADDRESSES": "alice@example.com"}
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "msg-1 lock-alert",
        "msg-2 lock-alert",
        "msg-3 no-lock",
    ]


def test_evaluate_json_output(runner: CliRunner, messages_file: Path):
    result = runner.invoke(
        cli,
        ["evaluate", "--json", str(messages_file)],
        env={"MAILSIG_SELF_ADDRESSES": "alice@example.com"},
    )
    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert rows[0] == {
        "id": "msg-1",
        "verdict": "lock-alert",
        "show_lock": True,
        "show_alert": True,
        "verification_status": "NOT_SIGNED",
    }
    assert rows[1]["verification_status"] == "SIGNED_AND_INVALID"
    assert rows[2]["show_lock"] is False


def test_evaluate_received_override(runner: CliRunner, messages_file: Path):
    result = runner.invoke(cli, ["evaluate", "--received", str(messages_file)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "msg-1 lock"


def test_evaluate_stdin_single_object(runner: CliRunner):
    message = {"IsEncrypted": 1, "Verified": 0, "Time": SIGNATURE_START + 1}
    result = runner.invoke(cli, ["evaluate", "--sent-by-me", "-"], input=json.dumps(message))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "0 lock-alert"


def test_evaluate_invalid_json(runner: CliRunner):
    result = runner.invoke(cli, ["evaluate", "-"], input="{not json")
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_evaluate_non_object_message(runner: CliRunner):
    result = runner.invoke(cli, ["evaluate", "-"], input="[1]")
    assert result.exit_code == 1
    assert "Message 0: Expected a message mapping, got int" in result.output


def test_evaluate_bad_config(runner: CliRunner, messages_file: Path):
    result = runner.invoke(
        cli, ["evaluate", str(messages_file)], env={"MAILSIG_SIGNATURE_START": "never"}
    )
    assert result.exit_code == 1
    assert "Invalid signature start" in result.output


def test_policy(runner: CliRunner):
    result = runner.invoke(
        cli,
        ["policy"],
        env={"MAILSIG_SIGNATURE_START": "1700000000", "MAILSIG_SELF_ADDRESSES": "b@x.io,a@x.io"},
    )
    assert result.exit_code == 0, result.output
    assert "Signature start: 1700000000" in result.output
    assert "a@x.io, b@x.io" in result.output


def test_policy_defaults(runner: CliRunner):
    result = runner.invoke(cli, ["policy"])
    assert result.exit_code == 0
    assert f"Signature start: {SIGNATURE_START}" in result.output
    assert "(none)" in result.output


def test_policy_bad_config_file(runner: CliRunner, isolated_env: Path):
    (isolated_env / "config.toml").write_text("[identity]\naddresses = [1, 2]\n")
    result = runner.invoke(cli, ["policy"])
    assert result.exit_code == 1
    assert "Error: Invalid address" in result.output


def test_evaluate_string_sent_flag(runner: CliRunner):
    message = {"IsEncrypted": 1, "Verified": 0, "Time": SIGNATURE_START + 1, "IsSentByMe": "1"}
    result = runner.invoke(cli, ["evaluate", "-"], input=json.dumps(message))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "0 lock-alert"
