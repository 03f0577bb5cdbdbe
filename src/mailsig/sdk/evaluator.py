"""Evaluate raw message metadata using an :class:`EvaluatorConfig`."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mailsig.protocol.context import MessageSignatureContext, context_from_message, parse_flag
from mailsig.protocol.errors import InvalidMessageError
from mailsig.protocol.evaluator import evaluate
from mailsig.protocol.types import DisplayVerdict
from mailsig.sdk.config import EvaluatorConfig

logger = logging.getLogger(__name__)


def message_is_sent_by_me(message: Mapping[str, Any], config: EvaluatorConfig) -> bool:
    """Decide whether the evaluating user sent *message*.

    A readable ``IsSentByMe`` flag wins.  Otherwise the ``Sender.Address``
    is matched case-insensitively against ``config.self_addresses``.
    """
    flag = parse_flag(message.get("IsSentByMe"))
    if flag is not None:
        return flag

    sender = message.get("Sender")
    if isinstance(sender, Mapping):
        address = sender.get("Address")
        if isinstance(address, str):
            return address.strip().lower() in config.self_addresses
    return False


def evaluate_message_context(
    message: Mapping[str, Any],
    config: EvaluatorConfig | None = None,
    *,
    is_sent_by_me: bool | None = None,
) -> tuple[MessageSignatureContext, DisplayVerdict]:
    """Normalise *message* and return its context together with its verdict.

    The context lets callers style an alert from the raw verification status.

    Raises:
        InvalidMessageError: If *message* is not a mapping.
    """
    if not isinstance(message, Mapping):
        raise InvalidMessageError(
            f"Expected a message mapping, got {type(message).__name__}"
        )
    if config is None:
        config = EvaluatorConfig()
    if is_sent_by_me is None:
        is_sent_by_me = message_is_sent_by_me(message, config)

    ctx = context_from_message(message, is_sent_by_me=is_sent_by_me)
    verdict = evaluate(ctx, signing_policy_start=config.signing_policy_start)
    logger.debug("Message %s: %s -> %s", message.get("ID", "?"), ctx, verdict.value)
    return ctx, verdict


def evaluate_message(
    message: Mapping[str, Any],
    config: EvaluatorConfig | None = None,
    *,
    is_sent_by_me: bool | None = None,
) -> DisplayVerdict:
    """Normalise *message* and return its :class:`DisplayVerdict`.

    Raises:
        InvalidMessageError: If *message* is not a mapping.
    """
    _, verdict = evaluate_message_context(message, config, is_sent_by_me=is_sent_by_me)
    return verdict


def evaluate_messages(
    messages: Iterable[Mapping[str, Any]],
    config: EvaluatorConfig | None = None,
) -> list[DisplayVerdict]:
    """Evaluate each message in order, sharing one config."""
    if config is None:
        config = EvaluatorConfig()
    return [evaluate_message(m, config) for m in messages]
