"""mailsig SDK -- configuration-aware evaluation of raw message metadata."""

from mailsig.sdk.config import EvaluatorConfig
from mailsig.sdk.evaluator import (
    evaluate_message,
    evaluate_message_context,
    evaluate_messages,
    message_is_sent_by_me,
)

__all__ = [
    "EvaluatorConfig",
    "evaluate_message",
    "evaluate_message_context",
    "evaluate_messages",
    "message_is_sent_by_me",
]
