"""mailsig -- which lock to show for an encrypted, maybe signed, message.

Top-level convenience re-exports::

    from mailsig import DisplayVerdict, evaluate_message
    from mailsig.protocol import MessageSignatureContext, evaluate
"""

__version__ = "0.1.0"

from mailsig.protocol.context import MessageSignatureContext
from mailsig.protocol.evaluator import evaluate
from mailsig.protocol.types import DisplayVerdict
from mailsig.sdk.config import EvaluatorConfig
from mailsig.sdk.evaluator import evaluate_message

__all__ = [
    "__version__",
    "DisplayVerdict",
    "EvaluatorConfig",
    "MessageSignatureContext",
    "evaluate",
    "evaluate_message",
]
