"""mailsig protocol -- signature status types and evaluation.

Public API re-exports for ``mailsig.protocol``.
"""

from mailsig.protocol.types import (
    SIGNATURE_START,
    IMPORT_ORIGIN_HEADER,
    IMPORT_ORIGIN,
    EncryptionStatus,
    VerificationStatus,
    DisplayVerdict,
)

from mailsig.protocol.errors import (
    MailSigError,
    InvalidMessageError,
    ConfigError,
)

from mailsig.protocol.context import (
    MessageSignatureContext,
    parse_encryption_status,
    parse_verification_status,
    parse_timestamp,
    parse_flag,
    is_import,
    context_from_message,
)

from mailsig.protocol.evaluator import (
    SignatureStatusEvaluator,
    evaluate,
    show_signature_status,
)

__all__ = [
    # Types
    "SIGNATURE_START",
    "IMPORT_ORIGIN_HEADER",
    "IMPORT_ORIGIN",
    "EncryptionStatus",
    "VerificationStatus",
    "DisplayVerdict",
    # Errors
    "MailSigError",
    "InvalidMessageError",
    "ConfigError",
    # Context
    "MessageSignatureContext",
    "parse_encryption_status",
    "parse_verification_status",
    "parse_timestamp",
    "parse_flag",
    "is_import",
    "context_from_message",
    # Evaluator
    "SignatureStatusEvaluator",
    "evaluate",
    "show_signature_status",
]
