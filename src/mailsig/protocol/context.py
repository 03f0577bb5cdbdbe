"""Message signature context -- the evaluator's input, plus normalization.

Raw message metadata arrives loosely typed (numeric strings, missing keys,
absent headers).  Everything is normalised here into closed enums so the
evaluator never compares raw values.  Malformed values fall back to their
least alarming default and are logged, never raised.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mailsig.protocol.errors import InvalidMessageError
from mailsig.protocol.types import (
    IMPORT_ORIGIN,
    IMPORT_ORIGIN_HEADER,
    EncryptionStatus,
    VerificationStatus,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageSignatureContext:
    """Read-only metadata the evaluator needs about one message."""

    is_sent_by_me: bool
    encryption_status: EncryptionStatus
    verification_status: VerificationStatus
    is_imported_message: bool = False
    sent_timestamp: int = 0


def _coerce_int(value: Any) -> int | None:
    """Return *value* as an int, or None if it is not integral."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


def parse_encryption_status(value: Any) -> EncryptionStatus:
    """Normalise an ``IsEncrypted`` value, defaulting to ``UNKNOWN``."""
    if isinstance(value, EncryptionStatus):
        return value
    code = _coerce_int(value)
    if code is not None:
        try:
            return EncryptionStatus(code)
        except ValueError:
            pass
    logger.warning("Unrecognised encryption status %r, treating as unknown", value)
    return EncryptionStatus.UNKNOWN


def parse_verification_status(value: Any) -> VerificationStatus:
    """Normalise a ``Verified`` value, defaulting to ``NOT_VERIFIED``."""
    if isinstance(value, VerificationStatus):
        return value
    if value is None:
        # Verification has simply not run yet
        return VerificationStatus.NOT_VERIFIED
    code = _coerce_int(value)
    if code is not None:
        try:
            return VerificationStatus(code)
        except ValueError:
            pass
    logger.warning("Unrecognised verification status %r, treating as not verified", value)
    return VerificationStatus.NOT_VERIFIED


_TRUE_WORDS = frozenset(["true", "yes"])
_FALSE_WORDS = frozenset(["false", "no"])


def parse_flag(value: Any) -> bool | None:
    """Normalise a boolean-ish field, returning None when it cannot be read.

    Accepts bools, 0/1 and their string forms, and true/false or yes/no.
    """
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in _TRUE_WORDS:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE_WORDS:
        return False
    code = _coerce_int(value)
    if code in (0, 1):
        return bool(code)
    logger.warning("Unreadable flag value %r, ignoring it", value)
    return None


def is_import(parsed_headers: Any) -> bool:
    """Return True if the parsed headers mark the message as imported."""
    if not isinstance(parsed_headers, Mapping):
        return False
    return parsed_headers.get(IMPORT_ORIGIN_HEADER) == IMPORT_ORIGIN


def parse_timestamp(value: Any) -> int:
    """Normalise a send time to epoch seconds; unusable values become 0.

    Fractional times are rounded up so that anything after a whole-second
    cutover still compares as after it.
    """
    if value is None:
        return 0
    ts = _coerce_int(value)
    if ts is None and isinstance(value, (float, str)):
        try:
            seconds = float(value)
        except ValueError:
            seconds = math.nan
        if math.isfinite(seconds):
            ts = math.ceil(seconds)
    if ts is None:
        logger.warning("Unusable message time %r, treating as 0", value)
        return 0
    return ts


def context_from_message(
    message: Mapping[str, Any], *, is_sent_by_me: bool
) -> MessageSignatureContext:
    """Build a :class:`MessageSignatureContext` from raw message metadata.

    Reads ``IsEncrypted``, ``Verified``, ``ParsedHeaders`` and ``Time``.
    Field values are never rejected; see the ``parse_*`` helpers.

    Raises:
        InvalidMessageError: If *message* is not a mapping.
    """
    if not isinstance(message, Mapping):
        raise InvalidMessageError(
            f"Expected a message mapping, got {type(message).__name__}"
        )
    return MessageSignatureContext(
        is_sent_by_me=bool(is_sent_by_me),
        encryption_status=parse_encryption_status(message.get("IsEncrypted")),
        verification_status=parse_verification_status(message.get("Verified")),
        is_imported_message=is_import(message.get("ParsedHeaders")),
        sent_timestamp=parse_timestamp(message.get("Time")),
    )
