"""Core types and constants for mailsig signature status display."""

from __future__ import annotations

from enum import Enum


# Epoch seconds after which every outgoing, non-exempt message is signed
SIGNATURE_START = 1551967200

# Origin header set on messages that were imported rather than sent
IMPORT_ORIGIN_HEADER = "X-Pm-Origin"
IMPORT_ORIGIN = "import"


class EncryptionStatus(int, Enum):
    """Encryption status codes carried in a message's ``IsEncrypted`` field.

    Using ``int, Enum`` so that ``EncryptionStatus.NONE == 0`` is True.
    ``UNKNOWN`` is never sent by the server; it is the value given to
    missing or unrecognised codes.
    """

    UNKNOWN = -1
    NONE = 0
    INTERNAL = 1
    EXTERNAL = 2
    OUT_ENC = 3
    OUT_PLAIN = 4
    STORED_ENC = 5
    PGP_INLINE = 7
    PGP_MIME = 8
    PGP_MIME_SIGNED = 9
    AUTOREPLY = 10


class VerificationStatus(int, Enum):
    """Outcome of checking a message signature against sender key material.

    ``NOT_VERIFIED`` covers messages whose signature has not been checked
    yet, including missing or unrecognised codes.
    """

    NOT_VERIFIED = -1
    NOT_SIGNED = 0
    SIGNED_AND_VALID = 1
    SIGNED_AND_INVALID = 2
    SIGNED_NO_PUB_KEY = 3


class DisplayVerdict(str, Enum):
    """How the lock icon for a message should be drawn."""

    NO_LOCK = "no-lock"
    LOCK_ONLY = "lock"
    LOCK_WITH_ALERT = "lock-alert"

    @property
    def show_lock(self) -> bool:
        return self is not DisplayVerdict.NO_LOCK

    @property
    def show_alert(self) -> bool:
        return self is DisplayVerdict.LOCK_WITH_ALERT

    def as_flags(self) -> tuple[bool, bool]:
        """Return the ``(show_lock, show_alert)`` encoding of this verdict."""
        return self.show_lock, self.show_alert
