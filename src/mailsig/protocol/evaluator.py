"""Signature status evaluation -- which lock to draw for a message.

The rules, first match wins:

    1. Unencrypted messages get no lock.
    2. Received messages show the accent whenever a signature was checked,
       valid or invalid.
    3. Sent messages:
       a. a valid signature gets a plain lock.  Our own keys are verified
          without the user pinning them, so a check would overstate what
          the user confirmed.
       b. a missing signature is flagged when the message should have
          been signed: not an autoreply, not an import, and sent after
          the signing policy started.
       c. an invalid signature is always flagged.
       d. anything else (exempt or unverified) gets a plain lock.

The caller tells a valid from an invalid accent by looking at the
verification status itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from mailsig.protocol.context import MessageSignatureContext
from mailsig.protocol.types import (
    SIGNATURE_START,
    DisplayVerdict,
    EncryptionStatus,
    VerificationStatus,
)

_SIGNED = frozenset(
    [VerificationStatus.SIGNED_AND_VALID, VerificationStatus.SIGNED_AND_INVALID]
)


def evaluate(
    ctx: MessageSignatureContext, *, signing_policy_start: int = SIGNATURE_START
) -> DisplayVerdict:
    """Return the :class:`DisplayVerdict` for *ctx*.

    Total over every enum combination and free of side effects.
    """
    encryption = ctx.encryption_status
    verified = ctx.verification_status

    if encryption == EncryptionStatus.NONE:
        return DisplayVerdict.NO_LOCK
    if encryption == EncryptionStatus.UNKNOWN:
        return DisplayVerdict.LOCK_ONLY

    if not ctx.is_sent_by_me:
        if verified in _SIGNED:
            return DisplayVerdict.LOCK_WITH_ALERT
        return DisplayVerdict.LOCK_ONLY

    is_import = ctx.is_imported_message
    if verified == VerificationStatus.SIGNED_AND_VALID:
        return DisplayVerdict.LOCK_ONLY
    if (
        verified == VerificationStatus.NOT_SIGNED
        and encryption != EncryptionStatus.AUTOREPLY
        and not is_import
        and ctx.sent_timestamp > signing_policy_start
    ):
        return DisplayVerdict.LOCK_WITH_ALERT
    if verified == VerificationStatus.SIGNED_AND_INVALID:
        return DisplayVerdict.LOCK_WITH_ALERT
    return DisplayVerdict.LOCK_ONLY


def show_signature_status(
    ctx: MessageSignatureContext, *, signing_policy_start: int = SIGNATURE_START
) -> bool:
    """Return True if the lock should carry its check / warning accent."""
    return evaluate(ctx, signing_policy_start=signing_policy_start).show_alert


@dataclass(frozen=True)
class SignatureStatusEvaluator:
    """An :func:`evaluate` bound to one signing policy start time."""

    signing_policy_start: int = SIGNATURE_START

    def __call__(self, ctx: MessageSignatureContext) -> DisplayVerdict:
        return evaluate(ctx, signing_policy_start=self.signing_policy_start)
