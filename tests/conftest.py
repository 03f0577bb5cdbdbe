"""Shared test fixtures for mailsig tests."""

from __future__ import annotations

import pytest

from mailsig.protocol.context import MessageSignatureContext
from mailsig.protocol.types import SIGNATURE_START, EncryptionStatus, VerificationStatus


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep every test away from the developer's ~/.mailsig and env vars."""
    home = tmp_path / "mailsig_home"
    home.mkdir()
    monkeypatch.setenv("MAILSIG_HOME", str(home))
    monkeypatch.delenv("MAILSIG_SIGNATURE_START", raising=False)
    monkeypatch.delenv("MAILSIG_SELF_ADDRESSES", raising=False)
    return home


@pytest.fixture()
def sent_unsigned() -> MessageSignatureContext:
    """A genuine sent message, encrypted, unsigned, after the cutover."""
    return MessageSignatureContext(
        is_sent_by_me=True,
        encryption_status=EncryptionStatus.INTERNAL,
        verification_status=VerificationStatus.NOT_SIGNED,
        is_imported_message=False,
        sent_timestamp=SIGNATURE_START + 1,
    )


@pytest.fixture()
def raw_message() -> dict:
    """A raw message as delivered by the message-metadata provider."""
    return {
        "ID": "msg-1",
        "IsEncrypted": "1",
        "Verified": 0,
        "Time": SIGNATURE_START + 60,
        "ParsedHeaders": {"X-Pm-Origin": "internal"},
        "Sender": {"Address": "alice@example.com"},
    }
