"""mailsig exception hierarchy.

All mailsig-specific exceptions inherit from :class:`MailSigError`.
The evaluator itself never raises; these cover the edges around it.
"""

from __future__ import annotations


class MailSigError(Exception):
    """Base exception for all mailsig errors."""


class InvalidMessageError(MailSigError):
    """Raised when a message is not a mapping of metadata fields."""


class ConfigError(MailSigError):
    """Raised when a configuration value cannot be used."""
