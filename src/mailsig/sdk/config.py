"""Evaluator configuration via dataclass (no pydantic -- instant construction)."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mailsig.protocol.errors import ConfigError
from mailsig.protocol.types import SIGNATURE_START

logger = logging.getLogger(__name__)


def _parse_addresses(value: str | Iterable[str], source: str) -> frozenset[str]:
    """Normalise addresses to a lower-cased frozenset, skipping blanks."""
    if isinstance(value, str):
        value = value.split(",")
    addresses = set()
    for a in value:
        if not isinstance(a, str):
            raise ConfigError(f"Invalid address from {source}: {a!r}")
        if a.strip():
            addresses.add(a.strip().lower())
    return frozenset(addresses)


def _parse_start(value: object, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid signature start from {source}: {value!r}")
    try:
        start = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise ConfigError(
            f"Invalid signature start from {source}: {value!r}"
        ) from None
    if start < 0:
        raise ConfigError(f"Signature start from {source} must be >= 0, got {start}")
    return start


@dataclass
class EvaluatorConfig:
    """Configuration for signature status evaluation.

    All fields have sensible defaults.

    Priority (highest wins): constructor arg > env var > config.toml > default.
    """

    signing_policy_start: int | None = None
    self_addresses: frozenset[str] | Iterable[str] | str | None = None
    data_dir: Path | str | None = None

    def __post_init__(self) -> None:
        # MAILSIG_HOME env var overrides ~/.mailsig (useful for testing / isolation).
        if self.data_dir is None:
            home = os.getenv("MAILSIG_HOME")
            self.data_dir = Path(home) if home else Path.home() / ".mailsig"
        else:
            self.data_dir = Path(self.data_dir)

        file_values: dict = {}
        config_path = self.data_dir / "config.toml"
        if config_path.exists():
            file_values = self._load_config_file(config_path)

        if self.signing_policy_start is not None:
            self.signing_policy_start = _parse_start(self.signing_policy_start, "argument")
        elif os.getenv("MAILSIG_SIGNATURE_START"):
            self.signing_policy_start = _parse_start(
                os.environ["MAILSIG_SIGNATURE_START"], "MAILSIG_SIGNATURE_START"
            )
        elif "signature_start" in file_values:
            self.signing_policy_start = _parse_start(
                file_values["signature_start"], str(config_path)
            )
        else:
            self.signing_policy_start = SIGNATURE_START

        if self.self_addresses is not None:
            self.self_addresses = _parse_addresses(self.self_addresses, "argument")
        elif os.getenv("MAILSIG_SELF_ADDRESSES"):
            self.self_addresses = _parse_addresses(
                os.environ["MAILSIG_SELF_ADDRESSES"], "MAILSIG_SELF_ADDRESSES"
            )
        elif "addresses" in file_values:
            addresses = file_values["addresses"]
            if not isinstance(addresses, (list, str)):
                raise ConfigError(
                    f"[identity] addresses in {config_path} must be a list of strings"
                )
            self.self_addresses = _parse_addresses(addresses, str(config_path))
        else:
            self.self_addresses = frozenset()

    def _load_config_file(self, path: Path) -> dict:
        """Load optional config.toml, returning the values it sets."""
        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[no-redef]  # Python 3.10 fallback

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            logger.warning("Failed to load config file %s", path, exc_info=True)
            return {}

        values: dict = {}
        policy_section = data.get("policy", {})
        if not isinstance(policy_section, dict):
            raise ConfigError(f"[policy] in {path} must be a table")
        if "signature_start" in policy_section:
            values["signature_start"] = policy_section["signature_start"]
        identity_section = data.get("identity", {})
        if not isinstance(identity_section, dict):
            raise ConfigError(f"[identity] in {path} must be a table")
        if "addresses" in identity_section:
            values["addresses"] = identity_section["addresses"]
        return values
