"""Configuration model for the Vault client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .._version import __version__

DEFAULT_BASE_URI = "http://127.0.0.1:8200"
DEFAULT_SECRET_PATH = "secret"

_TRUTHY = {"1", "true", "yes", "on"}


def _default_headers() -> Mapping[str, str]:
    """Return immutable default headers mapping."""

    return MappingProxyType({"Content-Type": "application/json"})


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for one VaultClient.

    Each client owns its own config; nothing here is process-global.
    Direct construction ignores the environment; ``from_env`` reads
    ``VAULT_ADDR`` and friends and applies keyword overrides on top.
    """

    base_uri: str = DEFAULT_BASE_URI
    token: str | None = None
    user_agent: str | None = f"ign-vault/{__version__}"
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    http_errors_as_exceptions: bool = True
    verify_tls: bool = True
    connect_timeout_seconds: float | None = None
    read_timeout_seconds: float | None = None
    timeout_seconds: float | None = None
    list_via_get: bool = False
    secret_path: str = DEFAULT_SECRET_PATH

    def __post_init__(self) -> None:
        if not self.base_uri:
            raise ValueError("base_uri must be a non-empty string")
        if not self.http_errors_as_exceptions:
            raise ValueError(
                "http_errors_as_exceptions cannot be disabled; HTTP error "
                "statuses are always reported as errors"
            )

        has_connect_timeout = self.connect_timeout_seconds is not None
        has_read_timeout = self.read_timeout_seconds is not None
        if has_connect_timeout != has_read_timeout:
            raise ValueError(
                "connect_timeout_seconds and read_timeout_seconds "
                "must be set together"
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0 when provided")
        if (
            self.connect_timeout_seconds is not None
            and self.connect_timeout_seconds <= 0
        ):
            raise ValueError(
                "connect_timeout_seconds must be > 0 when provided"
            )
        if (
            self.read_timeout_seconds is not None
            and self.read_timeout_seconds <= 0
        ):
            raise ValueError("read_timeout_seconds must be > 0 when provided")

        object.__setattr__(self, "base_uri", self.base_uri.rstrip("/"))
        object.__setattr__(self, "secret_path", self.secret_path.strip("/"))
        # Freeze copied headers to avoid post-init mutation side effects.
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(dict(self.default_headers)),
        )

    @property
    def timeout(self) -> float | tuple[float, float] | None:
        """Timeout value in the shape the transport expects."""
        if (
            self.connect_timeout_seconds is not None
            and self.read_timeout_seconds is not None
        ):
            return (self.connect_timeout_seconds, self.read_timeout_seconds)
        return self.timeout_seconds

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> "ClientConfig":
        """Build a config from ``VAULT_*`` variables.

        Explicit keyword overrides win over the environment, which wins over
        the defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get("VAULT_ADDR"):
            values["base_uri"] = env["VAULT_ADDR"]
        if env.get("VAULT_TOKEN"):
            values["token"] = env["VAULT_TOKEN"]
        if "VAULT_SKIP_VERIFY" in env:
            skip = env["VAULT_SKIP_VERIFY"].strip().lower() in _TRUTHY
            values["verify_tls"] = not skip
        values.update(overrides)
        return cls(**values)
