"""Error taxonomy for the Vault client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import Response


class VaultError(Exception):
    """Base error for every failure raised by this package."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        return self.message


class InvalidInput(VaultError):
    """Malformed call arguments, detected before any network activity."""


class MissingRequiredField(VaultError):
    """A required request-body field is absent."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(sorted(fields))
        if not self.fields:
            raise ValueError("MissingRequiredField needs at least one field")
        self.field = self.fields[0]
        names = ", ".join(f'"{name}"' for name in self.fields)
        super().__init__(f"Missing required option(s): {names}.")


class ClientError(VaultError):
    """Vault answered with a 4xx status."""


class ServerError(VaultError):
    """Vault answered with a 5xx status, or could not be reached at all."""


class RequestTimeoutError(ServerError):
    """The transport gave up waiting for Vault."""
