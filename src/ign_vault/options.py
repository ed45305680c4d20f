"""Request-body validation applied by endpoint services before dispatch.

Both passes are independent: :func:`filter_allowed` is a permissive whitelist
and :func:`enforce_required` only checks presence. Callers always filter
first, so a key that is required but not allowed can never be satisfied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .networking.errors import InvalidInput, MissingRequiredField


def _check_body(body: Any) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise InvalidInput(f"body must be a mapping, got {type(body).__name__}")
    return body


def filter_allowed(
    body: Mapping[str, Any], allowed: Iterable[str]
) -> dict[str, Any]:
    """Return a copy of ``body`` restricted to ``allowed`` keys.

    Unknown keys are dropped silently.
    """
    allowed_keys = frozenset(allowed)
    return {
        key: value
        for key, value in _check_body(body).items()
        if key in allowed_keys
    }


def enforce_required(
    body: Mapping[str, Any], required: Iterable[str]
) -> Mapping[str, Any]:
    """Return ``body`` unchanged if every ``required`` key is present.

    Raises:
        MissingRequiredField: naming every absent key.
    """
    _check_body(body)
    missing = [key for key in required if key not in body]
    if missing:
        raise MissingRequiredField(missing)
    return body


@dataclass(frozen=True)
class OptionsSpec:
    """Allowed and required body keys for one endpoint."""

    allowed: frozenset[str] = frozenset()
    required: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed", frozenset(self.allowed))
        object.__setattr__(self, "required", frozenset(self.required))

    def apply(self, body: Mapping[str, Any]) -> dict[str, Any]:
        filtered = filter_allowed(body, self.allowed)
        enforce_required(filtered, self.required)
        return filtered
