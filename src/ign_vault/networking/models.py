"""Immutable request/response values exchanged with the transport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from requests.structures import CaseInsensitiveDict

from .errors import InvalidInput


def _frozen_headers(headers: Mapping[str, str] | None) -> Mapping[str, str]:
    """Return a read-only, case-insensitive copy of ``headers``."""

    return MappingProxyType(CaseInsensitiveDict(headers or {}))


class Verb(str, Enum):
    """HTTP verbs understood by the dispatch core.

    ``LIST`` is Vault's list pseudo-verb.
    """

    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    LIST = "LIST"

    @classmethod
    def parse(cls, value: str | Verb) -> Verb:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidInput(
                f"verb must be a string, got {type(value).__name__}"
            )
        try:
            return cls(value.upper())
        except ValueError:
            allowed = ", ".join(verb.value.lower() for verb in cls)
            raise InvalidInput(
                f'Unknown verb "{value}". Pick one among: {allowed}.'
            ) from None


@dataclass(frozen=True)
class Request:
    """Fully-built request ready for the transport."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _frozen_headers(self.headers))


@dataclass(frozen=True)
class Response:
    """Buffered response; the body can be read any number of times."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    body: bytes = b""
    reason: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _frozen_headers(self.headers))

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON; an empty body decodes to ``None``."""
        if not self.body:
            return None
        return json.loads(self.body)
