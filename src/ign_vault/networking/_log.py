"""Logging helpers shared by the dispatch pipeline."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Mapping

from .models import Response

_MASKED = "***"
_SENSITIVE_HEADERS = frozenset({"x-vault-token", "authorization"})

package_logger = logging.getLogger("ign_vault")


def safe_log(logger: logging.Logger, level: int, msg: str, *args: Any) -> None:
    """Emit a record; a failing sink never replaces the call's outcome."""
    with contextlib.suppress(Exception):
        logger.log(level, msg, *args)


def masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: _MASKED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def dump_response(response: Response) -> str:
    return "Response:\n{}\n{}\n{}".format(
        response.status_code,
        dict(response.headers),
        response.text,
    )
