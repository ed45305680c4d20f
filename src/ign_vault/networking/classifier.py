"""Map HTTP responses onto the client's error taxonomy."""

from __future__ import annotations

import logging
from typing import Any

from ._log import dump_response, package_logger, safe_log
from .errors import ClientError, ServerError, VaultError
from .models import Response
from .types import Err, Ok, Result


def failure_message(response: Response) -> str:
    return "Vault call failed ({} - {}).".format(
        response.status_code, response.reason
    )


class ErrorClassifier:
    """Turn 4xx into ClientError, 5xx into ServerError, pass the rest."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or package_logger

    def check(
        self, response: Response, meta: dict[str, Any] | None = None
    ) -> Result[Response, VaultError]:
        meta = dict(meta or {})
        meta["status_code"] = response.status_code
        meta["reason"] = response.reason
        if response.status_code < 400:
            return Ok(response, meta=meta)

        summary = failure_message(response)
        safe_log(self._logger, logging.ERROR, summary)
        safe_log(self._logger, logging.DEBUG, dump_response(response))

        message = f"{summary}\n{response.text}"
        error_cls = ServerError if response.status_code >= 500 else ClientError
        return Err(
            error_cls(message, response.status_code, response), meta=meta
        )

    def raise_for_status(self, response: Response) -> Response:
        return self.check(response).unwrap()
