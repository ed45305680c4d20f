"""Synchronous dispatch core for the Vault HTTP API.

Every endpoint service goes through :class:`VaultClient`. It builds one
versioned request, sends it once through the injected transport and maps the
outcome onto the error taxonomy. Retries, backoff and caching are left to
callers.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ._log import masked_headers, package_logger, safe_log
from .builder import PathInput, RequestBuilder
from .classifier import ErrorClassifier
from .config import ClientConfig
from .errors import RequestTimeoutError, ServerError, VaultError
from .models import Request, Response, Verb
from .transport import RequestsTransport, Transport
from .types import Err, Result


class VaultClient:
    """Generic ``call(verb, path, options)`` entry point.

    The client owns its config, transport and logger; none of them are
    shared through module-level state, so independent clients can be used
    side by side.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a new VaultClient.

        Args:
            config: Client configuration; read from ``VAULT_*`` environment
                variables when omitted. An explicit ``ClientConfig(...)``
                does not consult the environment, so use
                ``ClientConfig.from_env(token=...)`` to combine both.
            transport: Transport used to send requests; a pooled
                ``requests`` session when omitted.
            logger: Sink for call summaries and dumps; the package logger
                (silent unless the application configures logging) when
                omitted.
        """
        self._config = config or ClientConfig.from_env()
        self._transport = transport or RequestsTransport(self._config)
        self._logger = logger or package_logger
        self._builder = RequestBuilder(self._config)
        self._classifier = ErrorClassifier(self._logger)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _build_meta(
        self, request: Request, final_error: str | None = None
    ) -> dict[str, Any]:
        meta: dict[str, Any] = {"method": request.method, "url": request.url}
        if final_error is not None:
            meta["final_error"] = final_error
        return meta

    def _log_request(self, request: Request) -> None:
        safe_log(
            self._logger,
            logging.INFO,
            '%s "%s"',
            request.method,
            request.url,
        )
        safe_log(
            self._logger,
            logging.DEBUG,
            "Request:\n%s\n%s\n%s",
            request.url,
            request.method,
            masked_headers(request.headers),
        )

    def _handle_transport_exception(
        self, request: Request, exc: Exception
    ) -> Err[VaultError]:
        """Normalize a transport failure into a ServerError."""
        name = type(exc).__name__
        message = f"Vault call failed ({name})."
        safe_log(self._logger, logging.ERROR, message)
        error_cls = (
            RequestTimeoutError if isinstance(exc, TimeoutError) else ServerError
        )
        return Err(error_cls(message), meta=self._build_meta(request, name))

    def send(self, request: Request) -> Result[Response, VaultError]:
        """Send an already-built request once and classify the outcome."""
        self._log_request(request)
        try:
            response = self._transport.send(request)
        except Exception as exc:
            return self._handle_transport_exception(request, exc)
        return self._classifier.check(response, self._build_meta(request))

    def request(
        self,
        verb: str | Verb,
        path: PathInput = None,
        options: Mapping[str, Any] | None = None,
    ) -> Result[Response, VaultError]:
        """Dispatch one call and return its Result.

        Malformed arguments raise ``InvalidInput`` before anything is sent.
        HTTP error statuses and transport failures come back as ``Err``.
        """
        return self.send(self._builder.build(verb, path, options))

    def call(
        self,
        verb: str | Verb,
        path: PathInput = None,
        options: Mapping[str, Any] | None = None,
    ) -> Response:
        """Dispatch one call; raise the typed error on failure."""
        return self.request(verb, path, options).unwrap()

    def get(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.GET, path, options)

    def head(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.HEAD, path, options)

    def put(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.PUT, path, options)

    def post(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.POST, path, options)

    def patch(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.PATCH, path, options)

    def delete(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.DELETE, path, options)

    def options(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.OPTIONS, path, options)

    def list(
        self, path: PathInput = None, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self.call(Verb.LIST, path, options)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "VaultClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
