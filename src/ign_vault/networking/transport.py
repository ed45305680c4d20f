"""Transport capability used by the dispatch core.

The dispatch core only needs ``send(request) -> Response``. Production code
uses :class:`RequestsTransport`; tests plug in fakes.
"""

from __future__ import annotations

from typing import Protocol

import requests

from .config import ClientConfig
from .models import Request, Response


class Transport(Protocol):
    def send(self, request: Request) -> Response:
        """Send ``request`` once and return the buffered response.

        Implementations raise ``TimeoutError`` when they give up waiting and
        ``ConnectionError`` (or any other exception) when the request could
        not be completed.
        """
        ...


class RequestsTransport:
    """Transport backed by a pooled ``requests.Session``.

    Timeouts and TLS verification come from the ClientConfig; the transport
    performs exactly one attempt per request.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()

    def send(self, request: Request) -> Response:
        try:
            raw = self._session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                timeout=self._config.timeout,
                allow_redirects=True,
                verify=self._config.verify_tls,
            )
        except requests.exceptions.Timeout as exc:
            raise TimeoutError(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise ConnectionError(str(exc)) from exc

        return Response(
            status_code=raw.status_code,
            headers=dict(raw.headers),
            body=raw.content,
            reason=raw.reason or "",
        )

    def close(self) -> None:
        self._session.close()
