"""Build endpoint services that share one VaultClient."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .networking.client import VaultClient
from .networking.config import ClientConfig
from .networking.errors import InvalidInput
from .networking.transport import Transport
from .services.auth.approle import AppRole
from .services.data import Data
from .services.sys import Sys

SERVICES: dict[str, Callable[[VaultClient], Any]] = {
    "sys": Sys,
    "data": Data,
    "auth/approle": AppRole,
}


class ServiceFactory:
    def __init__(
        self,
        config: ClientConfig | None = None,
        logger: logging.Logger | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.client = VaultClient(config, transport=transport, logger=logger)

    def get(self, service: str) -> Any:
        try:
            service_cls = SERVICES[service]
        except KeyError:
            available = '", "'.join(SERVICES)
            raise InvalidInput(
                f'The service "{service}" is not available. '
                f'Pick one among "{available}".'
            ) from None
        return service_cls(self.client)
