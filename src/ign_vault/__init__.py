"""Python client for the HashiCorp Vault HTTP API."""

import logging

from ._version import __version__
from .factory import ServiceFactory
from .networking.client import VaultClient
from .networking.config import ClientConfig
from .networking.errors import (
    ClientError,
    InvalidInput,
    MissingRequiredField,
    RequestTimeoutError,
    ServerError,
    VaultError,
)
from .networking.models import Request, Response, Verb
from .options import OptionsSpec, enforce_required, filter_allowed

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientConfig",
    "ClientError",
    "InvalidInput",
    "MissingRequiredField",
    "OptionsSpec",
    "Request",
    "RequestTimeoutError",
    "Response",
    "ServerError",
    "ServiceFactory",
    "VaultClient",
    "VaultError",
    "Verb",
    "__version__",
    "enforce_required",
    "filter_allowed",
]
