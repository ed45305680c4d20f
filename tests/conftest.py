# pyright: reportUnknownParameterType=false, reportMissingParameterType=false
import json

import pytest

from ign_vault.networking.client import VaultClient
from ign_vault.networking.config import ClientConfig
from ign_vault.networking.models import Response


class SpyTransport:
    """Records every request and replays queued responses or exceptions."""

    def __init__(self):
        self.sent = []
        self._outcomes = []

    def reply(self, status=200, body=b"", reason="OK", headers=None):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self._outcomes.append(
            Response(
                status_code=status,
                headers=headers or {"Content-Type": "application/json"},
                body=body,
                reason=reason,
            )
        )
        return self

    def fail(self, exc):
        self._outcomes.append(exc)
        return self

    def send(self, request):
        self.sent.append(request)
        outcome = self._outcomes.pop(0) if self._outcomes else Response(200)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def config():
    return ClientConfig(
        base_uri="http://vault.test:8200",
        token="s.test-token",
        user_agent="TestAgent/1.0",
    )


@pytest.fixture
def transport():
    return SpyTransport()


@pytest.fixture
def client(config, transport):
    return VaultClient(config, transport=transport)
