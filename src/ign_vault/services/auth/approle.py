"""Endpoints under ``/auth/approle/``."""

from __future__ import annotations

from typing import Any

from ...networking.client import VaultClient


class AppRole:
    """AppRole login and role lookups; results are decoded JSON."""

    def __init__(self, client: VaultClient | None = None) -> None:
        self._client = client or VaultClient()

    def login(self, role_id: str, secret_id: str) -> Any:
        """Issue a Vault token for the presented credentials."""
        body = {"role_id": role_id, "secret_id": secret_id}
        return self._client.post("/auth/approle/login", {"json": body}).json()

    def list_roles(self) -> Any:
        return self._client.list("/auth/approle/role").json()

    def get_role_id(self, role_name: str) -> Any:
        return self._client.get(f"/auth/approle/role/{role_name}/role-id").json()
