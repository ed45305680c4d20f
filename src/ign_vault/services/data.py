"""Generic secret read/write under a mount path."""

from __future__ import annotations

from typing import Any, Mapping

from ..networking.client import VaultClient
from ..networking.models import Response


class Data:
    """Read and write secrets below ``/<secret_path>/``.

    The mount path is held per instance, so two services bound to different
    mounts never interfere.
    """

    def __init__(
        self,
        client: VaultClient | None = None,
        secret_path: str | None = None,
    ) -> None:
        self._client = client or VaultClient()
        if secret_path is None:
            secret_path = self._client.config.secret_path
        self._secret_path = secret_path.strip("/")

    @property
    def secret_path(self) -> str:
        return f"/{self._secret_path}/"

    def _path(self, path: str) -> str:
        return self.secret_path + path.lstrip("/")

    def write(self, path: str, body: Mapping[str, Any]) -> Response:
        return self._client.put(self._path(path), {"json": dict(body)})

    def get(self, path: str) -> Response:
        return self._client.get(self._path(path))

    def delete(self, path: str) -> Response:
        return self._client.delete(self._path(path))

    def list(self, path: str = "") -> Response:
        return self._client.list(self._path(path))
