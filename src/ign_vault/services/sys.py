"""Endpoints under ``/sys/``.

See https://developer.hashicorp.com/vault/api-docs/system for the semantics
of each endpoint; these methods only assemble paths and bodies.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..networking.client import VaultClient
from ..networking.models import Response
from ..options import OptionsSpec

INIT_OPTIONS = OptionsSpec(
    allowed={"secret_shares", "secret_threshold", "pgp_keys"},
    required={"secret_shares", "secret_threshold"},
)
UNSEAL_OPTIONS = OptionsSpec(allowed={"key", "reset"})
MOUNT_OPTIONS = OptionsSpec(allowed={"type", "description", "config"})
TUNE_OPTIONS = OptionsSpec(allowed={"default_lease_ttl", "max_lease_ttl"})
POLICY_OPTIONS = OptionsSpec(allowed={"policy"})


def _compact(**values: Any) -> dict[str, Any]:
    """Drop empty values."""
    return {key: value for key, value in values.items() if value}


class Sys:
    """Operations on ``/sys/`` endpoints."""

    def __init__(self, client: VaultClient | None = None) -> None:
        self._client = client or VaultClient()

    def status(self) -> Response:
        """Return the initialization status."""
        return self._client.get("/sys/init")

    def init(self, body: Mapping[str, Any] | None = None) -> Response:
        """Initialize a new Vault; it must not have been initialized yet."""
        payload = INIT_OPTIONS.apply(body or {})
        return self._client.put("/sys/init", {"json": payload})

    def seal_status(self) -> Response:
        return self._client.get("/sys/seal-status")

    def seal(self) -> Response:
        return self._client.put("/sys/seal")

    def sealed(self) -> bool:
        return bool(self.seal_status().json()["sealed"])

    def unsealed(self) -> bool:
        return not self.sealed()

    def unseal(self, body: Mapping[str, Any] | None = None) -> Response:
        """Submit one key share; ``reset`` takes precedence over ``key``."""
        payload = UNSEAL_OPTIONS.apply(body or {})
        return self._client.put("/sys/unseal", {"json": payload})

    def mounts(self) -> Response:
        return self._client.get("/sys/mounts")

    def create_mount(self, name: str, body: Mapping[str, Any]) -> Response:
        payload = MOUNT_OPTIONS.apply(body)
        return self._client.post(f"/sys/mounts/{name}", {"json": payload})

    def delete_mount(self, name: str) -> Response:
        return self._client.delete(f"/sys/mounts/{name}")

    def remount(self, from_path: str, to_path: str) -> Response:
        payload = {"from": from_path, "to": to_path}
        return self._client.post("/sys/remount", {"json": payload})

    def tune_mount(
        self, name: str, body: Mapping[str, Any] | None = None
    ) -> Response:
        """Read the mount tuning, or update it when ``body`` is not empty."""
        path = f"/sys/mounts/{name}/tune"
        if not body:
            return self._client.get(path)
        return self._client.post(path, {"json": TUNE_OPTIONS.apply(body)})

    def policies(self) -> Response:
        return self._client.get("/sys/policy")

    def policy(self, name: str) -> Response:
        return self._client.get(f"/sys/policy/{name}")

    def put_policy(self, name: str, body: Mapping[str, Any]) -> Response:
        payload = POLICY_OPTIONS.apply(body)
        return self._client.put(f"/sys/policy/{name}", {"json": payload})

    def delete_policy(self, name: str) -> Response:
        return self._client.delete(f"/sys/policy/{name}")

    def capabilities(self, path: str, token: str | None = None) -> Response:
        """Capabilities of ``token`` on ``path``; the caller's own without one."""
        payload = _compact(token=token, path=path)
        if not token:
            return self._client.post(
                "/sys/capabilities-self", {"json": payload}
            )
        return self._client.post("/sys/capabilities", {"json": payload})

    def renew(self, lease_id: str, increment: int | str | None = None) -> Response:
        payload = _compact(increment=increment)
        return self._client.put(f"/sys/renew/{lease_id}", {"json": payload})

    def revoke(self, lease_id: str) -> Response:
        return self._client.put(f"/sys/revoke/{lease_id}")

    def revoke_prefix(self, prefix: str) -> Response:
        return self._client.put(f"/sys/revoke-prefix/{prefix}")

    def revoke_force(self, prefix: str) -> Response:
        """Revoke a prefix ignoring backend errors. Emergency use only."""
        return self._client.put(f"/sys/revoke-force/{prefix}")

    def leader(self) -> Response:
        return self._client.get("/sys/leader")

    def step_down(self) -> Response:
        return self._client.put("/sys/step-down")

    def key_status(self) -> Response:
        return self._client.get("/sys/key-status")

    def rotate(self) -> Response:
        return self._client.put("/sys/rotate")

    def raw(self, path: str, value: str | None = None) -> Response:
        """Read a raw storage key, or write it when ``value`` is given."""
        if value is None:
            return self._client.get(f"/sys/raw/{path}")
        return self._client.put(f"/sys/raw/{path}", {"json": {"value": value}})

    def delete_raw(self, path: str) -> Response:
        return self._client.delete(f"/sys/raw/{path}")

    def health(self, **query: Any) -> Response:
        return self._client.get("/sys/health", {"query": query})
