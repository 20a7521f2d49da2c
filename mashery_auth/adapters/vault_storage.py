"""
HashiCorp Vault Storage Adapter - Area records in a KV v2 secrets engine.
"""

from typing import Optional
from mashery_auth.ports.storage_port import StoragePort
from mashery_auth.domain.errors import StorageError


class VaultStorageAdapter(StoragePort):
    """
    HashiCorp Vault storage adapter.

    Uses KV Secrets Engine v2; each path is one secret holding the
    serialized value under the "value" key.
    """

    def __init__(
        self,
        url: str = "http://localhost:8200",
        token: Optional[str] = None,
        mount_point: str = "secret",
        path_prefix: str = "mashery-auth",
        client=None,
    ):
        """
        Initialize Vault adapter.

        Args:
            url: Vault server URL
            token: Vault token (or use VAULT_TOKEN env var)
            mount_point: KV mount point (default: secret)
            path_prefix: Path prefix for entries (default: mashery-auth)
            client: Pre-built hvac client (overrides url/token)

        Raises:
            ImportError: hvac package is not installed
            ValueError: Vault authentication failed
        """
        try:
            import hvac
            from hvac.exceptions import InvalidPath, VaultError
        except ImportError:
            raise ImportError("hvac package required: pip install hvac")

        self._invalid_path = InvalidPath
        self._vault_error = VaultError
        self._mount_point = mount_point
        self._path_prefix = path_prefix
        self._client = client or hvac.Client(url=url, token=token)

        if not self._client.is_authenticated():
            raise ValueError("Vault authentication failed")

    def _get_path(self, path: str) -> str:
        """Get full Vault path for a storage path."""
        return f"{self._path_prefix}/{path}"

    def get(self, path: str) -> Optional[bytes]:
        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=self._get_path(path),
                mount_point=self._mount_point,
                raise_on_deleted_version=True,
            )
        except self._invalid_path:
            return None
        except self._vault_error as e:
            raise StorageError(f"failed to read '{path}': {e}") from e

        value = response["data"]["data"].get("value")
        if value is None:
            return None
        return value.encode("utf-8")

    def put(self, path: str, value: bytes) -> None:
        try:
            self._client.secrets.kv.v2.create_or_update_secret(
                path=self._get_path(path),
                secret={"value": value.decode("utf-8")},
                mount_point=self._mount_point,
            )
        except self._vault_error as e:
            raise StorageError(f"failed to write '{path}': {e}") from e

    def delete(self, path: str) -> None:
        try:
            self._client.secrets.kv.v2.delete_metadata_and_all_versions(
                path=self._get_path(path),
                mount_point=self._mount_point,
            )
        except self._invalid_path:
            return
        except self._vault_error as e:
            raise StorageError(f"failed to delete '{path}': {e}") from e
