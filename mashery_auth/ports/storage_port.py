"""
Storage Port - Interface for durable key-value storage.

Implementations:
- MemoryStorageAdapter: In-process dict (testing)
- RedisStorageAdapter: Redis
- VaultStorageAdapter: HashiCorp Vault KV v2

Values are opaque bytes. Per-key atomicity of read-merge-write is a
property the backend must provide; nothing above this port serializes
concurrent updates of the same key.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoragePort(ABC):
    """Port: Durable storage of path-keyed blobs."""

    @abstractmethod
    def get(self, path: str) -> Optional[bytes]:
        """
        Read the value stored at path.

        Args:
            path: Storage key (e.g., "area/production")

        Returns:
            Stored bytes, or None if nothing is stored

        Raises:
            StorageError: Backend I/O failure
        """
        pass

    @abstractmethod
    def put(self, path: str, value: bytes) -> None:
        """
        Store value at path, overwriting any previous value.

        Raises:
            StorageError: Backend I/O failure
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """
        Remove the value at path. Deleting a missing path is not an error.

        Raises:
            StorageError: Backend I/O failure
        """
        pass
