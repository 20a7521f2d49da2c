"""
Redis Storage Adapter - Redis-backed key-value storage.
"""

from typing import Optional
from mashery_auth.ports.storage_port import StoragePort
from mashery_auth.domain.errors import StorageError


class RedisStorageAdapter(StoragePort):
    """
    Redis-backed storage.

    Each path maps to one Redis string key. SET and DEL are atomic per
    key; read-merge-write sequences are not.
    """

    def __init__(self, redis_client=None, prefix: str = "mashery:", redis_url: str = "redis://localhost:6379/0"):
        """
        Initialize Redis storage adapter.

        Args:
            redis_client: Redis client instance (redis.Redis), created lazily if omitted
            prefix: Key prefix prepended to every path
            redis_url: URL used when no client is supplied

        Raises:
            ImportError: redis package is not installed
        """
        try:
            import redis
        except ImportError:
            raise ImportError("redis package required: pip install redis")

        self._redis_lib = redis
        self._redis = redis_client
        self._prefix = prefix
        self._redis_url = redis_url

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            self._redis = self._redis_lib.Redis.from_url(self._redis_url)
        return self._redis

    def _key(self, path: str) -> str:
        return f"{self._prefix}{path}"

    def get(self, path: str) -> Optional[bytes]:
        try:
            data = self._get_redis().get(self._key(path))
        except self._redis_lib.RedisError as e:
            raise StorageError(f"failed to read '{path}': {e}") from e

        if data is None:
            return None
        if isinstance(data, str):
            return data.encode("utf-8")
        return data

    def put(self, path: str, value: bytes) -> None:
        try:
            self._get_redis().set(self._key(path), value)
        except self._redis_lib.RedisError as e:
            raise StorageError(f"failed to write '{path}': {e}") from e

    def delete(self, path: str) -> None:
        try:
            self._get_redis().delete(self._key(path))
        except self._redis_lib.RedisError as e:
            raise StorageError(f"failed to delete '{path}': {e}") from e
