"""
Memory Storage Adapter - In-memory key-value storage (testing only).
"""

import threading
from typing import Optional, Dict
from mashery_auth.ports.storage_port import StoragePort


class MemoryStorageAdapter(StoragePort):
    """
    In-memory storage.

    WARNING: Only for testing. Entries are lost on restart.
    Not suitable for production or multi-process deployments.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._entries: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[bytes]:
        with self._lock:
            return self._entries.get(path)

    def put(self, path: str, value: bytes) -> None:
        with self._lock:
            self._entries[path] = bytes(value)

    def delete(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)

    def keys(self) -> list[str]:
        """List stored paths (test helper)."""
        with self._lock:
            return sorted(self._entries)
