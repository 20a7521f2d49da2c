"""
Credential Record Store - CRUD over area credential records.

Records are JSON documents stored at "area/<logical name>". The store
owns these values exclusively; issuers only read them.
"""

import json
import logging
from typing import Optional, Dict, Any
from mashery_auth.ports.storage_port import StoragePort
from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.errors import RecordNotFoundError, RecordDecodeError, StorageError


logger = logging.getLogger(__name__)

AREA_PATH_PREFIX = "area/"


def storage_path_for_area(area_name: str, prefix: str = AREA_PATH_PREFIX) -> str:
    """Storage key of an area's credential record."""
    return f"{prefix}{area_name}"


class CredentialRecordStore:
    """
    Reads and writes CredentialRecords through a StoragePort.

    update() is read-merge-write and not compare-and-swap: concurrent
    updates of one area rely on the backend for per-key atomicity.
    """

    def __init__(self, storage: StoragePort, prefix: str = AREA_PATH_PREFIX):
        self._storage = storage
        self._prefix = prefix

    def path_for(self, area_name: str) -> str:
        return storage_path_for_area(area_name, self._prefix)

    def exists(self, area_name: str) -> bool:
        """Check whether a record is stored for the area."""
        return self._storage.get(self.path_for(area_name)) is not None

    def write(self, area_name: str, record: CredentialRecord) -> None:
        """Overwrite the full record of the area."""
        self.write_path(self.path_for(area_name), record)

    def write_path(self, path: str, record: CredentialRecord) -> None:
        try:
            payload = json.dumps(record.to_dict()).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StorageError(f"failed to serialize area data: {e}") from e
        self._storage.put(path, payload)

    def read(self, area_name: str) -> Optional[CredentialRecord]:
        """
        Read the record of the area.

        Returns:
            Record, or None if nothing is stored

        Raises:
            StorageError: Backend failure
            RecordDecodeError: Stored payload is not a credential record
        """
        return self.read_path(self.path_for(area_name))

    def read_path(self, path: str) -> Optional[CredentialRecord]:
        """Read a record by its storage path (as carried in lease state)."""
        raw = self._storage.get(path)
        if raw is None:
            return None

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise TypeError(f"expected an object, got {type(data).__name__}")
            return CredentialRecord.from_dict(data)
        except (ValueError, TypeError) as e:
            raise RecordDecodeError(
                f"cannot unmarshal area authorization data at '{path}' ({e})"
            ) from e

    def update(self, area_name: str, fields: Dict[str, Any]) -> CredentialRecord:
        """
        Merge supplied fields into the stored record.

        Args:
            area_name: Area logical name
            fields: Request fields to overwrite; omitted fields are preserved

        Returns:
            Updated record

        Raises:
            RecordNotFoundError: No record stored for the area
        """
        record = self.read(area_name)
        if record is None:
            raise RecordNotFoundError(area_name)

        record.merge(fields)
        self.write(area_name, record)
        logger.info(
            "Updated area %s fields %s; lease duration is %d",
            area_name,
            sorted(k for k in fields if fields[k] is not None),
            record.lease_duration,
        )
        return record

    def delete(self, area_name: str) -> None:
        """Remove the record. Deleting an absent record is not an error."""
        self._storage.delete(self.path_for(area_name))
