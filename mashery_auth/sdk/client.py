"""
Mashery Auth Client - Host-facing adapter over the lease core.

Translates path/operation requests of a secrets host into typed
operations:

    credentials/<name>   write (create or update), delete
    auth/<name>/v2       read  -> V2 signature, 60s, not renewable
    auth/<name>/v3       read  -> V3 access token lease

Renewal and revocation act on the internal data of a previously issued
secret, not on a path.
"""

import logging
import re
import time
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Callable

from mashery_auth.adapters.lease_sealer import LeaseSealer
from mashery_auth.adapters.mashery_oauth import MasheryOAuthAdapter
from mashery_auth.config import MasheryAuthConfig
from mashery_auth.core.record_store import CredentialRecordStore, AREA_PATH_PREFIX
from mashery_auth.core.v2_issuer import V2SignatureIssuer
from mashery_auth.core.v3_manager import V3TokenManager
from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.lease import LeaseInternalState
from mashery_auth.log import get_logger
from mashery_auth.domain.errors import (
    LeaseStateError,
    RecordNotFoundError,
    UnsupportedOperationError,
)
from mashery_auth.ports.oauth_port import OAuthExchangePort
from mashery_auth.ports.storage_port import StoragePort
from mashery_auth.sdk.fields import parse_credential_fields


logger = logging.getLogger(__name__)

SECRET_V2_ACCESS = "v2_access"
SECRET_V3_ACCESS = "v3_access"

_NAME = r"(?P<name>\w(([\w\-.@]+)?\w)?)"
_CREDENTIALS_PATH = re.compile(rf"^credentials/{_NAME}$")
_V2_PATH = re.compile(rf"^auth/{_NAME}/v2$")
_V3_PATH = re.compile(rf"^auth/{_NAME}/v3$")

HELP = {
    "credentials": (
        "Saves Mashery credentials",
        "Write-only storage of the Mashery credentials needed for V2 signatures and "
        "V3 access tokens. Supply only the fields the intended method needs: "
        "area_nid, api_key and secret for V2; area_id, api_key, secret, username and "
        "password for V3. qps defaults to 2, lease_duration to 15 minutes.",
    ),
    "v2": (
        "Retrieves Mashery V2 API authorization signature",
        "Returns api key, area numeric id and a time-salted signature of the secret. "
        "The lease lasts one minute and is neither renewable nor revocable; "
        "applications should fetch a new signature every minute.",
    ),
    "v3": (
        "Retrieves Mashery V3 API access token",
        "Returns an access token and the qps it may use. The lease lasts the area's "
        "lease duration (default 15 minutes) or the token's validity, whichever is "
        "shorter, and can be renewed up to the token's real expiry. Revoking the "
        "lease exchanges the refresh token, which invalidates the access token.",
    ),
}


@dataclass
class SecretResponse:
    """
    Secret handed to the host runtime.

    data is caller-visible; internal_data must be kept from the caller
    and returned unchanged on renew/revoke.
    """
    secret_type: str
    data: Dict[str, Any] = field(default_factory=dict)
    internal_data: Dict[str, Any] = field(default_factory=dict, repr=False)
    ttl: int = 0
    max_ttl: int = 0
    renewable: bool = False


class MasheryAuthClient:
    """
    High-level client combining record storage, V2 signing and V3 leases.

    Example:
        from mashery_auth import MasheryAuthClient
        from mashery_auth.adapters import MemoryStorageAdapter, MasheryOAuthAdapter

        client = MasheryAuthClient(
            storage=MemoryStorageAdapter(),
            oauth=MasheryOAuthAdapter(),
        )

        client.write_credentials("production", {"area_id": "...", "api_key": "...", ...})
        secret = client.read_v3("production")
        secret = client.renew(secret.secret_type, secret.internal_data)
        client.revoke(secret.secret_type, secret.internal_data)
    """

    def __init__(
        self,
        storage: StoragePort,
        oauth: OAuthExchangePort,
        sealer: Optional[LeaseSealer] = None,
        clock: Callable[[], float] = time.time,
        storage_prefix: str = AREA_PATH_PREFIX,
    ):
        """
        Initialize client with adapters.

        Args:
            storage: Durable storage for area records (required)
            oauth: Upstream token exchange, shared by all requests (required)
            sealer: Seals V3 lease internal data; plain dict if omitted
            clock: Source of epoch seconds
            storage_prefix: Key prefix of area records
        """
        self._records = CredentialRecordStore(storage, prefix=storage_prefix)
        self._v2 = V2SignatureIssuer(clock=clock)
        self._v3 = V3TokenManager(oauth=oauth, records=self._records, clock=clock)
        self._sealer = sealer

    @classmethod
    def from_config(
        cls,
        config: MasheryAuthConfig,
        storage: StoragePort,
        oauth: Optional[OAuthExchangePort] = None,
    ) -> "MasheryAuthClient":
        """Build a client from settings."""
        get_logger(level=config.log_level)
        return cls(
            storage=storage,
            oauth=oauth or MasheryOAuthAdapter(token_url=config.token_url, timeout=config.http_timeout),
            sealer=LeaseSealer(config.lease_seal_secret) if config.lease_seal_secret else None,
            storage_prefix=config.storage_prefix,
        )

    # Credentials

    def write_credentials(self, name: str, fields: Dict[str, Any]) -> bool:
        """
        Create or update the credentials of an area.

        A new area gets defaults for omitted fields; an existing area
        keeps the stored value of every omitted field.

        Args:
            name: Area logical name
            fields: Raw request fields

        Returns:
            True if the area was created, False if updated
        """
        parsed = parse_credential_fields(fields)

        if self._records.exists(name):
            self._records.update(name, parsed)
            return False

        record = CredentialRecord.from_request(parsed)
        self._records.write(name, record)
        logger.info("Stored area %s; lease duration for access token is %d", name, record.lease_duration)
        return True

    def delete_credentials(self, name: str) -> None:
        """Delete the credentials of an area."""
        self._records.delete(name)
        logger.info("Deleted area %s", name)

    def _require_record(self, name: str) -> CredentialRecord:
        record = self._records.read(name)
        if record is None:
            raise RecordNotFoundError(name)
        return record

    # Issuance

    def read_v2(self, name: str) -> SecretResponse:
        """Issue a V2 signature for the area."""
        artifact = self._v2.issue(self._require_record(name))
        return SecretResponse(
            secret_type=SECRET_V2_ACCESS,
            data=artifact.to_response(),
            ttl=artifact.ttl,
            max_ttl=artifact.ttl,
            renewable=artifact.renewable,
        )

    def read_v3(self, name: str) -> SecretResponse:
        """Issue a V3 access token lease for the area."""
        record = self._require_record(name)
        lease = self._v3.acquire(record, self._records.path_for(name))
        return SecretResponse(
            secret_type=SECRET_V3_ACCESS,
            data=lease.to_response(),
            internal_data=self._pack(lease.internal),
            ttl=lease.ttl,
            max_ttl=lease.max_ttl,
            renewable=lease.renewable,
        )

    # Lease lifecycle

    def renew(self, secret_type: str, internal_data: Dict[str, Any]) -> SecretResponse:
        """
        Renew a previously issued secret.

        Returns:
            Secret with the new TTL and the same internal data

        Raises:
            LeaseStateError: Secret cannot be renewed
        """
        if secret_type == SECRET_V2_ACCESS:
            raise LeaseStateError("V2 signatures are not renewable, request a new one")
        if secret_type != SECRET_V3_ACCESS:
            raise UnsupportedOperationError(f"unknown secret type: {secret_type}")

        ttl = self._v3.renew(self._unpack(internal_data))
        return SecretResponse(
            secret_type=secret_type,
            internal_data=internal_data,
            ttl=ttl,
            renewable=True,
        )

    def revoke(self, secret_type: str, internal_data: Dict[str, Any]) -> None:
        """Revoke a previously issued secret. Upstream failures are only logged."""
        if secret_type == SECRET_V2_ACCESS:
            self._v2.revoke()
            return
        if secret_type != SECRET_V3_ACCESS:
            raise UnsupportedOperationError(f"unknown secret type: {secret_type}")

        self._v3.revoke(self._unpack(internal_data))

    def _pack(self, state: LeaseInternalState) -> Dict[str, Any]:
        if self._sealer:
            return self._sealer.seal(state)
        return state.to_dict()

    def _unpack(self, internal_data: Dict[str, Any]) -> LeaseInternalState:
        if self._sealer:
            return self._sealer.unseal(internal_data)
        return LeaseInternalState.from_dict(internal_data)

    # Routing

    def handle(
        self,
        operation: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[SecretResponse]:
        """
        Dispatch a host request.

        Args:
            operation: create, update, read or delete
            path: Request path relative to the mount
            data: Request fields

        Returns:
            SecretResponse for reads, None otherwise

        Raises:
            UnsupportedOperationError: Unknown path or operation
        """
        path = path.strip("/")

        match = _CREDENTIALS_PATH.match(path)
        if match:
            if operation in ("create", "update"):
                self.write_credentials(match.group("name"), data or {})
                return None
            if operation == "delete":
                self.delete_credentials(match.group("name"))
                return None
        elif operation == "read":
            match = _V2_PATH.match(path)
            if match:
                return self.read_v2(match.group("name"))
            match = _V3_PATH.match(path)
            if match:
                return self.read_v3(match.group("name"))

        raise UnsupportedOperationError(f"unsupported operation '{operation}' on path '{path}'")

    @staticmethod
    def help(path: str) -> Dict[str, str]:
        """Help synopsis and description for a path."""
        path = path.strip("/")
        if _CREDENTIALS_PATH.match(path):
            key = "credentials"
        elif _V2_PATH.match(path):
            key = "v2"
        elif _V3_PATH.match(path):
            key = "v3"
        else:
            raise UnsupportedOperationError(f"no help for path '{path}'")

        synopsis, description = HELP[key]
        return {"synopsis": synopsis, "description": description}
