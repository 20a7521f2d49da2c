"""
Lease Domain Models - Issued V2 and V3 artifacts and their lease bounds.
"""

from dataclasses import dataclass, field
from typing import Dict, Any

from mashery_auth.domain.errors import InvalidLeaseStateError


V2_LEASE_SECONDS = 60

# Keys of the internal lease data as the host runtime stores it
INTERNAL_STORAGE_PATH = "siteStoragePath"
INTERNAL_REFRESH_TOKEN = "refresh_token"
INTERNAL_TOKEN_EXPIRY = "token_expiry_time"


@dataclass
class IssuedV2Artifact:
    """
    V2 signed secret.

    Fixed 60 second lease; not renewable, nothing to revoke upstream.
    """
    area_nid: int
    api_key: str = field(repr=False)
    max_qps: int
    signed_secret: str = field(repr=False)
    ttl: int = V2_LEASE_SECONDS
    renewable: bool = False

    def to_response(self) -> Dict[str, Any]:
        """Caller-visible fields."""
        return {
            "area_nid": self.area_nid,
            "api_key": self.api_key,
            "sig": self.signed_secret,
            "qps": self.max_qps,
        }


@dataclass(frozen=True)
class LeaseInternalState:
    """
    Caller-invisible state of a V3 lease.

    Immutable after issuance. token_expiry_epoch is the upstream
    expiry of the access token and bounds every renewal.
    """
    storage_path: str
    refresh_token: str = field(repr=False)
    token_expiry_epoch: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            INTERNAL_STORAGE_PATH: self.storage_path,
            INTERNAL_REFRESH_TOKEN: self.refresh_token,
            INTERNAL_TOKEN_EXPIRY: self.token_expiry_epoch,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaseInternalState":
        """
        Rebuild internal state handed back by the host runtime.

        Raises:
            InvalidLeaseStateError: A field is missing or has the wrong type
        """
        if not data:
            raise InvalidLeaseStateError("request does not bear lease internal data")

        storage_path = data.get(INTERNAL_STORAGE_PATH)
        if not isinstance(storage_path, str) or not storage_path:
            raise InvalidLeaseStateError("cannot read storage path out of internal data")

        refresh_token = data.get(INTERNAL_REFRESH_TOKEN)
        if not isinstance(refresh_token, str):
            raise InvalidLeaseStateError("cannot read refresh token out of internal data")

        # JSON round-trips may turn the epoch into a float
        expiry = data.get(INTERNAL_TOKEN_EXPIRY)
        if isinstance(expiry, bool) or not isinstance(expiry, (int, float)):
            raise InvalidLeaseStateError("cannot read token expiry time out of internal data")

        return cls(
            storage_path=storage_path,
            refresh_token=refresh_token,
            token_expiry_epoch=int(expiry),
        )


@dataclass
class IssuedV3Lease:
    """
    V3 access token lease.

    ttl is the usable window granted now; max_ttl is the ceiling the
    external lease manager may renew up to. Renewals are further capped
    by internal.token_expiry_epoch.
    """
    access_token: str = field(repr=False)
    max_qps: int
    ttl: int
    max_ttl: int
    internal: LeaseInternalState
    renewable: bool = True

    def to_response(self) -> Dict[str, Any]:
        """Caller-visible fields. Internal state is never included."""
        return {
            "access_token": self.access_token,
            "qps": self.max_qps,
        }
