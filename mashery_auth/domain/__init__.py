"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.lease import IssuedV2Artifact, IssuedV3Lease, LeaseInternalState
from mashery_auth.domain.errors import (
    MasheryAuthError,
    InsufficientDataError,
    InvalidFieldError,
    RecordNotFoundError,
    StorageError,
    RecordDecodeError,
    UpstreamExchangeError,
    LeaseStateError,
    TokenExpiredError,
    TokenNearExpiryError,
    InvalidLeaseStateError,
    UnsupportedOperationError,
)

__all__ = [
    "CredentialRecord",
    "IssuedV2Artifact",
    "IssuedV3Lease",
    "LeaseInternalState",
    # Errors
    "MasheryAuthError",
    "InsufficientDataError",
    "InvalidFieldError",
    "RecordNotFoundError",
    "StorageError",
    "RecordDecodeError",
    "UpstreamExchangeError",
    "LeaseStateError",
    "TokenExpiredError",
    "TokenNearExpiryError",
    "InvalidLeaseStateError",
    "UnsupportedOperationError",
]
