"""
Core - Credential lease lifecycle.

- CredentialRecordStore: CRUD of area credential records
- V2SignatureIssuer: time-salted V2 signatures
- V3TokenManager: V3 access token acquire/renew/revoke
- lease_policy: TTL arithmetic shared by the V3 manager
"""

from mashery_auth.core.record_store import CredentialRecordStore, storage_path_for_area
from mashery_auth.core.v2_issuer import V2SignatureIssuer
from mashery_auth.core.v3_manager import V3TokenManager
from mashery_auth.core import lease_policy

__all__ = [
    "CredentialRecordStore",
    "storage_path_for_area",
    "V2SignatureIssuer",
    "V3TokenManager",
    "lease_policy",
]
