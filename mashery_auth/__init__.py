"""
Mashery Auth - Short-lived Mashery API credentials.

Operators store long-lived area credentials once; callers obtain V2
signatures or V3 access token leases by area name without ever seeing
the secret.

Usage:
    from mashery_auth import MasheryAuthClient
    from mashery_auth.adapters import RedisStorageAdapter, MasheryOAuthAdapter

    client = MasheryAuthClient(
        storage=RedisStorageAdapter(redis_url="redis://localhost"),
        oauth=MasheryOAuthAdapter(),
    )

    # Store area credentials
    client.write_credentials("production", {
        "area_id": "...", "api_key": "...", "secret": "...",
        "username": "...", "password": "...", "lease_duration": "15m",
    })

    # Issue a V3 access token lease
    secret = client.read_v3("production")
"""

__version__ = "0.1.0"

from mashery_auth.sdk.client import MasheryAuthClient, SecretResponse
from mashery_auth.config import MasheryAuthConfig
from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.lease import IssuedV2Artifact, IssuedV3Lease, LeaseInternalState

__all__ = [
    "MasheryAuthClient",
    "SecretResponse",
    "MasheryAuthConfig",
    "CredentialRecord",
    "IssuedV2Artifact",
    "IssuedV3Lease",
    "LeaseInternalState",
]
