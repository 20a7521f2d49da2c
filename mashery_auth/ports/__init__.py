"""
Ports - Interfaces for the collaborators of the lease core.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from mashery_auth.ports.storage_port import StoragePort
from mashery_auth.ports.oauth_port import OAuthExchangePort, AccessTokenResponse

__all__ = [
    "StoragePort",
    "OAuthExchangePort",
    "AccessTokenResponse",
]
