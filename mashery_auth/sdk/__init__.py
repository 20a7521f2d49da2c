"""
SDK - Host-facing client.
"""

from mashery_auth.sdk.client import MasheryAuthClient, SecretResponse

__all__ = [
    "MasheryAuthClient",
    "SecretResponse",
]
