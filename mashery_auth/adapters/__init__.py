"""
Adapters - Implementations of ports.

Storage:
- MemoryStorageAdapter: In-memory storage (testing)
- RedisStorageAdapter: Redis
- VaultStorageAdapter: HashiCorp Vault KV v2

Upstream OAuth:
- MasheryOAuthAdapter: Mashery V3 token endpoint

Lease state:
- LeaseSealer: Signed V3 lease internal data
"""

# Storage
from mashery_auth.adapters.memory_storage import MemoryStorageAdapter
from mashery_auth.adapters.redis_storage import RedisStorageAdapter
from mashery_auth.adapters.vault_storage import VaultStorageAdapter

# Upstream OAuth
from mashery_auth.adapters.mashery_oauth import MasheryOAuthAdapter

# Lease state
from mashery_auth.adapters.lease_sealer import LeaseSealer

__all__ = [
    # Storage
    "MemoryStorageAdapter",
    "RedisStorageAdapter",
    "VaultStorageAdapter",
    # Upstream OAuth
    "MasheryOAuthAdapter",
    # Lease state
    "LeaseSealer",
]
