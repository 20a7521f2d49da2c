"""
Example: V2 signature and V3 access token lease for a Mashery area.

Shows the recommended pattern:
1. Operator stores area credentials once
2. Caller fetches a V2 signature or a V3 access token by area name
3. Host renews the V3 lease until the token runs out
4. Host revokes the lease when the work is done

Set MASHERY_AREA_ID, MASHERY_API_KEY, MASHERY_SECRET, MASHERY_USERNAME,
MASHERY_PASSWORD (and MASHERY_AREA_NID for V2) before running.
"""

import os
from mashery_auth import MasheryAuthClient, MasheryAuthConfig
from mashery_auth.adapters import MemoryStorageAdapter


def main():
    print("=" * 60)
    print("Mashery Lease Flow Example")
    print("=" * 60)

    config = MasheryAuthConfig.from_env()
    client = MasheryAuthClient.from_config(config, storage=MemoryStorageAdapter())

    # 1. Store area credentials
    print("\n1. Storing area credentials...")
    created = client.write_credentials("example", {
        "area_id": os.environ.get("MASHERY_AREA_ID"),
        "area_nid": os.environ.get("MASHERY_AREA_NID"),
        "api_key": os.environ.get("MASHERY_API_KEY"),
        "secret": os.environ.get("MASHERY_SECRET"),
        "username": os.environ.get("MASHERY_USERNAME"),
        "password": os.environ.get("MASHERY_PASSWORD"),
        "lease_duration": "5m",
    })
    print(f"   ✓ Area created: {created}")

    # 2. V2 signature
    if os.environ.get("MASHERY_AREA_NID"):
        print("\n2. Fetching V2 signature...")
        v2 = client.read_v2("example")
        print(f"   ✓ Signature: {v2.data['sig']} (valid {v2.ttl}s)")

    # 3. V3 access token
    print("\n3. Fetching V3 access token...")
    v3 = client.read_v3("example")
    print(f"   ✓ Token: {v3.data['access_token'][:8]}...")
    print(f"   ✓ TTL: {v3.ttl}s, max TTL: {v3.max_ttl}s")

    renewed = client.renew(v3.secret_type, v3.internal_data)
    print(f"   ✓ Renewed for {renewed.ttl}s")

    # 4. Revoke
    print("\n4. Revoking lease...")
    client.revoke(v3.secret_type, v3.internal_data)
    print("   ✓ Revoked (access token invalidated upstream)")


if __name__ == "__main__":
    main()
