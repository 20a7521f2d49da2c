"""
Shared fixtures: controllable clock and a fake upstream OAuth server.
"""

import pytest
from mashery_auth.adapters import MemoryStorageAdapter
from mashery_auth.core import CredentialRecordStore
from mashery_auth.domain.errors import UpstreamExchangeError
from mashery_auth.ports.oauth_port import OAuthExchangePort, AccessTokenResponse


class FakeClock:
    """Clock returning a settable epoch second."""

    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return float(self.now)

    def advance(self, seconds: int):
        self.now += seconds


class FakeOAuth(OAuthExchangePort):
    """Records exchanges and returns canned tokens."""

    def __init__(self, expires_in: int = 3600):
        self.expires_in = expires_in
        self.fail_credentials = False
        self.fail_refresh = False
        self.credential_calls = []
        self.refresh_calls = []

    def exchange_credentials(self, api_key, api_secret, username, password, area_id):
        self.credential_calls.append((api_key, api_secret, username, password, area_id))
        if self.fail_credentials:
            raise UpstreamExchangeError("invalid_grant", status_code=400)
        n = len(self.credential_calls)
        return AccessTokenResponse(
            access_token=f"access-{n}",
            refresh_token=f"refresh-{n}",
            expires_in=self.expires_in,
        )

    def exchange_refresh_token(self, api_key, api_secret, area_id, refresh_token):
        self.refresh_calls.append((api_key, api_secret, area_id, refresh_token))
        if self.fail_refresh:
            raise UpstreamExchangeError("token endpoint unreachable")
        return AccessTokenResponse(
            access_token="access-refreshed",
            refresh_token="refresh-refreshed",
            expires_in=self.expires_in,
        )


@pytest.fixture
def v3_fields():
    """Request fields sufficient for both V2 and V3."""
    return {
        "area_id": "a",
        "area_nid": 100,
        "api_key": "k",
        "secret": "s",
        "username": "u",
        "password": "p",
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def oauth():
    return FakeOAuth()


@pytest.fixture
def storage():
    return MemoryStorageAdapter()


@pytest.fixture
def records(storage):
    return CredentialRecordStore(storage)
