"""
Unit tests for lease state sealing.
"""

import jwt
import pytest
from mashery_auth.adapters import LeaseSealer
from mashery_auth.domain.lease import LeaseInternalState
from mashery_auth.domain.errors import InvalidLeaseStateError


@pytest.fixture
def sealer():
    return LeaseSealer(secret="test-seal-secret")


@pytest.fixture
def state():
    return LeaseInternalState(
        storage_path="area/prod",
        refresh_token="refresh-1",
        token_expiry_epoch=1_700_003_600,
    )


def test_seal_round_trip(sealer, state):
    """Test sealed state unseals to the same value."""
    sealed = sealer.seal(state)

    assert set(sealed) == {"sealed_state"}
    assert sealer.unseal(sealed) == state


def test_forged_expiry_rejected(sealer, state):
    """Test a re-signed state with a later expiry fails verification."""
    sealed = sealer.seal(state)
    payload = jwt.decode(sealed["sealed_state"], options={"verify_signature": False})
    payload["tex"] += 86400
    forged = jwt.encode(payload, "attacker-secret", algorithm="HS256")

    with pytest.raises(InvalidLeaseStateError):
        sealer.unseal({"sealed_state": forged})


def test_other_secret_rejected(state):
    """Test state sealed with another secret fails verification."""
    sealed = LeaseSealer(secret="one").seal(state)

    with pytest.raises(InvalidLeaseStateError):
        LeaseSealer(secret="two").unseal(sealed)


@pytest.mark.parametrize("internal_data", [None, {}, {"sealed_state": 42}, {"sealed_state": "not.a.jwt"}])
def test_missing_or_garbage_rejected(sealer, internal_data):
    """Test absent or malformed sealed data is rejected."""
    with pytest.raises(InvalidLeaseStateError):
        sealer.unseal(internal_data)


def test_empty_secret_refused():
    """Test a sealer needs a secret."""
    with pytest.raises(ValueError):
        LeaseSealer(secret="")


def test_plain_state_validation():
    """Test unsealed internal data is type-checked."""
    good = {"siteStoragePath": "area/prod", "refresh_token": "r", "token_expiry_time": 1700000000.0}
    assert LeaseInternalState.from_dict(good).token_expiry_epoch == 1700000000

    for bad in (
        {},
        {**good, "siteStoragePath": ""},
        {**good, "refresh_token": None},
        {**good, "token_expiry_time": "soon"},
        {**good, "token_expiry_time": True},
    ):
        with pytest.raises(InvalidLeaseStateError):
            LeaseInternalState.from_dict(bad)
