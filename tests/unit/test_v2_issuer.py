"""
Unit tests for V2 signature issuer.
"""

import hashlib
import pytest
from mashery_auth.core.v2_issuer import V2SignatureIssuer
from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.errors import InsufficientDataError


def test_issue_signature(clock):
    """Test signature is MD5 of key, secret and unix time."""
    issuer = V2SignatureIssuer(clock=clock)
    record = CredentialRecord(area_nid=100, api_key="k", api_secret="s", max_qps=4)

    artifact = issuer.issue(record)

    expected = hashlib.md5(f"ks{clock.now}".encode()).hexdigest()
    assert artifact.signed_secret == expected
    assert artifact.ttl == 60
    assert artifact.renewable is False
    assert artifact.to_response() == {
        "area_nid": 100,
        "api_key": "k",
        "sig": expected,
        "qps": 4,
    }


def test_signature_is_time_salted(clock):
    """Test signatures issued in different seconds differ."""
    issuer = V2SignatureIssuer(clock=clock)
    record = CredentialRecord(area_nid=100, api_key="k", api_secret="s")

    first = issuer.issue(record).signed_secret
    clock.advance(1)
    second = issuer.issue(record).signed_secret

    assert first != second
    assert len(first) == len(second) == 32
    int(first, 16)


@pytest.mark.parametrize(
    "record",
    [
        CredentialRecord(area_nid=0, api_key="k", api_secret="s"),
        CredentialRecord(area_nid=100, api_key="", api_secret="s"),
        CredentialRecord(area_nid=100, api_key="k", api_secret=""),
    ],
)
def test_insufficient_data(clock, record):
    """Test issuing fails without area_nid, key or secret."""
    with pytest.raises(InsufficientDataError):
        V2SignatureIssuer(clock=clock).issue(record)
