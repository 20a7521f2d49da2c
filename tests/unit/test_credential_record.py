"""
Unit tests for CredentialRecord domain model.
"""

import pytest
from mashery_auth.domain.credential import CredentialRecord, DEFAULT_LEASE_DURATION, DEFAULT_MAX_QPS


def test_record_defaults():
    """Test a record built from no fields gets quota and lease defaults."""
    record = CredentialRecord.from_request({})

    assert record.max_qps == DEFAULT_MAX_QPS == 2
    assert record.lease_duration == DEFAULT_LEASE_DURATION == 900
    assert not record.sufficient_for_v2()
    assert not record.sufficient_for_v3()


def test_merge_preserves_omitted_fields(v3_fields):
    """Test merge overwrites only supplied fields."""
    record = CredentialRecord.from_request({**v3_fields, "qps": 10, "lease_duration": 300})

    record.merge({"qps": 5})

    assert record.max_qps == 5
    assert record.lease_duration == 300
    assert record.area_id == "a"
    assert record.api_secret == "s"
    assert record.password == "p"


def test_merge_zero_lease_duration_normalized():
    """Test a zero lease duration falls back to 900 seconds."""
    record = CredentialRecord.from_request({"lease_duration": 300})

    record.merge({"lease_duration": 0})

    assert record.lease_duration == 900


@pytest.mark.parametrize("missing", ["area_nid", "api_key", "secret"])
def test_v2_readiness(v3_fields, missing):
    """Test V2 needs area_nid, api key and secret."""
    fields = dict(v3_fields)
    del fields[missing]

    assert not CredentialRecord.from_request(fields).sufficient_for_v2()


@pytest.mark.parametrize("missing", ["area_id", "api_key", "secret", "username", "password"])
def test_v3_readiness(v3_fields, missing):
    """Test V3 needs area id, key, secret, username and password."""
    fields = dict(v3_fields)
    del fields[missing]

    record = CredentialRecord.from_request(fields)
    assert not record.sufficient_for_v3()
    assert CredentialRecord.from_request(v3_fields).sufficient_for_v3()


def test_serialization_round_trip(v3_fields):
    """Test to_dict/from_dict use the stored field names."""
    record = CredentialRecord.from_request({**v3_fields, "lease_duration": 600})

    data = record.to_dict()
    assert data["secret"] == "s"
    assert data["duration"] == 600

    assert CredentialRecord.from_dict(data) == record


def test_secrets_hidden():
    """Test secrets never appear in repr or public dict."""
    record = CredentialRecord.from_request({"api_key": "key-xyz", "secret": "top-secret", "password": "hunter2"})

    text = repr(record)
    assert "top-secret" not in text
    assert "hunter2" not in text
    assert "key-xyz" not in text

    public = record.to_public_dict()
    assert "secret" not in public
    assert "password" not in public
    assert "api_key" not in public
