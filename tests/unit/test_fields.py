"""
Unit tests for request field parsing.
"""

import pytest
from mashery_auth.sdk.fields import parse_credential_fields, parse_duration_seconds
from mashery_auth.domain.errors import InvalidFieldError


@pytest.mark.parametrize(
    "value,seconds",
    [
        (900, 900),
        ("900", 900),
        ("15m", 900),
        ("1h", 3600),
        ("1h30m", 5400),
        ("90s", 90),
        (0, 0),
    ],
)
def test_parse_duration(value, seconds):
    """Test seconds and duration strings."""
    assert parse_duration_seconds(value) == seconds


@pytest.mark.parametrize("value", ["", "15x", "m", -5, True, 1.5, None])
def test_parse_duration_invalid(value):
    """Test unparseable durations are rejected."""
    with pytest.raises(InvalidFieldError):
        parse_duration_seconds(value)


def test_parse_fields_only_supplied():
    """Test omitted fields stay omitted so merges preserve them."""
    parsed = parse_credential_fields({"qps": "5"})

    assert parsed == {"qps": 5}


def test_parse_fields_types():
    """Test each field is coerced to its declared type."""
    parsed = parse_credential_fields({
        "area_id": "uuid",
        "area_nid": "42",
        "api_key": "k",
        "secret": "s",
        "username": "u",
        "password": "p",
        "qps": 3,
        "lease_duration": "5m",
        "unknown": "ignored",
    })

    assert parsed["area_nid"] == 42
    assert parsed["lease_duration"] == 300
    assert "unknown" not in parsed


@pytest.mark.parametrize(
    "fields",
    [
        {"area_nid": "abc"},
        {"qps": True},
        {"api_key": 123},
    ],
)
def test_parse_fields_invalid(fields):
    """Test wrong types are rejected."""
    with pytest.raises(InvalidFieldError):
        parse_credential_fields(fields)
