"""
Unit tests for configuration.
"""

import pytest
from mashery_auth.config import MasheryAuthConfig


def test_defaults_from_empty_env():
    """Test unset variables keep defaults."""
    config = MasheryAuthConfig.from_env({})

    assert config.token_url == "https://api.mashery.com/v3/token"
    assert config.http_timeout == 10.0
    assert config.lease_seal_secret is None
    assert config.storage_prefix == "area/"
    assert config.log_level == "INFO"


def test_values_from_env():
    """Test MASHERY_* variables override defaults."""
    config = MasheryAuthConfig.from_env({
        "MASHERY_TOKEN_URL": "https://example.test/token",
        "MASHERY_HTTP_TIMEOUT": "2.5",
        "MASHERY_LEASE_SEAL_SECRET": "seal",
        "MASHERY_STORAGE_PREFIX": "mashery/area/",
        "MASHERY_LOG_LEVEL": "debug",
    })

    assert config.token_url == "https://example.test/token"
    assert config.http_timeout == 2.5
    assert config.lease_seal_secret == "seal"
    assert config.storage_prefix == "mashery/area/"
    assert config.log_level == "DEBUG"


def test_invalid_timeout():
    """Test a non-numeric timeout is rejected."""
    with pytest.raises(ValueError):
        MasheryAuthConfig.from_env({"MASHERY_HTTP_TIMEOUT": "soon"})


def test_from_env_reads_os_environ(monkeypatch):
    """Test os.environ is used by default."""
    monkeypatch.setenv("MASHERY_LEASE_SEAL_SECRET", "from-os")

    assert MasheryAuthConfig.from_env().lease_seal_secret == "from-os"
