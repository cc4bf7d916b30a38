"""
Environment-driven configuration
"""

import pytest

from users_contract.config import DEFAULT_BASE_URL, TestConfig, get_config


def test_defaults(monkeypatch):
    for name in ("USERS_API_BASE_URL", "USERS_API_TIMEOUT_SECONDS", "USERS_MISSING_ID"):
        monkeypatch.delenv(name, raising=False)

    config = TestConfig()

    assert config.api_base_url == DEFAULT_BASE_URL
    assert config.request_timeout == 30.0
    assert config.missing_user_id == 999999999


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("USERS_API_BASE_URL", "http://localhost:9000/v2")
    monkeypatch.setenv("USERS_API_TOKEN", "secret")
    monkeypatch.setenv("USERS_MISSING_ID", "123")

    config = get_config()

    assert config.api_base_url == "http://localhost:9000/v2"
    assert config.api_token == "secret"
    assert config.missing_user_id == 123


def test_missing_token_is_reported(monkeypatch):
    monkeypatch.delenv("USERS_API_TOKEN", raising=False)

    with pytest.raises(ValueError, match="USERS_API_TOKEN"):
        get_config()


def test_validate_collects_every_problem():
    config = TestConfig(api_base_url="ftp://host", api_token="", request_timeout=0, missing_user_id=-1)

    errors = config.validate()

    assert len(errors) == 4
