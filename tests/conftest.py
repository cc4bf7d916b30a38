"""
pytest configuration and fixtures for the Users contract suite
Offline fixtures run every component against FakeUsersApi
"""

import httpx
import pytest

from users_contract.config import TestConfig
from users_contract.core.data_factory import DataFactory
from users_contract.core.response_verifier import ResponseVerifier
from users_contract.core.rest_client import RestClient
from users_contract.core.scenario_runner import ScenarioRunner
from users_contract.core.scenario_state import ScenarioState

from tests.fake_api import FakeUsersApi

TEST_TOKEN = "test-token"


@pytest.fixture
def test_config() -> TestConfig:
    return TestConfig(
        api_base_url="https://api.test/public/v2",
        api_token=TEST_TOKEN,
        request_timeout=5.0,
        missing_user_id=999999999,
        email_domain="example.test",
        test_data_prefix="unit",
    )


@pytest.fixture
def fake_api() -> FakeUsersApi:
    return FakeUsersApi(token=TEST_TOKEN)


@pytest.fixture
def rest_client(test_config, fake_api) -> RestClient:
    return RestClient(test_config, transport=httpx.MockTransport(fake_api.handle))


@pytest.fixture
def data_factory(test_config) -> DataFactory:
    return DataFactory(test_config, seed=1234)


@pytest.fixture
def verifier() -> ResponseVerifier:
    return ResponseVerifier()


@pytest.fixture
def scenario_state() -> ScenarioState:
    return ScenarioState()


@pytest.fixture
def runner(rest_client, data_factory, verifier, scenario_state) -> ScenarioRunner:
    return ScenarioRunner(rest_client, data_factory, verifier, scenario_state)
