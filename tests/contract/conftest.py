"""
Live contract fixtures
The ordered suite runs once per session against the real Users API
"""

import os

import pytest
import pytest_asyncio

from users_contract.config import get_config
from users_contract.core.data_factory import DataFactory
from users_contract.core.rest_client import RestClient
from users_contract.core.scenario_runner import ScenarioRunner
from users_contract.suites.users import USERS_SCENARIOS


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless an API token is configured"""
    if os.getenv("USERS_API_TOKEN"):
        return
    skip_live = pytest.mark.skip(reason="USERS_API_TOKEN not set - live contract tests disabled")
    for item in items:
        if item.get_closest_marker("contract"):
            item.add_marker(skip_live)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def live_report():
    """Run every scenario in order once, then clean up anything left behind"""
    config = get_config()
    runner = ScenarioRunner(RestClient(config), DataFactory(config))

    print(f"\n🔗 Running ordered Users scenarios against {config.api_base_url}")
    try:
        report = await runner.run(USERS_SCENARIOS)
    finally:
        leftovers = await runner.teardown()
        if leftovers:
            print(f"⚠️  Users left behind: {leftovers}")
    yield report
