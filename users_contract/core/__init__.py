from users_contract.core.data_factory import DataFactory
from users_contract.core.response_verifier import NOT_FOUND_PHRASES, ResponseVerifier
from users_contract.core.rest_client import ApiResponse, RestClient
from users_contract.core.scenario_runner import Scenario, ScenarioResult, ScenarioRunner, SuiteReport
from users_contract.core.scenario_state import EntityPhase, ScenarioState

__all__ = [
    "ApiResponse",
    "DataFactory",
    "EntityPhase",
    "NOT_FOUND_PHRASES",
    "ResponseVerifier",
    "RestClient",
    "Scenario",
    "ScenarioResult",
    "ScenarioRunner",
    "ScenarioState",
    "SuiteReport",
]
