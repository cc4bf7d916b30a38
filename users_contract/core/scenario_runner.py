"""
Ordered Scenario Runner
Executes scenario descriptors in a fixed order, sharing one ScenarioState

Failures stay local to the scenario that raised them; the runner always moves
on to the next scenario unless asked to stop on the first failure.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from users_contract.core.data_factory import DataFactory
from users_contract.core.response_verifier import ResponseVerifier
from users_contract.core.rest_client import RestClient
from users_contract.core.scenario_state import ScenarioState
from users_contract.errors import ContractTestError, PreconditionError

logger = logging.getLogger(__name__)

ScenarioAction = Callable[["ScenarioRunner"], Awaitable[None]]


@dataclass(frozen=True)
class Scenario:
    """One named contract check"""
    name: str
    action: ScenarioAction
    requires_entity: bool = False
    description: str = ""


@dataclass
class ScenarioResult:
    """Simple scenario result container"""
    name: str
    success: bool
    duration: float
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    skipped_call: bool = False


@dataclass
class SuiteReport:
    """Results of one ordered run"""
    results: List[ScenarioResult] = field(default_factory=list)
    total_duration: float = 0.0

    @property
    def passed(self) -> int:
        return len([r for r in self.results if r.success])

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    def result_for(self, name: str) -> ScenarioResult:
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(f"No result for scenario: {name}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "total_duration": self.total_duration,
            "results": [asdict(r) for r in self.results],
        }


class ScenarioRunner:
    """Sequential scenario coordinator"""

    def __init__(self, client: RestClient, data_factory: DataFactory,
                 verifier: Optional[ResponseVerifier] = None, state: Optional[ScenarioState] = None):
        self.client = client
        self.data_factory = data_factory
        self.verifier = verifier or ResponseVerifier()
        self.state = state or ScenarioState()
        self.config = client.config
        self.results: List[ScenarioResult] = []

    async def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        """Run one scenario, converting any failure into a failed result"""
        logger.info(f"Scenario {scenario.name}: starting")
        start_time = time.time()
        try:
            if scenario.requires_entity:
                self.state.require_entity()
            await scenario.action(self)
        except PreconditionError as e:
            result = ScenarioResult(scenario.name, False, time.time() - start_time,
                                    e.kind, str(e), skipped_call=True)
        except ContractTestError as e:
            result = ScenarioResult(scenario.name, False, time.time() - start_time, e.kind, str(e))
        except Exception as e:
            logger.exception(f"Scenario {scenario.name} raised an unexpected error")
            result = ScenarioResult(scenario.name, False, time.time() - start_time,
                                    "error", f"{type(e).__name__}: {e}")
        else:
            result = ScenarioResult(scenario.name, True, time.time() - start_time)

        if result.success:
            logger.info(f"Scenario {scenario.name}: passed in {result.duration:.3f}s")
        else:
            logger.warning(f"Scenario {scenario.name}: {result.error_kind} failure - {result.error_message}")
        self.results.append(result)
        return result

    async def run(self, scenarios: Sequence[Scenario], stop_on_failure: bool = False) -> SuiteReport:
        """Run scenarios strictly in the given order"""
        names = [s.name for s in scenarios]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"Duplicate scenario names: {', '.join(sorted(duplicates))}")

        report = SuiteReport()
        suite_start = time.time()
        for scenario in scenarios:
            result = await self.run_scenario(scenario)
            report.results.append(result)
            if stop_on_failure and not result.success:
                logger.warning(f"Stopping after failed scenario {scenario.name}")
                break
        report.total_duration = time.time() - suite_start
        return report

    async def teardown(self) -> List[int]:
        """Delete users still tracked for cleanup; returns the ids that could not be removed"""
        leftovers = []
        for user_id in self.state.tracked_ids():
            try:
                response = await self.client.delete_user(user_id)
            except ContractTestError as e:
                logger.error(f"Cleanup of user {user_id} failed: {e}")
                leftovers.append(user_id)
                continue
            if response.status_code in (204, 404):
                self.state.untrack(user_id)
                logger.info(f"Cleaned up user {user_id}")
            else:
                logger.error(f"Cleanup of user {user_id} returned {response.status_code}: {response.text}")
                leftovers.append(user_id)
        return leftovers

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get performance summary"""
        if not self.results:
            return {"message": "No results available"}

        durations = [r.duration for r in self.results]
        return {
            "count": len(durations),
            "avg_duration": sum(durations) / len(durations),
            "max_duration": max(durations),
            "slowest": max(self.results, key=lambda r: r.duration).name,
        }

    def get_success_summary(self) -> Dict[str, Any]:
        """Get success/failure summary"""
        total = len(self.results)
        successful = len([r for r in self.results if r.success])

        return {
            "total_scenarios": total,
            "successful": successful,
            "failed": total - successful,
            "success_rate": successful / total if total > 0 else 0
        }
