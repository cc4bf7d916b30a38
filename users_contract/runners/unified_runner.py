#!/usr/bin/env python3
"""
Unified Test Runner - runs the ordered Users scenarios and reports results
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from users_contract.config import get_config
from users_contract.core.data_factory import DataFactory
from users_contract.core.rest_client import RestClient
from users_contract.core.scenario_runner import Scenario, ScenarioRunner, SuiteReport
from users_contract.suites.users import USERS_SCENARIOS

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


@dataclass
class RunnerConfig:
    """Configuration for test runner execution"""
    output_format: str = "console"  # console, json
    json_file: Optional[str] = None
    verbose: bool = False
    fail_fast: bool = False


class UnifiedTestRunner:
    """Runs one ordered suite and prints the outcome"""

    def __init__(self, config: RunnerConfig, scenarios: Sequence[Scenario] = USERS_SCENARIOS):
        self.config = config
        self.scenarios = list(scenarios)
        self.test_config = get_config()

    async def run(self) -> SuiteReport:
        client = RestClient(self.test_config)
        runner = ScenarioRunner(client, DataFactory(self.test_config))

        print(f"🔗 Users API: {self.test_config.api_base_url}")
        try:
            report = await runner.run(self.scenarios, stop_on_failure=self.config.fail_fast)
        finally:
            leftovers = await runner.teardown()
            if leftovers:
                print(f"⚠️  Could not clean up users: {', '.join(str(i) for i in leftovers)}")
        return report

    def print_report(self, report: SuiteReport) -> None:
        if self.config.output_format == "json":
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print("\n" + "=" * 60)
            print("🧪 USERS API CONTRACT SUMMARY")
            print("=" * 60)
            for result in report.results:
                if result.success:
                    print(f"✅ {result.name} ({result.duration:.2f}s)")
                else:
                    print(f"❌ {result.name} [{result.error_kind}]: {result.error_message}")
            print("-" * 60)
            print(f"📈 OVERALL: {report.passed}/{len(report.results)} scenarios passed")
            print(f"⏱️  TOTAL TIME: {report.total_duration:.2f} seconds")
            print("=" * 60)

        if self.config.json_file:
            with open(self.config.json_file, "w") as f:
                json.dump(report.to_dict(), f, indent=2)
            print(f"📝 Results written to {self.config.json_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ordered contract tests for the Users REST API")
    parser.add_argument("--list", action="store_true", help="List scenarios in execution order and exit")
    parser.add_argument("--output", choices=["console", "json"], default="console", help="Report format")
    parser.add_argument("--json-file", help="Also write the JSON report to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failed scenario")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for position, scenario in enumerate(USERS_SCENARIOS, start=1):
            marker = " (requires user)" if scenario.requires_entity else ""
            print(f"{position:2d}. {scenario.name}{marker} - {scenario.description}")
        return EXIT_OK

    config = RunnerConfig(
        output_format=args.output,
        json_file=args.json_file,
        verbose=args.verbose,
        fail_fast=args.fail_fast,
    )

    try:
        runner = UnifiedTestRunner(config)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_CONFIG

    report = asyncio.run(runner.run())
    runner.print_report(report)
    return EXIT_OK if report.success else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
