"""
Command line runner
"""

import json

import httpx

from users_contract.core.rest_client import RestClient
from users_contract.runners import unified_runner
from users_contract.runners.unified_runner import EXIT_CONFIG, EXIT_FAILED, EXIT_OK, main
from users_contract.suites.users import USERS_SCENARIOS


def test_list_prints_scenarios_in_order(capsys):
    assert main(["--list"]) == EXIT_OK

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == len(USERS_SCENARIOS)
    assert lines[0].strip().startswith("1. list_users")
    assert "(requires user)" in lines[2]


def test_configuration_error_exit_code(monkeypatch, capsys):
    monkeypatch.delenv("USERS_API_TOKEN", raising=False)

    assert main([]) == EXIT_CONFIG
    assert "USERS_API_TOKEN" in capsys.readouterr().err


def _mount_fake_api(monkeypatch, fake_api):
    original_init = RestClient.__init__

    def init(self, config=None, transport=None):
        original_init(self, config, transport=httpx.MockTransport(fake_api.handle))

    monkeypatch.setattr(RestClient, "__init__", init)
    monkeypatch.setenv("USERS_API_BASE_URL", "https://api.test/public/v2")
    monkeypatch.setenv("USERS_API_TOKEN", fake_api.token)


def test_full_run_against_fake_api(monkeypatch, fake_api, tmp_path, capsys):
    _mount_fake_api(monkeypatch, fake_api)
    report_path = tmp_path / "report.json"

    code = main(["--json-file", str(report_path)])

    assert code == EXIT_OK
    assert "USERS API CONTRACT SUMMARY" in capsys.readouterr().out
    report = json.loads(report_path.read_text())
    assert report["failed"] == 0
    assert report["passed"] == len(USERS_SCENARIOS)


def test_failing_run_exit_code_and_json(monkeypatch, fake_api, capsys):
    _mount_fake_api(monkeypatch, fake_api)
    fake_api.force("DELETE", "item", 500, {"message": "nope"})

    code = main(["--output", "json", "--fail-fast"])

    assert code == EXIT_FAILED
    out = capsys.readouterr().out
    report = json.loads(out[out.index("{"):])
    assert report["failed"] == 1
    assert report["results"][-1]["name"] == "delete_user_existing"
    assert unified_runner.USERS_SCENARIOS is USERS_SCENARIOS
