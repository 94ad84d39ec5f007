"""
Tests for the scenario registry and the demo CLI.
"""

import json

import pytest

from closure_alpha.config.config_loader import DemoConfig
from closure_alpha.core.sinks import CollectingSink, null_sink
from closure_alpha.demos.registry import SCENARIOS, resolve, run_scenarios
from tools import closure_demo


def test_resolve_expands_all_once():
    assert resolve(["all"]) == list(SCENARIOS)
    assert resolve(["car", "all"]) == ["car"] + [n for n in SCENARIOS if n != "car"]


def test_resolve_unknown_name():
    with pytest.raises(KeyError):
        resolve(["teleport"])


def test_account_scenario_transcript():
    sink = CollectingSink()
    (summary,) = run_scenarios(["account"], DemoConfig(), sink)

    assert summary["scenario"] == "account"
    assert summary["transcript"] == sink.lines == [
        "Deposited ₹500.",
        "Current Balance: ₹1500",
        "Withdrew ₹200.",
        "Current Balance: ₹1300",
        "Direct balance access: undefined",
    ]
    assert summary["values"]["after_withdraw"] == 1300
    assert summary["values"]["direct_access"] == "undefined"


def test_counter_and_car_scenarios():
    counter, car = run_scenarios(["counter", "car"], DemoConfig(), null_sink)
    assert counter["values"] == {"c1": [1, 2], "c2": [1]}
    assert car["values"]["car_model"] == ["Model 1", "24/2025"]
    assert car["values"]["car_details"] == ["Toyota", "Black"]


def test_all_scenarios_run():
    summaries = run_scenarios(["all"], DemoConfig(), null_sink)
    assert [s["scenario"] for s in summaries] == list(SCENARIOS)
    by_name = {s["scenario"]: s for s in summaries}
    assert by_name["printing_counter"]["transcript"] == ["Inner: 1", "Inner: 2", "Inner: 3"]
    assert by_name["display"]["values"] == {"name": "Mozilla"}


def test_cli_writes_report(tmp_path, capsys):
    report = tmp_path / "report.json"
    code = closure_demo.main(["--scenario", "counter", "--scenario", "account", "--report", str(report)])

    assert code == 0
    out = capsys.readouterr().out
    assert "c2: 1" in out
    assert "Current Balance: ₹1300" in out

    data = json.loads(report.read_text(encoding="utf-8"))
    assert [s["scenario"] for s in data["scenarios"]] == ["counter", "account"]
    assert data["config"]["account"]["currency_symbol"] == "₹"


def test_cli_quiet_uses_config(tmp_path, capsys):
    cfg = tmp_path / "closures.yaml"
    cfg.write_text("display:\n  name: Firefox\n", encoding="utf-8")
    report = tmp_path / "report.json"

    assert closure_demo.main(["--scenario", "display", "--quiet", "--config", str(cfg), "--report", str(report)]) == 0
    assert capsys.readouterr().out == ""
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["scenarios"][0]["values"] == {"name": "Firefox"}


def test_cli_rejects_unknown_scenario():
    with pytest.raises(SystemExit) as exc:
        closure_demo.main(["--scenario", "teleport"])
    assert exc.value.code == 2


def test_cli_rejects_missing_config(tmp_path):
    with pytest.raises(SystemExit) as exc:
        closure_demo.main(["--config", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 2


def test_cli_negative_balance_config_falls_back(tmp_path):
    cfg = tmp_path / "closures.yaml"
    cfg.write_text("account:\n  initial_balance: -5\n", encoding="utf-8")
    report = tmp_path / "report.json"

    assert closure_demo.main(["--scenario", "account", "--quiet", "--config", str(cfg), "--report", str(report)]) == 0
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["scenarios"][0]["values"]["after_withdraw"] == 1300


def test_cli_help_lists_feature_flags(capsys):
    with pytest.raises(SystemExit) as exc:
        closure_demo.main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "deposit_rejections" in out
    assert "withdraw_rejections" in out
