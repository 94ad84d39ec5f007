"""
Scenario registry - maps scenario names to runners.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from closure_alpha.config.config_loader import DemoConfig
from closure_alpha.core.sinks import Sink
from closure_alpha.demos import scenarios

ScenarioRunner = Callable[[DemoConfig, Sink], Dict[str, Any]]

# Runs in this order for "all"
SCENARIOS: Dict[str, ScenarioRunner] = {
    "printing_counter": scenarios.run_printing_counter,
    "counter": scenarios.run_counter,
    "display": scenarios.run_display,
    "car": scenarios.run_car,
    "account": scenarios.run_account,
}


def resolve(names: Iterable[str]) -> List[str]:
    """
    Expand "all" and check names.

    Raises:
        KeyError: for an unknown scenario name
    """
    resolved: List[str] = []
    for name in names:
        if name == "all":
            resolved.extend(n for n in SCENARIOS if n not in resolved)
            continue
        if name not in SCENARIOS:
            raise KeyError(f"unknown scenario: {name}")
        if name not in resolved:
            resolved.append(name)
    return resolved


def run_scenarios(names: Iterable[str], config: DemoConfig, sink: Sink) -> List[Dict[str, Any]]:
    """Run scenarios in order and return their summaries."""
    return [SCENARIOS[name](config, sink) for name in resolve(names)]
