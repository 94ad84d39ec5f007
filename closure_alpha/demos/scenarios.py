"""
Scripted scenarios replaying the classic closure walkthrough.

Every scenario takes the demo config and a sink, reports what it does, and
returns a summary dict: the scenario name, the transcript, and the values
the closures returned.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from closure_alpha.closures import (
    create_account,
    make_car,
    make_counter,
    make_display_name,
    make_printing_counter,
)
from closure_alpha.config.config_loader import DemoConfig
from closure_alpha.config.feature_flags import FeatureRegistry
from closure_alpha.core.sinks import CollectingSink, Sink, tee_sink

logger = logging.getLogger(__name__)


def _summary(name: str, transcript: CollectingSink, values: Dict[str, Any]) -> Dict[str, Any]:
    logger.debug(f"[DEMO] {name}: {len(transcript.lines)} lines")
    return {"scenario": name, "transcript": list(transcript.lines), "values": values}


def run_counter(config: DemoConfig, sink: Sink) -> Dict[str, Any]:
    """Two counters: the second starts fresh."""
    transcript = CollectingSink()
    out = tee_sink(transcript, sink)

    c1 = make_counter()
    first = [c1(), c1()]
    for v in first:
        out(f"c1: {v}")

    c2 = make_counter()
    second = [c2()]
    for v in second:
        out(f"c2: {v}")

    return _summary("counter", transcript, {"c1": first, "c2": second})


def run_printing_counter(config: DemoConfig, sink: Sink) -> Dict[str, Any]:
    transcript = CollectingSink()
    counter = make_printing_counter(sink=tee_sink(transcript, sink))
    values = [counter() for _ in range(3)]
    return _summary("printing_counter", transcript, {"counts": values})


def run_car(config: DemoConfig, sink: Sink) -> Dict[str, Any]:
    """One car, two views over the same enclosed fields."""
    transcript = CollectingSink()
    car = make_car(
        model=config.car.model,
        name=config.car.name,
        color=config.car.color,
        manufactured_at=config.car.manufactured_at,
        sink=tee_sink(transcript, sink),
    )
    return _summary(
        "car",
        transcript,
        {"car_model": list(car.car_model()), "car_details": list(car.car_details())},
    )


def run_account(config: DemoConfig, sink: Sink) -> Dict[str, Any]:
    """
    Deposit, withdraw, and show that the balance cannot be read directly.
    """
    transcript = CollectingSink()
    out = tee_sink(transcript, sink)
    account = create_account(
        config.account.initial_balance,
        sink=out,
        currency_symbol=config.account.currency_symbol,
        flags=FeatureRegistry(config.feature_flags),
    )

    results = [account.deposit(500)]
    after_deposit = account.get_balance()
    results.append(account.withdraw(200))
    after_withdraw = account.get_balance()

    direct = getattr(account, "balance", "undefined")
    out(f"Direct balance access: {direct}")

    return _summary(
        "account",
        transcript,
        {
            "after_deposit": after_deposit,
            "after_withdraw": after_withdraw,
            "transactions": [
                {"kind": r.kind.value, "amount": r.amount, "ok": r.ok, "balance": r.balance}
                for r in results
            ],
            "direct_access": direct,
        },
    )


def run_display(config: DemoConfig, sink: Sink) -> Dict[str, Any]:
    transcript = CollectingSink()
    display = make_display_name(config.display_name, sink=tee_sink(transcript, sink))
    return _summary("display", transcript, {"name": display()})
