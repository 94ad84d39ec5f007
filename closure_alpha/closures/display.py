"""Single-field closure: a function that remembers one name."""

from __future__ import annotations

from typing import Callable

from closure_alpha.core.sinks import Sink, console_sink


def make_display_name(name: str = "Mozilla", sink: Sink = console_sink) -> Callable[[], str]:
    def display_name() -> str:
        sink(name)
        return name

    return display_name
