"""
Reporting sinks.

A sink is any callable taking one formatted line of text. Closures report
through a sink instead of printing directly, so the same factory can write to
the console, a logger, or a list in tests.
"""

from __future__ import annotations

import logging
from typing import Callable, List

Sink = Callable[[str], None]


def console_sink(line: str) -> None:
    """Print the line to stdout."""
    print(line)


def null_sink(line: str) -> None:
    """Discard the line."""
    return None


def logger_sink(logger: logging.Logger, level: int = logging.INFO) -> Sink:
    """Return a sink that forwards each line to `logger` at `level`."""
    def _emit(line: str) -> None:
        logger.log(level, line)
    return _emit


def tee_sink(*sinks: Sink) -> Sink:
    """Return a sink that forwards each line to every sink in order."""
    def _emit(line: str) -> None:
        for sink in sinks:
            sink(line)
    return _emit


class CollectingSink:
    """Sink that keeps every line it receives."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

    def __repr__(self) -> str:
        return f"CollectingSink(lines={len(self.lines)})"
