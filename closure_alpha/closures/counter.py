"""
Counter factories.

Each call to a factory encloses its own count; the returned function is the
only way to reach it.
"""

from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Callable

from closure_alpha.core.sinks import Sink, console_sink


def make_counter(thread_safe: bool = False) -> Callable[[], int]:
    """
    Return a function that increments a private count and returns the new value.

    The count starts at 0, so the first call returns 1.

    Args:
        thread_safe: guard each increment with a lock owned by this counter
    """
    count = 0
    guard = threading.Lock() if thread_safe else nullcontext()

    def increment_and_get() -> int:
        nonlocal count
        with guard:
            count += 1
            return count

    return increment_and_get


def make_printing_counter(sink: Sink = console_sink) -> Callable[[], int]:
    """Like make_counter, but also reports each value as "Inner: <n>"."""
    count = 0

    def inner() -> int:
        nonlocal count
        count += 1
        sink(f"Inner: {count}")
        return count

    return inner
