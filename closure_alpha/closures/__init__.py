"""
Closure factories.

Each factory encloses private state and returns the only functions that can
reach it.
"""

from closure_alpha.closures.account import AccountCapabilities, create_account
from closure_alpha.closures.counter import make_counter, make_printing_counter
from closure_alpha.closures.display import make_display_name
from closure_alpha.closures.record import CarCapabilities, make_car, make_record

__all__ = [
    "AccountCapabilities",
    "CarCapabilities",
    "create_account",
    "make_car",
    "make_counter",
    "make_display_name",
    "make_printing_counter",
    "make_record",
]
