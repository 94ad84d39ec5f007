"""
Guarded account factory.

The balance lives only in the factory's closure. deposit, withdraw and
get_balance are the whole interface: there is no attribute, setter or
serializer that reaches it.
"""

from __future__ import annotations

import logging
import math
import threading
from contextlib import nullcontext
from typing import Callable, NamedTuple, Optional

from closure_alpha.config.feature_flags import FeatureRegistry
from closure_alpha.core.models import InvalidAmountError, RejectReason, TxKind, TxResult
from closure_alpha.core.sinks import Sink, console_sink

logger = logging.getLogger(__name__)

WITHDRAW_REJECTED = "Insufficient balance or invalid amount."


class AccountCapabilities(NamedTuple):
    deposit: Callable[[float], TxResult]
    withdraw: Callable[[float], TxResult]
    get_balance: Callable[[], float]


def format_amount(amount: float) -> str:
    """Render 1500.0 as "1500" and 12.5 as "12.5"."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def create_account(
    initial_balance: float,
    sink: Sink = console_sink,
    currency_symbol: str = "₹",
    flags: Optional[FeatureRegistry] = None,
    thread_safe: bool = False,
) -> AccountCapabilities:
    """
    Open an account whose balance is reachable only through the returned functions.

    Args:
        initial_balance: starting balance; must not be negative
        sink: where transaction messages go
        currency_symbol: prefix for reported amounts
        flags: rejection policies (deposit_rejections, withdraw_rejections);
            defaults reproduce the silent deposit / reported withdrawal behavior
        thread_safe: serialize every operation on a lock owned by this account

    Returns:
        AccountCapabilities(deposit, withdraw, get_balance)

    Raises:
        ValueError: if initial_balance is negative or not finite
    """
    if not math.isfinite(initial_balance) or initial_balance < 0:
        raise ValueError(f"initial_balance must be a finite non-negative number, got {initial_balance}")

    balance = initial_balance
    policy = flags or FeatureRegistry()
    guard = threading.Lock() if thread_safe else nullcontext()

    def _money(amount: float) -> str:
        return f"{currency_symbol}{format_amount(amount)}"

    def _valid(amount: float) -> bool:
        return amount > 0 and math.isfinite(amount)

    # Sinks run after the guard is released so they may call back into the account
    def _reject(result: TxResult, flag: str, message: str) -> TxResult:
        logger.debug(f"[ACCOUNT] Rejected {result.kind.value} of {result.amount}: {result.reason.value}")
        if policy.reports(flag):
            sink(message)
        if policy.is_enforce(flag):
            raise InvalidAmountError(result)
        return result

    def deposit(amount: float) -> TxResult:
        nonlocal balance
        with guard:
            if _valid(amount):
                balance += amount
                result = TxResult(TxKind.DEPOSIT, amount, True, balance)
            else:
                result = TxResult(TxKind.DEPOSIT, amount, False, balance, RejectReason.INVALID_AMOUNT)
        if result.ok:
            sink(f"Deposited {_money(amount)}.")
            return result
        return _reject(result, "deposit_rejections", f"Invalid deposit amount: {_money(amount)}.")

    def withdraw(amount: float) -> TxResult:
        nonlocal balance
        with guard:
            if not _valid(amount):
                result = TxResult(TxKind.WITHDRAW, amount, False, balance, RejectReason.INVALID_AMOUNT)
            elif amount > balance:
                result = TxResult(TxKind.WITHDRAW, amount, False, balance, RejectReason.INSUFFICIENT_FUNDS)
            else:
                balance -= amount
                result = TxResult(TxKind.WITHDRAW, amount, True, balance)
        if result.ok:
            sink(f"Withdrew {_money(amount)}.")
            return result
        return _reject(result, "withdraw_rejections", WITHDRAW_REJECTED)

    def get_balance() -> float:
        with guard:
            current = balance
        sink(f"Current Balance: {_money(current)}")
        return current

    logger.debug(f"[ACCOUNT] Opened with balance={initial_balance}")
    return AccountCapabilities(deposit, withdraw, get_balance)
