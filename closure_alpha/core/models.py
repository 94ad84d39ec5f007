"""
Core models for account transactions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TxKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class RejectReason(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class TxResult:
    """
    Outcome of a single deposit or withdrawal.

    `balance` is the balance after the operation, whether or not it was applied.
    """
    kind: TxKind
    amount: float
    ok: bool
    balance: float
    reason: Optional[RejectReason] = None  # None when ok

    def __bool__(self) -> bool:
        return self.ok


class ClosureError(Exception):
    """Base error for closure_alpha."""


class InvalidAmountError(ClosureError):
    """Raised for a rejected transaction when its feature flag is in enforce mode."""

    def __init__(self, result: TxResult):
        self.result = result
        reason = result.reason.value if result.reason else "unknown"
        super().__init__(f"{result.kind.value} of {result.amount} rejected: {reason}")
