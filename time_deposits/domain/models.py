"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class PlanType(str, Enum):
    """Closed set of time deposit plans, stored and serialised lowercase"""

    BASIC = "basic"
    STUDENT = "student"
    PREMIUM = "premium"
    INTERNAL = "internal"

    @classmethod
    def from_value(cls, value: "str | PlanType | None") -> Optional["PlanType"]:
        """Case-insensitive lookup, None for empty or unknown values"""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for plan_type in cls:
            if plan_type.value == normalized:
                return plan_type
        return None

    def __str__(self) -> str:
        return self.value


@dataclass
class Withdrawal:
    """Money taken out of a time deposit"""

    id: int
    amount: Decimal
    date: date


@dataclass
class TimeDeposit:
    """
    Snapshot of a deposit account handed to the accrual engine.

    plan_type is kept as loaded from storage (PlanType, raw string or None) so
    that unknown plans reach the registry and simply earn nothing. days is
    advanced by the host between runs; the engine only mutates balance.
    """

    id: int
    plan_type: "PlanType | str | None"
    balance: Decimal
    days: int
    withdrawals: List[Withdrawal] = field(default_factory=list)


@dataclass
class UpdateBalancesResult:
    """Outcome of one accrual run over a batch of deposits"""

    updated_count: int
    total_interest: Decimal = Decimal("0.00")
