"""Balance accrual engine - applies one period of interest to a batch of deposits"""

import logging
from decimal import Decimal
from typing import List, Optional

from time_deposits.domain.models import TimeDeposit, UpdateBalancesResult
from time_deposits.domain.registry import PolicyRegistry, default_registry
from time_deposits.utils.money import CENTS, round_half_up, to_decimal

logger = logging.getLogger(__name__)


class BalanceAccrualEngine:
    """
    Adds rounded monthly interest to each deposit's balance in place.

    Deposits are processed in input order. Running the engine twice compounds:
    the second run earns interest on the balance produced by the first. The
    engine never touches days; ageing deposits is the caller's job.
    """

    def __init__(self, registry: Optional[PolicyRegistry] = None):
        self.registry = registry if registry is not None else default_registry()

    def accrue_batch(self, deposits: List[TimeDeposit]) -> UpdateBalancesResult:
        total_interest = Decimal("0.00")

        for deposit in deposits:
            raw_interest = self.registry.accrue(deposit)
            interest = round_half_up(raw_interest)

            deposit.balance = (to_decimal(deposit.balance) + interest).quantize(CENTS)
            total_interest += interest

            logger.debug(
                "Interest applied",
                extra={
                    "deposit_id": deposit.id,
                    "plan_type": str(deposit.plan_type),
                    "days": deposit.days,
                    "interest": str(interest),
                    "balance": str(deposit.balance),
                },
            )

        logger.info(
            "Accrual batch complete",
            extra={"updated_count": len(deposits), "total_interest": str(total_interest)},
        )
        return UpdateBalancesResult(updated_count=len(deposits), total_interest=total_interest)

    def update_balances(self, deposits: List[TimeDeposit]) -> int:
        """Apply interest to every deposit and return how many were processed"""
        return self.accrue_batch(deposits).updated_count


def update_balances(deposits: List[TimeDeposit], registry: Optional[PolicyRegistry] = None) -> int:
    """Module-level shortcut using the standard plans unless a registry is given"""
    return BalanceAccrualEngine(registry).update_balances(deposits)
