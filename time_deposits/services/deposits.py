"""Application service orchestrating storage and the accrual engine"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from time_deposits.domain.accrual import BalanceAccrualEngine
from time_deposits.domain.models import PlanType, TimeDeposit, UpdateBalancesResult
from time_deposits.domain.registry import PolicyRegistry
from time_deposits.infrastructure.database.repositories import TimeDepositRepository
from time_deposits.infrastructure.observability.metrics import (
    balance_update_runs_counter,
    record_accrual,
)

logger = logging.getLogger(__name__)


class TimeDepositService:
    """Use cases over stored time deposits"""

    def __init__(self, db: Session, registry: Optional[PolicyRegistry] = None):
        self.db = db
        self.repository = TimeDepositRepository(db)
        self.engine = BalanceAccrualEngine(registry)

    def get_all_time_deposits(self) -> List[TimeDeposit]:
        return self.repository.find_all_with_withdrawals()

    def update_all_balances(self) -> UpdateBalancesResult:
        """
        Apply one period of interest to every stored deposit.

        Flow:
        1. Load all deposits as domain snapshots
        2. Run the accrual engine over them
        3. Write back the balances that changed and commit

        The whole batch is committed or rolled back together.
        """
        try:
            deposits = self.repository.find_all()
            opening = {d.id: d.balance for d in deposits}

            result = self.engine.accrue_batch(deposits)

            changed = self.repository.save_all(deposits)
            self.db.commit()

        except Exception:
            self.db.rollback()
            balance_update_runs_counter.labels(status="failure").inc()
            logger.exception("Balance update failed, changes rolled back")
            raise

        for deposit in deposits:
            plan_type = PlanType.from_value(deposit.plan_type)
            label = plan_type.value if plan_type else "unknown"
            record_accrual(label, deposit.balance - opening[deposit.id])
        balance_update_runs_counter.labels(status="success").inc()

        logger.info(
            "Balances persisted",
            extra={"updated_count": result.updated_count, "rows_changed": changed},
        )
        return result
