"""Data access layer for time deposits and withdrawals"""

from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session, selectinload

from time_deposits.domain.exceptions import DepositNotFoundError
from time_deposits.domain.models import PlanType, TimeDeposit, Withdrawal
from time_deposits.infrastructure.database.models import TimeDepositRecord, WithdrawalRecord
from time_deposits.utils.money import round_half_up


def to_domain(record: TimeDepositRecord, with_withdrawals: bool = False) -> TimeDeposit:
    """Build a domain snapshot from a stored row"""
    # Unknown plan strings are kept verbatim so the registry can skip them
    plan_type = PlanType.from_value(record.plan_type) or record.plan_type
    withdrawals = (
        [Withdrawal(id=w.id, amount=w.amount, date=w.withdrawal_date) for w in record.withdrawals]
        if with_withdrawals
        else []
    )
    return TimeDeposit(
        id=record.id,
        plan_type=plan_type,
        balance=round_half_up(record.balance),
        days=record.days,
        withdrawals=withdrawals,
    )


class TimeDepositRepository:
    """Repository for time deposit accounts"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, plan_type: "PlanType | str", balance: Decimal, days: int) -> TimeDepositRecord:
        """Insert a new deposit and flush to get its id"""
        record = TimeDepositRecord(
            plan_type=str(plan_type),
            balance=round_half_up(balance),
            days=days,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def find_all(self) -> List[TimeDeposit]:
        records = self.db.query(TimeDepositRecord).order_by(TimeDepositRecord.id).all()
        return [to_domain(r) for r in records]

    def find_all_with_withdrawals(self) -> List[TimeDeposit]:
        """Fetch all deposits with withdrawals loaded in a single extra query"""
        records = (
            self.db.query(TimeDepositRecord)
            .options(selectinload(TimeDepositRecord.withdrawals))
            .order_by(TimeDepositRecord.id)
            .all()
        )
        return [to_domain(r, with_withdrawals=True) for r in records]

    def find_by_plan_type(self, plan_type: "PlanType | str") -> List[TimeDeposit]:
        records = (
            self.db.query(TimeDepositRecord)
            .filter(TimeDepositRecord.plan_type == str(plan_type))
            .order_by(TimeDepositRecord.id)
            .all()
        )
        return [to_domain(r) for r in records]

    def find_by_id(self, deposit_id: int) -> TimeDeposit:
        """
        Fetch a single deposit with its withdrawals.

        Raises:
            DepositNotFoundError: If no deposit has this id
        """
        record = self.db.get(TimeDepositRecord, deposit_id)
        if record is None:
            raise DepositNotFoundError(f"Time deposit {deposit_id} not found")
        return to_domain(record, with_withdrawals=True)

    def save_all(self, deposits: List[TimeDeposit]) -> int:
        """
        Write back balances keyed by deposit id.

        Only rows whose balance actually changed are updated. Returns the
        number of rows touched. Does not commit.
        """
        if not deposits:
            return 0

        by_id = {d.id: d for d in deposits}
        records = (
            self.db.query(TimeDepositRecord)
            .filter(TimeDepositRecord.id.in_(list(by_id)))
            .all()
        )

        changed = 0
        for record in records:
            new_balance = round_half_up(by_id[record.id].balance)
            if record.balance is None or Decimal(record.balance) != new_balance:
                record.balance = new_balance
                changed += 1

        self.db.flush()
        return changed


class WithdrawalRepository:
    """Repository for withdrawal history"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, time_deposit_id: int, amount: Decimal, withdrawal_date: date) -> WithdrawalRecord:
        record = WithdrawalRecord(
            time_deposit_id=time_deposit_id,
            amount=round_half_up(amount),
            withdrawal_date=withdrawal_date,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def find_by_time_deposit_id(self, time_deposit_id: int) -> List[Withdrawal]:
        records = (
            self.db.query(WithdrawalRecord)
            .filter(WithdrawalRecord.time_deposit_id == time_deposit_id)
            .order_by(WithdrawalRecord.id)
            .all()
        )
        return [Withdrawal(id=r.id, amount=r.amount, date=r.withdrawal_date) for r in records]
