"""SQLAlchemy ORM models for time deposits and their withdrawals"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class TimeDepositRecord(Base):
    """Time deposit account"""

    __tablename__ = "time_deposits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_type = Column(String(50), nullable=False, index=True)
    balance = Column(Numeric(19, 2), nullable=False)
    days = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    withdrawals = relationship(
        "WithdrawalRecord",
        back_populates="time_deposit",
        cascade="all, delete-orphan",
        order_by="WithdrawalRecord.id",
    )


class WithdrawalRecord(Base):
    """Withdrawal made against a time deposit"""

    __tablename__ = "withdrawals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    time_deposit_id = Column(
        Integer, ForeignKey("time_deposits.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount = Column(Numeric(19, 2), nullable=False)
    withdrawal_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    time_deposit = relationship("TimeDepositRecord", back_populates="withdrawals")
