"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, Field, PlainSerializer

# Balances leave the API as JSON numbers with cent precision
Money = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]


class WithdrawalSchema(BaseModel):
    """Single withdrawal from a time deposit"""

    id: int
    amount: Money
    date: date


class TimeDepositResponse(BaseModel):
    """Time deposit with its withdrawal history"""

    id: int
    plan_type: str = Field(..., description="Plan type (basic, student, premium, internal)")
    balance: Money
    days: int = Field(..., ge=0, description="Days since the deposit was opened")
    withdrawals: List[WithdrawalSchema] = Field(default_factory=list)


class UpdateBalancesResponse(BaseModel):
    """Response for POST /api/v1/time-deposits/update-balances"""

    message: str
    updated_count: int
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Uniform error body, never carries internal details"""

    error_code: str
    message: str
    timestamp: datetime
