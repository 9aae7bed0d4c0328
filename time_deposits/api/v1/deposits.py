"""/api/v1/time-deposits - list deposits and apply interest"""

import logging
import time
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from time_deposits.api.dependencies import get_deposit_service, get_request_id
from time_deposits.api.v1.schemas import (
    TimeDepositResponse,
    UpdateBalancesResponse,
    WithdrawalSchema,
)
from time_deposits.domain.exceptions import DepositNotFoundError
from time_deposits.domain.models import TimeDeposit
from time_deposits.infrastructure.observability.logging import log_balance_update
from time_deposits.services.deposits import TimeDepositService

router = APIRouter()


def to_response(deposit: TimeDeposit) -> TimeDepositResponse:
    return TimeDepositResponse(
        id=deposit.id,
        plan_type=str(deposit.plan_type),
        balance=deposit.balance,
        days=deposit.days,
        withdrawals=[
            WithdrawalSchema(id=w.id, amount=w.amount, date=w.date) for w in deposit.withdrawals
        ],
    )


@router.get("/time-deposits", response_model=List[TimeDepositResponse])
def get_all_time_deposits(service: TimeDepositService = Depends(get_deposit_service)):
    """Retrieve all time deposits with current balances and withdrawal history"""
    return [to_response(d) for d in service.get_all_time_deposits()]


@router.get("/time-deposits/{deposit_id}", response_model=TimeDepositResponse)
def get_time_deposit(deposit_id: int, service: TimeDepositService = Depends(get_deposit_service)):
    """Retrieve a single time deposit"""
    try:
        deposit = service.repository.find_by_id(deposit_id)
    except DepositNotFoundError:
        raise HTTPException(status_code=404, detail="Time deposit not found")
    return to_response(deposit)


@router.post("/time-deposits/update-balances", response_model=UpdateBalancesResponse)
def update_all_balances(
    request: Request,
    service: TimeDepositService = Depends(get_deposit_service),
):
    """
    Apply one period of interest to every time deposit.

    Interest depends on each deposit's plan type and age; deposits on
    unknown plans are counted but left unchanged.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = service.update_all_balances()
    except Exception as e:
        logging.error(f"Balance update failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    log_balance_update(request_id, result.updated_count, str(result.total_interest), duration_ms)

    return UpdateBalancesResponse(
        message="Balances updated successfully",
        updated_count=result.updated_count,
        timestamp=datetime.now(timezone.utc),
    )
