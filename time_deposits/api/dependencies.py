"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from time_deposits.domain.registry import PolicyRegistry, default_registry
from time_deposits.infrastructure.database.session import get_db
from time_deposits.services.deposits import TimeDepositService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_policy_registry() -> PolicyRegistry:
    """Provide the interest policy registry"""
    return default_registry()


def get_deposit_service(
    db: Session = Depends(get_db),
    registry: PolicyRegistry = Depends(get_policy_registry),
) -> TimeDepositService:
    """Provide the time deposit application service"""
    return TimeDepositService(db, registry)
