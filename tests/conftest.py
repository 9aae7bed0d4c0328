"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from time_deposits.api.main import create_app
from time_deposits.domain.models import PlanType, TimeDeposit
from time_deposits.infrastructure.database.models import Base
from time_deposits.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_deposits() -> list[TimeDeposit]:
    """The three reference deposits, all past their grace periods"""
    return [
        TimeDeposit(id=1, plan_type=PlanType.BASIC, balance=Decimal("10000.00"), days=45),
        TimeDeposit(id=2, plan_type=PlanType.STUDENT, balance=Decimal("5000.00"), days=100),
        TimeDeposit(id=3, plan_type=PlanType.PREMIUM, balance=Decimal("50000.00"), days=60),
    ]
