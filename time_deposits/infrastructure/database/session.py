"""Database session management"""

from decimal import Decimal

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from time_deposits.config import settings
from time_deposits.infrastructure.database.models import Base, TimeDepositRecord


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        # SQLite connections are handed across FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    # Recycle after 1 hour to avoid stale connections
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 10, "pool_recycle": 3600}


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_DEPOSITS = [
    ("basic", Decimal("10000.00"), 45),
    ("student", Decimal("5000.00"), 100),
    ("premium", Decimal("50000.00"), 60),
]


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create tables that do not exist yet"""
    Base.metadata.create_all(bind=bind or engine)


def seed_default_deposits(db: Session) -> int:
    """Insert the reference deposits into an empty table, returns rows added"""
    if db.query(TimeDepositRecord).first() is not None:
        return 0

    for plan_type, balance, days in DEFAULT_DEPOSITS:
        db.add(TimeDepositRecord(plan_type=plan_type, balance=balance, days=days))
    db.commit()
    return len(DEFAULT_DEPOSITS)
