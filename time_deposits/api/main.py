"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from time_deposits.api.errors import register_exception_handlers
from time_deposits.api.middleware import RequestIDMiddleware, MetricsMiddleware
from time_deposits.api.v1 import deposits
from time_deposits.infrastructure.database.session import SessionLocal, init_db, seed_default_deposits
from time_deposits.infrastructure.observability.logging import setup_logging
from time_deposits.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        init_db()
    if settings.seed_demo_data:
        db = SessionLocal()
        try:
            added = seed_default_deposits(db)
            logging.info("Seeded time deposits", extra={"rows_added": added})
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Time Deposits",
        description="Time deposit accounts and monthly interest accrual",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(deposits.router, prefix="/api/v1", tags=["time-deposits"])

    return app


app = create_app()
