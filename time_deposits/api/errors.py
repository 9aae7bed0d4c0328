"""Exception handlers producing uniform error bodies"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from time_deposits.api.v1.schemas import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_CODES = {
    400: ("BAD_REQUEST", "Invalid request parameters"),
    404: ("NOT_FOUND", "The requested resource was not found"),
    500: ("INTERNAL_ERROR", "An unexpected error occurred. Please try again later."),
}


def error_response(status_code: int) -> JSONResponse:
    error_code, message = ERROR_CODES.get(status_code, (f"HTTP_{status_code}", "Request failed"))
    body = ErrorResponse(error_code=error_code, message=message, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return error_response(exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request on {request.url.path}: {exc.errors()}")
    return error_response(400)


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning(f"Invalid argument on {request.url.path}: {exc}")
    return error_response(400)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Full details stay in the logs, clients get the generic body
    logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=exc)
    return error_response(500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
