"""
App-wide exception handlers.

Feature code raises `HTTPException` for expected failures. What reaches these
handlers is either a request body that failed validation or an error raised by
the database itself.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def store_error_detail(exc: asyncpg.PostgresError) -> str:
    # asyncpg's str() already appends DETAIL/HINT lines when present.
    return str(exc) or type(exc).__name__


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unique_violation_handler(request: Request, exc: asyncpg.UniqueViolationError) -> JSONResponse:
    logger.info(
        "store_conflict path=%s constraint=%s",
        request.url.path,
        getattr(exc, "constraint_name", None),
    )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Conflicts with an existing record.", "error": store_error_detail(exc)},
    )


async def store_error_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    logger.error(
        "store_error path=%s sqlstate=%s error=%s",
        request.url.path,
        getattr(exc, "sqlstate", None),
        exc,
        exc_info=exc,
    )
    # Internal admin tool: the store's message is returned for debuggability.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database operation failed.", "error": store_error_detail(exc)},
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(asyncpg.UniqueViolationError, unique_violation_handler)
    app.add_exception_handler(asyncpg.PostgresError, store_error_handler)
