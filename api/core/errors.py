"""
Error types and the exception handlers that turn them into `{"msg": ...}` bodies.

Services raise `NewsApiError` subclasses; everything else (asyncpg errors,
bugs) propagates here untouched and is classified by the handlers below.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_INPUT_MSG = "error - invalid input"
NULL_VALUE_MSG = "error - null value given"
PATH_NOT_FOUND_MSG = "path not found"
INTERNAL_ERROR_MSG = "internal server error"


class NewsApiError(Exception):
    """
    Base error for expected, client-visible failures.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    msg: str = INTERNAL_ERROR_MSG

    def __init__(self, msg: str | None = None) -> None:
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)


class InvalidInputError(NewsApiError):
    """Malformed id, query value or body field type."""

    status_code = status.HTTP_400_BAD_REQUEST
    msg = INVALID_INPUT_MSG


class NullValueError(NewsApiError):
    """A required body field is missing or null."""

    status_code = status.HTTP_400_BAD_REQUEST
    msg = NULL_VALUE_MSG


class NotFoundError(NewsApiError):
    """Well-formed identifier with no matching row."""

    status_code = status.HTTP_404_NOT_FOUND
    msg = "resource not found"


# PostgreSQL error codes that map onto client errors.
_SQLSTATE_ERRORS: dict[str, type[NewsApiError]] = {
    "22P02": InvalidInputError,  # invalid_text_representation
    "22003": InvalidInputError,  # numeric_value_out_of_range
    "23502": NullValueError,  # not_null_violation
}


def _msg_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def news_api_error_handler(request: Request, exc: NewsApiError) -> JSONResponse:
    return _msg_response(exc.status_code, exc.msg)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths are both "not found".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _msg_response(status.HTTP_404_NOT_FOUND, PATH_NOT_FOUND_MSG)
    return _msg_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Request validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
    return _msg_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT_MSG)


async def postgres_error_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    error_cls = _SQLSTATE_ERRORS.get(getattr(exc, "sqlstate", None) or "")
    if error_cls is not None:
        return _msg_response(error_cls.status_code, error_cls.msg)
    return await unhandled_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _msg_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NewsApiError, news_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(asyncpg.PostgresError, postgres_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
