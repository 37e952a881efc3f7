"""Maps exceptions to HTTP responses.

Expected failures carry their own message to the client.  Anything else
becomes a generic 500 and is logged with its traceback; internal detail
never reaches the response body.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidTokenError,
    MissingCredentialsError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (MissingCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: DomainException) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    logger.info(
        "Request rejected",
        path=request.url.path,
        status=status_code,
        reason=str(exc),
    )
    return _error(status_code, str(exc))


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, handle_domain_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
