"""Interface layer errors and HTTP error mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from lifequest.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    NotOwnerError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


# Most specific first; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotOwnerError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error (400 when unmapped)."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.warn(
        "Request failed with domain error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        status_code=code,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def _request_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    # Use case requests are validated inside route handlers
    logfire.warn("Request validation error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": exc.errors(
                include_url=False, include_context=False, include_input=False
            )
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and validation errors to JSON error responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(PydanticValidationError, _request_validation_handler)
