"""Map domain errors onto HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import (
    BadRequestError,
    ConflictError,
    DomainError,
    ImageNotSetError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ImageNotSetError, status.HTTP_404_NOT_FOUND),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error (500 if unmapped)."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as {"detail": message}."""
    status_code = status_for(exc)

    if status_code >= 500:
        logfire.error(
            "Unhandled domain error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.warn(
            "Request failed",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
            error_type=type(exc).__name__,
        )

    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
