"""Mapping of domain and infrastructure errors to HTTP responses.

Failure bodies are either ``{"message": ...}`` or, for validation failures,
``{"errors": [{"field": ..., "message": ...}, ...]}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scribe.domain.error import (
    AuthenticationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from scribe.persistence.error import InfrastructureError

SERVER_ERROR_MESSAGE = "Server error"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def handle_authentication_error(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    logfire.warn(
        "Authentication failed",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return _message(status.HTTP_401_UNAUTHORIZED, exc.message)


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logfire.warn(
        "Validation failed",
        path=request.url.path,
        fields=[v.field for v in exc.violations],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [v.model_dump() for v in exc.violations]},
    )


async def handle_not_authorized(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    logfire.warn("Unauthorized mutation attempt", path=request.url.path, error=str(exc))
    return _message(status.HTTP_403_FORBIDDEN, exc.message)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn("Resource not found", path=request.url.path, error=str(exc))
    return _message(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Remaining domain errors (duplicate account, bad credentials, ...)."""
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return _message(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_infrastructure_error(
    request: Request, exc: InfrastructureError
) -> JSONResponse:
    logfire.error(
        "Infrastructure failure",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Bodies that are not JSON objects, or bad path/query types."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body")
            or "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logfire.warn("Malformed request", path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the same body shape."""
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unexpected error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on ``app``.

    Starlette resolves handlers along the exception's MRO, so the most
    specific registration wins.
    """
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(InfrastructureError, handle_infrastructure_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
