"""Interface layer errors.

Translates domain errors into the RPC status vocabulary and its HTTP
encoding. Validation problems become INVALID_ARGUMENT, storage problems
and anything unexpected become INTERNAL.
"""

from enum import Enum

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from modcomment.domain.error import (
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)


class StatusCode(str, Enum):
    """RPC outcome codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


HTTP_STATUS = {
    StatusCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    StatusCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StatusCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponse(BaseModel):
    """Error body returned for failed calls."""

    code: StatusCode
    message: str
    field: str | None = None
    rule: str | None = None


def to_error_response(error: Exception) -> ErrorResponse:
    """Map an exception to the error body sent to the caller."""
    if isinstance(error, ValidationError):
        return ErrorResponse(
            code=StatusCode.INVALID_ARGUMENT,
            message=str(error),
            # Same key the caller used in the request body
            field=to_camel(error.field),
            rule=error.rule,
        )
    if isinstance(error, NotFoundError):
        return ErrorResponse(code=StatusCode.NOT_FOUND, message=str(error))
    if isinstance(error, StorageError):
        # Driver messages stay in the logs
        return ErrorResponse(
            code=StatusCode.INTERNAL,
            message=f"storage failure during {error.operation}",
        )
    return ErrorResponse(code=StatusCode.INTERNAL, message="internal error")


def _render(body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_STATUS[body.code],
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return _render(to_error_response(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are argument errors, like failed field rules."""
    errors = exc.errors()
    field = None
    if errors:
        loc = [str(part) for part in errors[0].get("loc", ()) if part != "body"]
        field = ".".join(loc) or None

    logfire.warn("Malformed request body", path=request.url.path, field=field)
    return _render(
        ErrorResponse(
            code=StatusCode.INVALID_ARGUMENT,
            message="malformed request body",
            field=field,
            rule="type",
        )
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _render(to_error_response(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the error translation on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
