"""Application error types and the HTTP error envelope."""

import logging
from datetime import UTC, datetime
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: str | list[str] | None = None):
        self.message = message if message is not None else self.error
        super().__init__(str(self.message))


class Unauthenticated(AppError):
    """Bad credentials, bad OTP or unknown user."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Bad Request"


class InvalidState(BadRequest):
    """The operation is not valid for the record's current state (e.g. no OTP issued)."""


class Expired(BadRequest):
    """A time-limited value (OTP) is past its expiry."""


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"


class InternalError(AppError):
    """Unexpected failure; the message carries the underlying cause."""


def error_body(request: Request, status_code: int, error: str, message) -> dict:
    """Build the uniform JSON error envelope."""
    return {
        "success": False,
        "statusCode": status_code,
        "timestamp": datetime.now(UTC).isoformat(),
        "path": request.url.path,
        "method": request.method,
        "error": error,
        "message": message,
    }


def _respond(
    request: Request,
    status_code: int,
    error: str,
    message,
    headers: dict | None = None,
    exc: Exception | None = None,
) -> JSONResponse:
    body = error_body(request, status_code, error, message)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {status_code}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} - {status_code}: {message}")
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return _respond(request, exc.status_code, exc.error, exc.message, headers, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        error = HTTPStatus(exc.status_code).phrase
    except ValueError:
        error = "Error"
    return _respond(request, exc.status_code, error, exc.detail, getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return _respond(request, status.HTTP_400_BAD_REQUEST, "Bad Request", messages)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _respond(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        type(exc).__name__,
        str(exc) or "Internal server error",
        exc=exc,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
