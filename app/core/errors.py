"""API error types and the handlers that render them as envelopes."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Malformed input, or a referenced entity failing a precondition."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(APIError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None},
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return error_envelope(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Rejected payload on {request.url.path}: {exc.errors()}")
    return error_envelope(status.HTTP_400_BAD_REQUEST, "Invalid JSON payload")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_envelope(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI):
    """Install handlers so every failure leaves as an envelope."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
