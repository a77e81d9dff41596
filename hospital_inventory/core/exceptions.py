"""Error types for the inventory API and the handlers that render them.

Every failure leaves the service as ``{"error": "<message>"}`` with an
explicit status code.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class SessionError(InventoryError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(InventoryError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(InventoryError):
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceFailure(InventoryError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def describe_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        where = ".".join(loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request."


async def _inventory_error_handler(_request: Request, exc: InventoryError):
    return error_response(exc.message, exc.status_code)


async def _validation_error_handler(_request: Request, exc: RequestValidationError):
    return error_response(describe_validation_errors(exc.errors()), status.HTTP_400_BAD_REQUEST)


async def _http_error_handler(_request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code)


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response("Internal server error.", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventoryError, _inventory_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


__all__ = [
    "InventoryError",
    "NotFound",
    "PersistenceFailure",
    "SessionError",
    "ValidationFailed",
    "describe_validation_errors",
    "error_response",
    "register_exception_handlers",
]
