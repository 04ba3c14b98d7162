from typing import List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from expense_api.models.envelope import error_envelope
from expense_api.models.expense import FieldError

logger = logging.getLogger("expense_api.errors")

SERVER_ERROR_MESSAGE = "An unexpected error occurred."


class ApiError(Exception):
    """Base for errors that map onto an error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "SERVER_ERROR"
    message: str = SERVER_ERROR_MESSAGE

    def __init__(
        self, message: Optional[str] = None, details: Optional[List[FieldError]] = None
    ):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        self.details = details


class FieldValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation failed"

    def __init__(self, details: List[FieldError]):
        super().__init__(details=details)


class MalformedRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "MALFORMED_REQUEST"
    message = "Malformed JSON request body"


class ServerFault(ApiError):
    pass


_HTTP_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def api_error_handler(request: Request, exc: ApiError):  # type: ignore
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.code, exc.message, exc.details),
    )


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"No route for {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(_HTTP_CODES.get(exc.status_code, "HTTP_ERROR"), message),
        headers=getattr(exc, "headers", None),
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(ServerFault.code, SERVER_ERROR_MESSAGE),
    )
