"""
Error taxonomy shared by services and the HTTP layer.

Services raise :class:`ValidationError` or :class:`NotFoundError`;
``register_exception_handlers`` turns them into ``{"error": message}``
JSON bodies with the matching status code.  FastAPI's own request
validation failures (bad path or query types) are folded into the same
400 shape so clients only ever see one error format.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """A required field is missing or a value cannot be interpreted."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """The referenced user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
