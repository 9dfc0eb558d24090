"""
API error types and the handlers that render them as error envelopes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviedb.api.models.movie import ErrorEnvelope

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "That movie does not exist."
INTERNAL_ERROR = "Internal server error."


class APIError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Malformed or incomplete input."""

    status_code = 400


class NotFound(APIError):
    """The referenced resource does not exist."""

    status_code = 404

    def __init__(self, message: str = MOVIE_NOT_FOUND):
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(message=message).model_dump(),
    )


def format_validation_errors(errors) -> str:
    """Turn pydantic error dicts into a 'field: reason' message."""
    parts = []
    for error in errors:
        if error.get("type") == "json_invalid":
            # loc holds the byte offset of the syntax error
            field = "body"
        else:
            loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
            field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid')}")
    return "Invalid request: " + "; ".join(parts)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(400, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
