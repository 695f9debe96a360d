"""
Error boundary.

Every failure leaves the service as a JSON body with a "message" field.
PizzaError subclasses carry their own kind; the kind picks the status.
"""

import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import PizzaError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "unknown endpoint"


def _stack(exc: BaseException, debug: bool) -> Optional[str]:
    if not debug:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    message = first.get("msg", "invalid value")
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Install the handlers that turn exceptions into {message} responses."""

    @app.exception_handler(PizzaError)
    async def pizza_error_handler(request: Request, exc: PizzaError):
        """Handle service errors."""
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.to_dict())
        content: dict[str, Any] = exc.to_response()
        stack = _stack(exc, debug)
        if stack:
            content["stack"] = stack
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Route misses become 'unknown endpoint'."""
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=ErrorResponse(message=UNKNOWN_ENDPOINT).to_content(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(message=str(exc.detail)).to_content(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed input is a 400, not FastAPI's default 422."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=_validation_message(exc)).to_content(),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message="internal server error", stack=_stack(exc, debug)).to_content(),
        )
