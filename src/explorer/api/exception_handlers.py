"""Centralized exception handlers for the FastAPI application.

Maps the client-facing error taxonomy to HTTP responses:

- ``BadRequestError``  -> 400 ``"Bad Request: <reason>"``
- ``NotFoundError``    -> 404 ``"Not Found"``
- ``InternalError``    -> 500 ``"Internal Server Error"``

Internal causes are logged here and never included in a response body.

Usage in main.py:
    from src.explorer.api.exception_handlers import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.explorer.domain.errors import BadRequestError, InternalError, WebError

logger = logging.getLogger(__name__)


async def _web_error_handler(request: Request, exc: WebError) -> JSONResponse:
    """Render any WebError with its own status code and public detail."""
    if isinstance(exc, InternalError):
        logger.error(
            "Internal error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.cause,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as 400 instead of FastAPI's 422."""
    reasons = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return await _web_error_handler(request, BadRequestError(f"Bad query: {reasons}"))


async def _unhandled_exception_handler(
    request: Request, _exc: Exception
) -> JSONResponse:
    """Catch-all handler for unexpected exceptions.

    Logs the full traceback server-side but returns only a generic
    message to the client.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": InternalError("unhandled").detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all centralized exception handlers on the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(WebError, _web_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Catch-all for unhandled exceptions (must be registered last)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    logger.debug("Registered centralized exception handlers")
