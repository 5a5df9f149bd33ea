"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from basecoat.exceptions import BasecoatException, ErrorCode
from basecoat.logging_config import get_logger, log_with_context
from basecoat.models import ErrorResponse

logger = get_logger(__name__)


async def basecoat_exception_handler(request: Request, exc: BasecoatException) -> JSONResponse:
    """Handle Basecoat exceptions with proper HTTP status codes.

    Returns structured JSON error responses with status code, error code,
    message, and optional details for client-side error handling.
    """
    log_with_context(
        logger,
        "warning",
        "Basecoat error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="basecoat_error",
    )

    error = ErrorResponse(code=exc.code.value, message=exc.message, details=exc.details)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error.model_dump()},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    # Also log the traceback separately for debugging
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(BasecoatException, basecoat_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
