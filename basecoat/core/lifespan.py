"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from basecoat import __version__
from basecoat.config import get_settings
from basecoat.logging_config import get_logger, log_with_context
from basecoat.state_managers import SessionManager

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are logged and re-raised so cleanup always runs.
    """
    settings = get_settings()
    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Basecoat application",
        version=__version__,
        templates_path=str(settings.templates_path),
        event_type="app_startup",
    )

    app.state.session_manager = SessionManager(ttl_seconds=settings.session_ttl_seconds)
    await app.state.session_manager.initialize()
    log_with_context(
        logger,
        "info",
        "Session manager initialized",
        event_type="state_managers_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Basecoat application",
            event_type="app_shutdown",
        )

        await app.state.session_manager.cleanup()
        log_with_context(
            logger,
            "info",
            "Session manager cleaned up",
            event_type="state_managers_cleanup",
        )
