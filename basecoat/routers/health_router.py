"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from basecoat import __version__
from basecoat.config import Settings, get_settings
from basecoat.dependencies import get_page_renderer, get_session_manager
from basecoat.exceptions import BasecoatException
from basecoat.models import DetailedHealthResponse, HealthResponse
from basecoat.state_managers import SessionManager
from basecoat.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For detailed health status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(
    settings: Settings = Depends(get_settings),
    sessions: SessionManager = Depends(get_session_manager),
    page: TemplateRenderer = Depends(get_page_renderer),
):
    """Readiness probe - can the application serve pages?

    Checks:
    - Templates directory exists
    - Default layout template resolves
    - Session store answers

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Application is not ready
    """
    checks = {}
    all_healthy = True

    # Check 1: templates directory
    checks["templates_path"] = "ok" if settings.templates_path.is_dir() else "missing"
    if checks["templates_path"] != "ok":
        all_healthy = False

    # Check 2: default layout
    try:
        page.resolve_template(page.get_layout())
        checks["default_layout"] = "ok"
    except BasecoatException as e:
        checks["default_layout"] = f"failed: {e.message[:50]}"
        all_healthy = False

    # Check 3: session store
    checks["sessions"] = str(await sessions.count())

    status_code = 200 if all_healthy else 503
    status = "healthy" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status=status,
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
