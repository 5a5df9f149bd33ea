"""FastAPI dependencies for dependency injection."""

from fastapi import Depends, Request

from basecoat.config import Settings, get_settings
from basecoat.state_managers import SessionManager
from basecoat.views.page import build_renderer
from basecoat.views.template_renderer import TemplateRenderer


async def get_session_manager(request: Request) -> SessionManager:
    """
    Get the session manager from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared SessionManager instance.

    Raises:
        RuntimeError: If the session manager is not initialized.
    """
    manager: SessionManager | None = getattr(request.app.state, "session_manager", None)

    if manager is None:
        raise RuntimeError("Session manager not initialized.")

    return manager


def get_page_renderer(settings: Settings = Depends(get_settings)) -> TemplateRenderer:
    """Create a fresh page renderer for the current request."""
    return build_renderer(settings)
