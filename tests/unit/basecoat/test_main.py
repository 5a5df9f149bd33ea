"""Unit tests for main.py wiring."""

from basecoat.exceptions import BasecoatException
from basecoat.main import app


class TestExceptionHandlers:
    """Tests for exception handlers in main.py."""

    def test_basecoat_exception_handler_exists(self):
        """Test that BasecoatException handler is registered."""
        assert BasecoatException in app.exception_handlers

    def test_general_exception_handler_exists(self):
        """Test that the catch-all handler is registered."""
        assert Exception in app.exception_handlers


class TestLifecycle:
    """Tests for app lifecycle events."""

    def test_app_has_routes(self, test_client):
        """Test that the health and page routers are registered."""
        assert test_client.get("/health").status_code == 200
        assert test_client.get("/home").status_code == 200

    def test_lifespan_sets_up_session_manager(self, test_client):
        """Test the session manager exists while the app runs."""
        assert test_client.app.state.session_manager is not None
        assert test_client.app.state.request_count == 0
