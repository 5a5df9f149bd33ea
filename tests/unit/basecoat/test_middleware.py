"""Unit tests for exception handlers and request logging helpers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from basecoat.exceptions import TemplateNotFoundException
from basecoat.middleware.error_handlers import register_error_handlers
from basecoat.middleware.logging_middleware import redact_sensitive_data


def make_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/missing")
    async def missing():
        raise TemplateNotFoundException("gone.html")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    return app


def test_basecoat_exception_handler():
    """Test Basecoat exceptions become structured JSON errors."""
    client = TestClient(make_app())

    response = client.get("/missing")

    assert response.status_code == 404
    assert response.json() == {
        "error": {
            "code": "TEMPLATE_NOT_FOUND",
            "message": "Template not found: gone.html",
            "details": {"template": "gone.html"},
        }
    }


def test_general_exception_handler_hides_details():
    """Test unexpected errors return a generic 500."""
    client = TestClient(make_app(), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret internals" not in response.text


def test_redact_sensitive_data():
    """Test sensitive query parameters are masked."""
    url = "http://testserver/login?password=hunter2&route=home"

    assert redact_sensitive_data(url) == "http://testserver/login?password=***REDACTED***&route=home"
