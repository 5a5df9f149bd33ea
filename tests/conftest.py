"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from basecoat.main import app as fastapi_app
from basecoat.messages import Messages
from basecoat.state_managers import SessionState
from basecoat.views.template_renderer import TemplateRenderer


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Temporary templates directory with a layout and a few content templates."""
    (tmp_path / "layouts").mkdir()
    (tmp_path / "layouts" / "main.html").write_text(
        "<html>{{:title}}|{{:body}}|{{:messages}}|{{:missing}}</html>", encoding="utf-8"
    )
    (tmp_path / "page.html").write_text(
        "@head>\n<title>{{:title}}</title>\n@body>\n<p>Hello {{:name}}</p>\n", encoding="utf-8"
    )
    (tmp_path / "plain.html").write_text("Just text for {{:name}}\n", encoding="utf-8")
    (tmp_path / "home.html").write_text("Home {{:login_state}}\n", encoding="utf-8")
    (tmp_path / "login.html").write_text("@body>\nLogin form {{:login_state}}\n", encoding="utf-8")
    (tmp_path / "secret.html").write_text("@body>\nSecret\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def renderer(templates_dir: Path) -> TemplateRenderer:
    """Renderer rooted at the temporary templates directory."""
    return TemplateRenderer(templates_path=templates_dir, layouts={"main": "layouts/main.html"}, default_layout="main")


@pytest.fixture
def session() -> SessionState:
    """Fresh logged-out session."""
    return SessionState()


@pytest.fixture
def messages() -> Messages:
    return Messages()
