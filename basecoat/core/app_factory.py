"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from basecoat import __version__
from basecoat.core.lifespan import lifespan
from basecoat.core.middleware import setup_middleware
from basecoat.middleware.error_handlers import register_error_handlers
from basecoat.routers import health_router, page_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Basecoat",
        description="""
        **Basecoat** - example site for the Basecoat page-rendering framework

        Pages are plain templates with `{{:tag}}` data tags. Route templates are
        split into content blocks (`@name>` lines) that the layout places on the page.

        ## Pages
        - `/home` - introduction
        - `/blocks` - a template with several content blocks
        - `/messages` - flash messages at every level
        - `/login` - toggle the session login state
        - `/members` - requires a login

        ## Health
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe (templates and sessions)
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    # Configure middleware
    setup_middleware(app)

    # Register exception handlers
    register_error_handlers(app)

    # Mount static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Health endpoints first, the page router matches any single path segment
    app.include_router(health_router.router, tags=["health"])
    app.include_router(page_router.router, tags=["pages"])

    return app
