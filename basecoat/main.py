"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from basecoat.core.app_factory import create_app
from basecoat.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

# Create application
app = create_app()


if __name__ == "__main__":
    import uvicorn

    from basecoat.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "basecoat.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
