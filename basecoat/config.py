from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # basecoat repo root
PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the example application starts
    without a .env file. Values can be overridden via environment variables
    or .env (complex values such as ``layouts`` as JSON).

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator / @model_validator decorators
    """

    # Server settings
    app_host: str = Field(default="127.0.0.1", min_length=1, description="Server host")
    app_port: int = Field(ge=1, le=65535, default=8000, description="Server port")

    # Template settings
    templates_path: Path = Field(default=PACKAGE_TEMPLATES_DIR, description="Base directory for templates")
    layouts: dict[str, str] = Field(
        default_factory=lambda: {"basic": "layouts/basic.html", "plain": "layouts/plain.html"},
        description="Layout name to template path (relative to templates_path)",
    )
    default_layout: str = Field(default="basic", description="Layout used when a page does not pick one")
    default_namespace: str = Field(default="body", description="Block namespace for unmarked content")

    # Data tags and blocks
    enable_data_tags: bool = Field(default=True, description="Enable {{:tag}} substitution")
    data_tag_prefix: str = Field(default="{{:", description="Opening data tag delimiter")
    data_tag_suffix: str = Field(default="}}", description="Closing data tag delimiter")
    block_name_max_length: int = Field(default=30, ge=1, description="Longest split segment taken as a block name")
    strict_blocks: bool = Field(default=False, description="Use the strict one-marker-per-line block grammar")

    # Routing and sessions
    default_route: str = Field(default="home", min_length=1, description="Route served for /")
    session_cookie_name: str = Field(default="basecoat_session", min_length=1, description="Session cookie name")
    session_ttl_seconds: int = Field(default=3600, ge=1, description="Idle session lifetime")

    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("data_tag_prefix", "data_tag_suffix", "default_namespace", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure delimiters and namespace are not empty or whitespace."""
        if not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_default_layout(self) -> "Settings":
        """Ensure default_layout is one of the registered layouts."""
        if self.default_layout not in self.layouts:
            raise ValueError(f"default_layout {self.default_layout!r} is not in layouts {sorted(self.layouts)}")
        return self


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
