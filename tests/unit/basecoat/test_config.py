"""Unit tests for configuration."""

from unittest.mock import patch

import pytest

from basecoat.config import PACKAGE_TEMPLATES_DIR, Settings, get_settings


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    settings = Settings()

    assert settings.app_host == "127.0.0.1"
    assert settings.app_port == 8000
    assert settings.templates_path == PACKAGE_TEMPLATES_DIR
    assert settings.default_layout == "basic"
    assert "basic" in settings.layouts
    assert settings.data_tag_prefix == "{{:"
    assert settings.data_tag_suffix == "}}"
    assert settings.block_name_max_length == 30
    assert settings.strict_blocks is False


def test_settings_default_layout_must_be_registered():
    """Test an unregistered default layout is rejected."""
    with pytest.raises(ValueError):
        Settings(layouts={"main": "main.html"}, default_layout="other")


def test_settings_blank_delimiter_rejected():
    """Test blank data tag delimiters are rejected."""
    with pytest.raises(ValueError):
        Settings(data_tag_prefix="  ")


def test_settings_log_level_normalized():
    """Test log level is upper-cased and validated."""
    assert Settings(log_level="debug").log_level == "DEBUG"

    with pytest.raises(ValueError):
        Settings(log_level="verbose")


def test_settings_env_loading():
    """Test settings can load from environment."""
    with patch.dict(
        "os.environ",
        {
            "APP_PORT": "9000",
            "DEFAULT_ROUTE": "blocks",
            "STRICT_BLOCKS": "true",
            "LAYOUTS": '{"x": "layouts/x.html"}',
            "DEFAULT_LAYOUT": "x",
        },
    ):
        settings = Settings()

        assert settings.app_port == 9000
        assert settings.default_route == "blocks"
        assert settings.strict_blocks is True
        assert settings.layouts == {"x": "layouts/x.html"}


def test_get_settings_singleton():
    """Test get_settings returns singleton instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
