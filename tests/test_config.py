"""Tests for application configuration management."""

import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from property_planner.config import (
    Settings,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_settings_loads_from_env_file(self):
        """Test that settings can load from an .env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("APP_ENV=production\n")
            f.write("SECRET_KEY=test-secret-key-123\n")
            f.write("STORAGE_BASE_PATH=/var/lib/reports\n")
            f.write("DEFAULT_LANGUAGE=pt\n")
            f.write("MONTE_CARLO_PATHS=250\n")
            f.write("LOG_LEVEL=DEBUG\n")
            temp_env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                settings = get_settings(temp_env_file)

                assert settings.app_env == "production"
                assert settings.secret_key == "test-secret-key-123"
                assert settings.storage_base_path == "/var/lib/reports"
                assert settings.default_language == "pt"
                assert settings.monte_carlo_paths == 250
                assert settings.log_level == "DEBUG"
        finally:
            os.unlink(temp_env_file)

    def test_missing_secret_key_raises_exception(self):
        """Test that missing SECRET_KEY raises ValidationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY" in str(exc_info.value)

    def test_placeholder_secret_key_raises_exception(self):
        """Test that placeholder SECRET_KEY raises ValidationError."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "your-secret-key-here-change-in-production"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY must be set to a secure value" in str(exc_info.value)

    def test_default_values(self):
        """Test default values when environment variables are not set."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.flask_env == "development"
            assert settings.storage_type == "local"
            assert settings.storage_base_path == "storage"
            assert settings.default_language == "nl"
            assert settings.monte_carlo_paths == 1000
            assert settings.monte_carlo_volatility == 8.0
            assert settings.log_level == "INFO"

    @pytest.mark.parametrize(
        "variable, value, message",
        [
            ("APP_ENV", "staging", "APP_ENV must be one of"),
            ("LOG_LEVEL", "INVALID_LEVEL", "LOG_LEVEL must be one of"),
            ("STORAGE_TYPE", "s3", "STORAGE_TYPE must be one of"),
            ("DEFAULT_LANGUAGE", "en", "DEFAULT_LANGUAGE must be one of"),
        ],
    )
    def test_invalid_choices(self, variable, value, message):
        """Test that unsupported choices are rejected."""
        with patch.dict(
            os.environ, {"SECRET_KEY": "valid-secret-key-123", variable: value}, clear=True
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert message in str(exc_info.value)

    def test_case_insensitive_choices(self):
        """Test that LOG_LEVEL and DEFAULT_LANGUAGE are case insensitive."""
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "valid-secret-key-123",
                "LOG_LEVEL": "debug",
                "DEFAULT_LANGUAGE": "PT",
            },
            clear=True,
        ):
            settings = Settings(_env_file=None)

            assert settings.log_level == "DEBUG"
            assert settings.default_language == "pt"

    @pytest.mark.parametrize(
        "variable, value",
        [
            ("MONTE_CARLO_PATHS", "0"),
            ("MONTE_CARLO_PATHS", "100001"),
            ("MONTE_CARLO_VOLATILITY", "-1"),
            ("MONTE_CARLO_VOLATILITY", "101"),
        ],
    )
    def test_monte_carlo_bounds(self, variable, value):
        """Test that simulation settings are bounded."""
        with patch.dict(
            os.environ, {"SECRET_KEY": "valid-secret-key-123", variable: value}, clear=True
        ):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_global_settings_are_cached(self):
        """Test that global settings are created once until reset."""
        reset_global_settings()
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            first = get_global_settings()
            assert get_global_settings() is first

            reset_global_settings()
            assert get_global_settings() is not first
        reset_global_settings()
