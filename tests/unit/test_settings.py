"""
Unit tests for backend/settings.py
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "LOG_LEVEL",
    "SESSION_MARKER_BACKEND",
    "SESSION_MARKER_PATH",
    "IMPORT_MAX_BYTES",
    "EXPORT_INDENT",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_log_level_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"

    def test_session_marker_defaults(self, clean_env):
        """Marker is file-backed by default."""
        settings = Settings(_env_file=None)
        assert settings.session_marker_backend == "file"
        assert settings.session_marker_path == Path(".workout-log/session.json")

    def test_import_export_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.import_max_bytes == 10 * 1024 * 1024
        assert settings.export_indent == 2

    def test_sentry_dsn_default_to_none(self, clean_env):
        """Sentry DSN should default to None."""
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env, _env_file=None)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    def test_log_level_normalized(self):
        assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(log_level="chatty", _env_file=None)
        assert "Invalid log level" in str(exc_info.value)

    def test_invalid_marker_backend(self):
        with pytest.raises(ValidationError):
            Settings(session_marker_backend="redis", _env_file=None)

    def test_import_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(import_max_bytes=0, _env_file=None)


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_cors_origins_list_parses_comma_separated(self):
        settings = Settings(cors_allowed_origins="https://a.test, https://b.test", _env_file=None)
        assert settings.cors_allowed_origins_list == ["https://a.test", "https://b.test"]

    def test_cors_origins_list_handles_empty(self):
        settings = Settings(cors_allowed_origins="", _env_file=None)
        assert settings.cors_allowed_origins_list == []

    def test_is_production_property(self):
        """is_production should return True only in production."""
        assert Settings(environment="production", _env_file=None).is_production is True
        assert Settings(environment="development", _env_file=None).is_production is False

    def test_is_development_property(self):
        """is_development should return True only in development."""
        assert Settings(environment="development", _env_file=None).is_development is True
        assert Settings(environment="production", _env_file=None).is_development is False

    def test_is_test_property(self):
        """is_test should return True only in test environment."""
        assert Settings(environment="test", _env_file=None).is_test is True
        assert Settings(environment="development", _env_file=None).is_test is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """get_settings() should return the same cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestSettingsFromEnv:
    """Test Settings loading from environment variables."""

    def test_settings_loads_from_env(self, monkeypatch):
        """Settings should load values from environment variables."""
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("SESSION_MARKER_BACKEND", "memory")
        monkeypatch.setenv("SESSION_MARKER_PATH", "/tmp/marker.json")
        monkeypatch.setenv("IMPORT_MAX_BYTES", "2048")

        settings = Settings(_env_file=None)

        assert settings.environment == "staging"
        assert settings.session_marker_backend == "memory"
        assert settings.session_marker_path == Path("/tmp/marker.json")
        assert settings.import_max_bytes == 2048

    def test_env_vars_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("log_level", "warning")
        assert Settings(_env_file=None).log_level == "WARNING"
