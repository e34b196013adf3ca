# =============================================================================
# tests/test_config.py - Configuration Loading Tests
# =============================================================================
# Tests for environment file resolution and settings validation:
# - A missing .env.<mode> file is reported, never silently defaulted
# - Every invalid field is reported together
# - Process environment variables win over file values
#
# Run with: pytest tests/test_config.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import (
    ConfigurationInvalidError,
    ConfigurationMissingError,
    Settings,
    load_settings,
    resolve_env_file,
    validate_settings,
)

SETTING_NAMES = [
    "APP_ENV",
    "MONGODB_URI",
    "MONGODB_DATABASE",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "AUTH_HEADER",
    "AUTH_EXCLUDED_PATHS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell environment out of these tests."""
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)


def write_env(directory, mode, content):
    path = directory / f".env.{mode}"
    path.write_text(content)
    return path


# =============================================================================
# Resolver Tests
# =============================================================================

class TestResolveEnvFile:
    """Tests for resolve_env_file."""

    def test_resolves_existing_file(self, tmp_path):
        """The path is the fixed prefix plus the mode."""
        expected = write_env(tmp_path, "dev", "MONGODB_URI=mongodb://localhost\n")

        assert resolve_env_file("dev", tmp_path) == expected

    def test_missing_file_raises(self, tmp_path):
        """A mode without a file fails with ConfigurationMissingError."""
        with pytest.raises(ConfigurationMissingError) as exc_info:
            resolve_env_file("prod", tmp_path)

        assert exc_info.value.path == tmp_path / ".env.prod"
        assert exc_info.value.code == "CONFIGURATION_MISSING"
        assert ".env.prod" in exc_info.value.message

    def test_missing_file_error_renders_for_logs(self, tmp_path):
        """The logged form carries the code and how to fix it."""
        with pytest.raises(ConfigurationMissingError) as exc_info:
            resolve_env_file("prod", tmp_path)

        rendered = str(exc_info.value)
        assert rendered.startswith("[CONFIGURATION_MISSING]")
        assert "Suggestion: Create" in rendered

    def test_undefined_mode_raises(self, tmp_path):
        """No mode never falls back to another file."""
        write_env(tmp_path, "dev", "MONGODB_URI=mongodb://localhost\n")

        with pytest.raises(ConfigurationMissingError):
            resolve_env_file(None, tmp_path)
        with pytest.raises(ConfigurationMissingError):
            resolve_env_file("", tmp_path)

    def test_directory_is_not_a_file(self, tmp_path):
        (tmp_path / ".env.dev").mkdir()

        with pytest.raises(ConfigurationMissingError):
            resolve_env_file("dev", tmp_path)


# =============================================================================
# Validator Tests
# =============================================================================

class TestValidateSettings:
    """Tests for validate_settings."""

    def test_valid_settings(self):
        settings = validate_settings({"MONGODB_URI": "mongodb://localhost:27017"})

        assert settings.MONGODB_URI == "mongodb://localhost:27017"
        assert settings.PORT == 3000
        assert settings.AUTH_HEADER == "Authorization"
        assert settings.excluded_paths_list == []

    def test_missing_uri_is_named(self):
        """A missing connection URI fails naming that field."""
        with pytest.raises(ConfigurationInvalidError) as exc_info:
            validate_settings({})

        assert exc_info.value.fields == ["MONGODB_URI"]
        assert "MONGODB_URI" in exc_info.value.message

    def test_all_violations_reported_together(self):
        """Validation does not stop at the first bad field."""
        with pytest.raises(ConfigurationInvalidError) as exc_info:
            validate_settings({"PORT": "not-a-port", "AUTH_HEADER": ""})

        assert set(exc_info.value.fields) == {"MONGODB_URI", "PORT", "AUTH_HEADER"}
        assert len(exc_info.value.details["violations"]) == 3

    def test_port_out_of_range(self):
        with pytest.raises(ConfigurationInvalidError) as exc_info:
            validate_settings({"MONGODB_URI": "mongodb://localhost", "PORT": "70000"})

        assert exc_info.value.fields == ["PORT"]

    def test_string_port_is_converted(self):
        settings = validate_settings({"MONGODB_URI": "mongodb://localhost", "PORT": "8080"})

        assert settings.PORT == 8080

    def test_unknown_keys_are_ignored(self):
        settings = validate_settings({
            "MONGODB_URI": "mongodb://localhost",
            "SOME_OTHER_TOOL": "value",
        })

        assert not hasattr(settings, "SOME_OTHER_TOOL")

    def test_mode_is_recorded(self):
        settings = validate_settings({"MONGODB_URI": "mongodb://localhost"}, mode="prod")

        assert settings.APP_ENV == "prod"
        assert settings.is_production

    def test_settings_are_frozen(self):
        settings = validate_settings({"MONGODB_URI": "mongodb://localhost"})

        with pytest.raises(ValidationError):
            settings.PORT = 9000

    def test_excluded_paths_parsing(self):
        settings = validate_settings({
            "MONGODB_URI": "mongodb://localhost",
            "AUTH_EXCLUDED_PATHS": "/health, /health/*,,",
        })

        assert settings.excluded_paths_list == ["/health", "/health/*"]


# =============================================================================
# Loader Tests
# =============================================================================

class TestLoadSettings:
    """Tests for the resolve -> parse -> validate pipeline."""

    def test_loads_env_file(self, tmp_path):
        write_env(
            tmp_path,
            "dev",
            "MONGODB_URI=mongodb://localhost:27017/nest\nPORT=4000\n",
        )

        settings = load_settings("dev", tmp_path)

        assert isinstance(settings, Settings)
        assert settings.MONGODB_URI == "mongodb://localhost:27017/nest"
        assert settings.PORT == 4000
        assert settings.APP_ENV == "dev"

    def test_mode_defaults_to_app_env(self, tmp_path, monkeypatch):
        write_env(tmp_path, "staging", "MONGODB_URI=mongodb://staging\n")
        monkeypatch.setenv("APP_ENV", "staging")

        settings = load_settings(base_dir=tmp_path)

        assert settings.APP_ENV == "staging"
        assert settings.MONGODB_URI == "mongodb://staging"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationMissingError):
            load_settings("dev", tmp_path)

    def test_file_without_uri(self, tmp_path):
        write_env(tmp_path, "dev", "PORT=3000\n")

        with pytest.raises(ConfigurationInvalidError) as exc_info:
            load_settings("dev", tmp_path)

        assert "MONGODB_URI" in exc_info.value.fields

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        write_env(tmp_path, "dev", "MONGODB_URI=mongodb://from-file\nPORT=4000\n")
        monkeypatch.setenv("MONGODB_URI", "mongodb://from-env")

        settings = load_settings("dev", tmp_path)

        assert settings.MONGODB_URI == "mongodb://from-env"
        assert settings.PORT == 4000

    def test_environment_can_satisfy_required_field(self, tmp_path, monkeypatch):
        write_env(tmp_path, "dev", "# nothing here\n")
        monkeypatch.setenv("MONGODB_URI", "mongodb://from-env")

        settings = load_settings("dev", tmp_path)

        assert settings.MONGODB_URI == "mongodb://from-env"
