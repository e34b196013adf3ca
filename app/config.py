# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module resolves the environment file for the current mode, parses it,
# and validates it into a single immutable Settings value.
#
# Usage:
#   from app.config import load_settings
#   settings = load_settings()          # mode taken from APP_ENV
#   settings = load_settings("dev")     # reads ./.env.dev
#
# Environment variables are loaded from:
# 1. System environment variables (highest priority)
# 2. The .env.<mode> file selected by APP_ENV
#
# A missing file or an invalid file is fatal: the caller must abort startup
# rather than fall back to defaults and risk talking to the wrong database.
# =============================================================================

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

ENV_FILE_PREFIX = ".env."
MODE_VARIABLE = "APP_ENV"


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ApplicationError):
    """Base class for fatal startup configuration errors."""


class ConfigurationMissingError(ConfigurationError):
    """Raised when the environment file for the selected mode does not exist."""

    def __init__(self, path: Path, mode: str | None):
        super().__init__(
            message=f'Environment file "{path}" not found!',
            code="CONFIGURATION_MISSING",
            suggestion=f"Create {path} or set {MODE_VARIABLE} to a mode that has an environment file",
            details={"path": str(path), "mode": mode},
        )
        self.path = path
        self.mode = mode


class ConfigurationInvalidError(ConfigurationError):
    """
    Raised when the environment file fails validation.

    Carries every violation, not just the first one, so all of them can be
    fixed in one pass.
    """

    def __init__(self, violations: list[dict[str, str]]):
        summary = "; ".join(f"{v['field']}: {v['message']}" for v in violations)
        super().__init__(
            message=f"Invalid environment configuration: {summary}",
            code="CONFIGURATION_INVALID",
            suggestion="Fix the listed fields in your environment file",
            details={"violations": violations},
        )
        self.violations = violations

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [v["field"] for v in self.violations]


# =============================================================================
# Settings
# =============================================================================

class Settings(BaseSettings):
    """
    Application settings loaded from the mode's environment file.

    Uses pydantic-settings to:
    - Validate types and constraints
    - Let process environment variables override file values
    - Provide sensible defaults for everything except the database URI

    Instances are frozen; one is built at startup and passed to whatever
    needs it.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    # The URI is required - the app won't start without it

    MONGODB_URI: str = Field(
        ...,
        min_length=1,
        description="MongoDB connection URI (e.g., mongodb://localhost:27017)"
    )

    MONGODB_DATABASE: str = Field(
        default="nest_tutorial",
        min_length=1,
        description="Database name used when MONGODB_URI does not name one"
    )

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    APP_ENV: str = Field(
        default="",
        description="Mode the settings were loaded for (dev, prod, ...)"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root logging level"
    )

    # -------------------------------------------------------------------------
    # Request Gate
    # -------------------------------------------------------------------------

    AUTH_HEADER: str = Field(
        default="Authorization",
        min_length=1,
        description="Header that must carry the credential token"
    )

    # Comma-separated path patterns that skip the authorization stage
    AUTH_EXCLUDED_PATHS: str = Field(
        default="",
        description="Path patterns excluded from authorization (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        case_sensitive=True,
        # Env files may carry keys for other tools
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Process environment wins over values read from the env file,
        # which arrive as init kwargs.
        return env_settings, init_settings

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def excluded_paths_list(self) -> list[str]:
        """
        Parse AUTH_EXCLUDED_PATHS into a list of patterns.

        Example: "/health, /health/*" -> ["/health", "/health/*"]
        """
        return [p.strip() for p in self.AUTH_EXCLUDED_PATHS.split(",") if p.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV in ("prod", "production")


# =============================================================================
# Resolution and Validation
# =============================================================================

def resolve_env_file(mode: str | None, base_dir: str | Path = ".") -> Path:
    """
    Compute the environment file path for a mode and check that it exists.

    Args:
        mode: Runtime mode such as "dev" or "prod" (may be None or empty)
        base_dir: Directory holding the environment files

    Returns:
        Path to the existing environment file

    Raises:
        ConfigurationMissingError: If the file does not exist
    """
    path = Path(base_dir) / f"{ENV_FILE_PREFIX}{mode or ''}"
    if not path.is_file():
        raise ConfigurationMissingError(path, mode)
    return path


def validate_settings(raw: Mapping[str, Any], mode: str | None = None) -> Settings:
    """
    Validate raw key/value settings into a typed Settings object.

    All violations are collected into a single error.

    Raises:
        ConfigurationInvalidError: If any field is missing or has the wrong type
    """
    try:
        settings = Settings(**dict(raw))
    except ValidationError as e:
        violations = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        raise ConfigurationInvalidError(violations) from e

    if mode is not None:
        settings = settings.model_copy(update={"APP_ENV": mode})
    return settings


def load_settings(mode: str | None = None, base_dir: str | Path = ".") -> Settings:
    """
    Resolve, parse and validate the environment file for a mode.

    Args:
        mode: Runtime mode; defaults to the APP_ENV environment variable
        base_dir: Directory holding the environment files

    Returns:
        Settings: The validated, immutable settings

    Raises:
        ConfigurationMissingError: If the mode has no environment file
        ConfigurationInvalidError: If the file fails validation
    """
    if mode is None:
        mode = os.environ.get(MODE_VARIABLE)

    path = resolve_env_file(mode, base_dir)
    raw = dotenv_values(path)
    settings = validate_settings(raw, mode=mode or "")

    logger.info(f"Loaded configuration for mode '{settings.APP_ENV}' from {path}")
    return settings
