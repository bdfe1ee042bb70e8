"""Client configuration using pydantic-settings, with an optional YAML overlay."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .utils.logging import get_logger

CONFIG_ENV_VAR = "DIARY_SYNC_CONFIG"
DEFAULT_CONFIG_FILENAME = "diary-sync.yaml"


class Config(BaseSettings):
    """Diary service client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DIARY_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Transport
    base_url: str = Field(
        default="http://localhost:8080/api",
        description="Base URL every diary endpoint is resolved against",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field(default="DiarySync/0.1", description="User-Agent header")
    max_connections: int = Field(default=20, ge=1)
    max_keepalive_connections: int = Field(default=10, ge=0)
    keepalive_expiry: float = Field(default=60.0, ge=0)

    # Requests
    default_page_size: int = Field(default=5, ge=1, description="Diaries per page")
    json_part_name: str = Field(
        default="diary", description="Multipart name of the JSON diary part"
    )
    image_part_name: str = Field(
        default="images", description="Multipart name of each image part"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"base_url must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level {v!r}"
            raise ValueError(msg)
        return level


_config: Config | None = None


def _find_config_file(config_path: Path | None) -> Path | None:
    if config_path:
        return config_path.expanduser()
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    default = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default if default.exists() else None


def load_config(config_path: Path | None = None, **overrides: Any) -> Config:
    """Load configuration from environment, .env and an optional YAML file.

    Precedence: explicit overrides, then YAML values, then environment,
    then defaults.

    Raises:
        ConfigurationError: If the YAML file is unreadable or values are invalid
    """
    import yaml

    logger = get_logger(__name__)

    yaml_data: dict[str, Any] = {}
    resolved = _find_config_file(config_path)
    if resolved is not None:
        if not resolved.exists():
            msg = f"Config file not found: {resolved}"
            raise ConfigurationError(msg, suggestion=f"Create {resolved} or unset {CONFIG_ENV_VAR}")
        try:
            with open(resolved, encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(
                "config_yaml_load_error",
                config_path=str(resolved),
                error=str(e),
                error_type=type(e).__name__,
            )
            msg = f"Failed to parse config file: {resolved}"
            suggestion = (
                "Check YAML syntax (indentation, colons, quotes). "
                f"Original error: {e}"
            )
            raise ConfigurationError(msg, suggestion=suggestion) from e
        if not isinstance(yaml_data, dict):
            msg = f"Config file must contain a mapping: {resolved}"
            raise ConfigurationError(msg)
        logger.debug("config_yaml_loaded", config_path=str(resolved), keys_count=len(yaml_data))

    values = {**yaml_data, **{k: v for k, v in overrides.items() if v is not None}}
    try:
        config = Config(**values)
    except ValidationError as e:
        msg = f"Invalid configuration: {e.error_count()} error(s)"
        raise ConfigurationError(msg, suggestion=str(e)) from e

    logger.debug("config_loaded", base_url=config.base_url, source=str(resolved) if resolved else "environment")
    return config


def get_config() -> Config:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config
    _config = None


__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
