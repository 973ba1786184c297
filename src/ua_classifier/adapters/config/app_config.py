"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _check_batch_max_concurrency(value: int) -> int:
    if value < 1:
        raise ValueError("batch_max_concurrency must be at least 1")
    return value


def normalize_log_level(value: str) -> str:
    """Return the upper-case level name, raising ValueError for unknown levels."""
    level = value.upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"log_level must be a logging level name, got '{value}'")
    return level


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Classifier selection
    general_classifier_enabled: bool = Field(
        default=True, description="Enable the general UA classifier (ua-parser)"
    )
    device_classifier_enabled: bool = Field(
        default=True, description="Enable the device/bot classifier (device-detector)"
    )
    mobile_classifier_enabled: bool = Field(
        default=True, description="Enable the mobile/tablet classifier (user-agents)"
    )

    # Batch classification
    batch_max_concurrency: int = Field(
        default=8,
        description="Maximum number of user agents classified in parallel in batch mode",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level name (DEBUG, INFO, ...)")
    log_user_agent_max_length: int = Field(
        default=200,
        description="User agents longer than this are truncated in log messages",
    )

    # Optional TOML config file with [classifiers] and [logging] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding classifier and logging settings",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores any .env file in the working directory."""
        return cls(_env_file=None, **overrides)

    @field_validator("batch_max_concurrency")
    @classmethod
    def validate_batch_max_concurrency(cls, v: int) -> int:
        """Validate batch concurrency is positive."""
        return _check_batch_max_concurrency(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        return normalize_log_level(v)

    def apply_toml_overrides(self) -> None:
        """Load the TOML config file and apply its settings on top of the environment."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML overrides")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        classifiers = toml_data.get("classifiers", {})
        if "general" in classifiers:
            self.general_classifier_enabled = bool(classifiers["general"])
        if "device" in classifiers:
            self.device_classifier_enabled = bool(classifiers["device"])
        if "mobile" in classifiers:
            self.mobile_classifier_enabled = bool(classifiers["mobile"])
        if "batch_max_concurrency" in classifiers:
            self.batch_max_concurrency = _check_batch_max_concurrency(
                int(classifiers["batch_max_concurrency"])
            )

        logging_config = toml_data.get("logging", {})
        if "level" in logging_config:
            self.log_level = normalize_log_level(str(logging_config["level"]))
        if "user_agent_max_length" in logging_config:
            self.log_user_agent_max_length = int(logging_config["user_agent_max_length"])
