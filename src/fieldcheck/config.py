"""Configuration management for fieldcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError

CONFIG_FILENAME = ".fieldcheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    fail_silently: bool = Field(alias="failSilently", default=False)
    use_declared_names: bool = Field(alias="useDeclaredNames", default=True)

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.ERROR

    model_config = ConfigDict(use_enum_values=True)

    @property
    def python_level(self) -> str:
        level = LogLevel(self.level)
        return "WARNING" if level == LogLevel.WARN else level.value.upper()


class FieldcheckConfig(BaseModel):
    """Complete fieldcheck configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> FieldcheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .fieldcheck.json

    Returns:
        FieldcheckConfig: Loaded and validated configuration

    Raises:
        ConfigError: If the file is not valid JSON or not a valid configuration
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e
        try:
            return FieldcheckConfig(**config_data)
        except Exception as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

    return FieldcheckConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .fieldcheck.json by searching up the directory tree."""
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None
