"""Configuration management for manifestcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from manifestcheck.constants import ALL_PLATFORMS, BASE_MANIFEST_FORMAT

CONFIG_FILE_NAME = ".manifestcheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    rules_dir: str | None = Field(alias="rulesDir", default=None)
    platforms: list[str] = Field(default_factory=list)
    base_format: str = Field(alias="baseFormat", default=BASE_MANIFEST_FORMAT)
    rule_timeout: float | None = Field(alias="ruleTimeout", default=None)
    fail_on_warnings: bool = Field(alias="failOnWarnings", default=False)

    @field_validator("platforms")
    @classmethod
    def validate_platforms(cls, v):
        """Platform tags name rule folders, so they must be plain names."""
        for tag in v:
            if not tag or "/" in tag or "\\" in tag or tag.startswith("."):
                raise ValueError(f"invalid platform tag {tag!r}, known tags are {list(ALL_PLATFORMS)}")
        return list(dict.fromkeys(v))

    @field_validator("rule_timeout")
    @classmethod
    def validate_rule_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("rule_timeout must be > 0")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class ManifestCheckConfig(BaseModel):
    """Complete manifestcheck configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> ManifestCheckConfig:
    """Load the config file, or the defaults when there is none.

    Without ``config_path`` the nearest .manifestcheck.json up the tree is
    used. A given path that does not exist also yields the defaults.

    Raises:
        ValueError: If the file is not valid JSON or not a valid config
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return ManifestCheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .manifestcheck.json from ``start_dir`` (or the cwd) upwards."""
    current = Path(start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        config_file = directory / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

    return None


def create_default_config() -> ManifestCheckConfig:
    """Create default configuration."""
    return ManifestCheckConfig()
