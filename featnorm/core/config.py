"""
Configuration management for FEATNORM.

Loads settings from environment variables and YAML config files.
Uses pydantic for validation.

Priority order:
1. Environment variables (FEATNORM_ prefix)
2. .env file
3. Field defaults
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from featnorm.core.constants import (
    CONFIG_FILES,
    DEFAULT_COLUMN_SUFFIX,
    DEFAULT_HIGH,
    DEFAULT_LOW,
)
from featnorm.core.exceptions import ConfigurationError
from featnorm.core.types import NormalizationRange


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variables are read with the FEATNORM_ prefix, e.g. FEATNORM_DEFAULT_LOW.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEATNORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default output range
    default_low: float = Field(
        default=DEFAULT_LOW,
        description="Lower bound of the default output range",
    )
    default_high: float = Field(
        default=DEFAULT_HIGH,
        description="Upper bound of the default output range",
    )

    # Paths
    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing YAML config files",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("config_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()

    @model_validator(mode="after")
    def check_default_range(self) -> "Settings":
        """Reject a default range that is not strictly increasing."""
        if not self.default_low < self.default_high:
            raise ValueError(
                f"default_low ({self.default_low}) must be less than "
                f"default_high ({self.default_high})"
            )
        return self

    @property
    def default_range(self) -> NormalizationRange:
        """Default output range as a NormalizationRange."""
        return NormalizationRange(self.default_low, self.default_high)


class NormalizationConfig:
    """Configuration for normalization loaded from normalization.yaml."""

    def __init__(self, config_path: Path):
        self._config = self._load_yaml(config_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NormalizationConfig":
        """Build a config from an in-memory dict with the YAML layout."""
        config = cls.__new__(cls)
        config._config = data or {}
        return config

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load and parse YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        return data

    @property
    def _section(self) -> dict[str, Any]:
        return self._config.get("normalization") or {}

    @property
    def default_range(self) -> NormalizationRange:
        """Output range used for columns without their own entry."""
        return self._parse_range(self._section.get("default_range"), None)

    @property
    def suffix(self) -> str:
        """Suffix for normalized columns ("" replaces in place)."""
        return str(self._section.get("suffix", DEFAULT_COLUMN_SUFFIX) or "")

    @property
    def strict(self) -> bool:
        """Whether per-column normalization errors propagate."""
        return bool(self._section.get("strict", True))

    @property
    def columns(self) -> list[str]:
        """Columns listed in the config, in file order."""
        return list((self._section.get("columns") or {}).keys())

    def get_column_config(self, column: str) -> dict[str, Any]:
        """Get configuration for a specific column."""
        columns = self._section.get("columns") or {}
        return columns.get(column) or {}

    def get_range(self, column: str) -> NormalizationRange:
        """Output range for a column, falling back to the default range."""
        pair = self.get_column_config(column).get("range")
        if pair is None:
            return self.default_range
        return self._parse_range(pair, column)

    @staticmethod
    def _parse_range(pair: Any, column: str | None) -> NormalizationRange:
        if pair is None:
            return NormalizationRange()
        if not isinstance(pair, (list, tuple)):
            raise ConfigurationError(
                f"Range must be a [low, high] list, got {pair!r}",
                feature=column,
            )
        return NormalizationRange.from_pair(pair)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def load_config(config_type: str) -> NormalizationConfig:
    """
    Load a specific configuration file.

    Args:
        config_type: Currently only "normalization"

    Returns:
        Appropriate config object
    """
    settings = get_settings()
    config_map = {
        "normalization": NormalizationConfig,
    }

    if config_type not in config_map:
        raise ConfigurationError(
            f"Unknown config type: {config_type}. "
            f"Valid types: {list(config_map.keys())}"
        )

    path = settings.config_dir / CONFIG_FILES[config_type]
    return config_map[config_type](path)
