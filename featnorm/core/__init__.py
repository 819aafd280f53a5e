"""Core module containing types, configuration, and shared utilities."""

from featnorm.core.types import ColumnSummary, NormalizationRange
from featnorm.core.config import (
    NormalizationConfig,
    Settings,
    get_settings,
    load_config,
)
from featnorm.core.exceptions import (
    FeatnormError,
    ConfigurationError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidRangeError,
    ValidationError,
)

__all__ = [
    # Types
    "ColumnSummary",
    "NormalizationRange",
    # Config
    "NormalizationConfig",
    "Settings",
    "get_settings",
    "load_config",
    # Exceptions
    "FeatnormError",
    "ConfigurationError",
    "DivisionByZeroError",
    "EmptyInputError",
    "InvalidRangeError",
    "ValidationError",
]
