"""
Core type definitions for FEATNORM.

Defines dataclasses and type aliases used throughout the system.
"""

import math
from dataclasses import dataclass
from typing import Any, Sequence, TypeAlias

from featnorm.core.constants import DEFAULT_HIGH, DEFAULT_LOW
from featnorm.core.exceptions import InvalidRangeError


# A single sample: a number, or a missing marker (None, NaN, pd.NA, pd.NaT)
Sample: TypeAlias = Any

# Output of normalize(): floats, with None at missing positions
NormalizedValues: TypeAlias = list[float | None]


@dataclass(frozen=True)
class NormalizationRange:
    """
    Target output interval for min-max scaling.

    Construction fails with InvalidRangeError unless low < high.
    """

    low: float = DEFAULT_LOW
    high: float = DEFAULT_HIGH

    def __post_init__(self) -> None:
        # Store bounds as floats; YAML may hand over strings such as "0"
        try:
            low, high = float(self.low), float(self.high)
        except (TypeError, ValueError):
            raise InvalidRangeError(self.low, self.high) from None
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)
        self.validate()

    def validate(self) -> None:
        """Raise InvalidRangeError unless low < high (NaN bounds never pass)."""
        if not self.low < self.high:
            raise InvalidRangeError(self.low, self.high)

    @property
    def width(self) -> float:
        """Length of the interval."""
        return self.high - self.low

    def as_tuple(self) -> tuple[float, float]:
        """Return (low, high) as floats."""
        return self.low, self.high

    @classmethod
    def from_pair(cls, pair: Sequence[float] | None) -> "NormalizationRange":
        """
        Build a range from a [low, high] pair, as found in YAML config.

        None gives the default range.
        """
        if pair is None:
            return cls()
        if len(pair) != 2:
            raise InvalidRangeError(
                pair[0] if len(pair) > 0 else math.nan,
                pair[-1] if len(pair) > 0 else math.nan,
            )
        return cls(low=pair[0], high=pair[1])


@dataclass(frozen=True)
class ColumnSummary:
    """Result of normalizing a single DataFrame column."""

    column: str
    input_min: float
    input_max: float
    output_range: NormalizationRange
    present_count: int
    missing_count: int

    @property
    def total_count(self) -> int:
        """Number of rows in the column."""
        return self.present_count + self.missing_count

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "column": self.column,
            "input_min": self.input_min,
            "input_max": self.input_max,
            "low": self.output_range.low,
            "high": self.output_range.high,
            "present": self.present_count,
            "missing": self.missing_count,
        }
