"""
Custom exceptions for FEATNORM.

All exceptions inherit from FeatnormError for easy catching. The
normalization errors also inherit from the matching builtin so callers
can catch ValueError or ZeroDivisionError.
"""


class FeatnormError(Exception):
    """Base exception for all FEATNORM errors."""

    def __init__(self, message: str, feature: str | None = None):
        super().__init__(message)
        self.feature = feature

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.feature:
            parts.append(f"feature={self.feature}")
        return " | ".join(parts)


class ConfigurationError(FeatnormError):
    """Raised when configuration is invalid or missing."""

    pass


class EmptyInputError(FeatnormError, ValueError):
    """Raised when a sequence has no present values to take a min/max from."""

    def __init__(
        self,
        message: str = "No present values to normalize",
        length: int = 0,
        feature: str | None = None,
    ):
        super().__init__(message, feature=feature)
        self.length = length

    def __str__(self) -> str:
        return f"{super().__str__()} | length={self.length}"


class InvalidRangeError(FeatnormError, ValueError):
    """Raised when the output bounds are not strictly increasing."""

    def __init__(
        self,
        low: float,
        high: float,
        feature: str | None = None,
    ):
        super().__init__("Output range must satisfy low < high", feature=feature)
        self.low = low
        self.high = high

    def __str__(self) -> str:
        return f"{super().__str__()} | low={self.low!r}, high={self.high!r}"


class DivisionByZeroError(FeatnormError, ZeroDivisionError):
    """Raised when all present values are identical and the scale is undefined."""

    def __init__(
        self,
        value: float,
        feature: str | None = None,
    ):
        super().__init__("All present values are identical", feature=feature)
        self.value = value

    def __str__(self) -> str:
        return f"{super().__str__()} | value={self.value!r}"


class ValidationError(FeatnormError):
    """Raised when pipeline input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ):
        super().__init__(message, feature=field)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.field:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)
