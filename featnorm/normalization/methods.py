"""
Normalization methods.

Implements min-max scaling onto a target interval. Missing values are
ignored when taking the minimum and maximum and are kept in place in
the output.
"""

import logging
from typing import Iterable

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from featnorm.core.constants import DEFAULT_HIGH, DEFAULT_LOW
from featnorm.core.exceptions import (
    DivisionByZeroError,
    EmptyInputError,
    ValidationError,
)
from featnorm.core.types import NormalizationRange, NormalizedValues, Sample


logger = logging.getLogger(__name__)


def is_missing(value: Sample) -> bool:
    """
    Check whether a single sample is a missing marker.

    None, float NaN, pandas.NA and pandas.NaT all count as missing.
    """
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _to_array(values: Iterable[Sample]) -> NDArray[np.float64]:
    """Convert samples to a float array with NaN at missing positions."""
    return np.array(
        [np.nan if is_missing(v) else float(v) for v in values],
        dtype=np.float64,
    )


def present_bounds(values: Iterable[Sample]) -> tuple[float, float]:
    """
    Minimum and maximum of the present values.

    Args:
        values: Samples, possibly containing missing markers

    Returns:
        (min, max) over present values

    Raises:
        EmptyInputError: If no value is present
        ValidationError: If a present value is infinite
    """
    return _bounds(_to_array(values))


def _bounds(
    arr: NDArray[np.float64],
    feature: str | None = None,
) -> tuple[float, float]:
    present = arr[~np.isnan(arr)]
    if len(present) == 0:
        raise EmptyInputError(length=len(arr), feature=feature)
    if not np.all(np.isfinite(present)):
        bad = present[~np.isfinite(present)][0]
        raise ValidationError(
            "Values must be finite",
            field=feature,
            value=float(bad),
        )
    return float(np.min(present)), float(np.max(present))


def _rescale(
    arr: NDArray[np.float64],
    target: NormalizationRange,
    feature: str | None = None,
) -> NDArray[np.float64]:
    """
    Min-max rescale a float array onto target, leaving NaN in place.

    Formula: low + (value - min) * (high - low) / (max - min)

    When max - min overflows, operands are halved before subtracting.
    """
    d_min, d_max = _bounds(arr, feature)
    if d_max == d_min:
        raise DivisionByZeroError(d_min, feature=feature)

    low, high = target.as_tuple()
    span = d_max - d_min
    if np.isfinite(span):
        fraction = (arr - d_min) / span
    else:
        fraction = (arr / 2 - d_min / 2) / (d_max / 2 - d_min / 2)

    result = low * (1.0 - fraction) + high * fraction
    # Pin the top of the range against rounding error
    result[arr == d_max] = high

    logger.debug(
        f"Rescaled {feature or 'values'}: [{d_min}, {d_max}] -> [{low}, {high}]"
    )
    return result


def normalize(
    values: Iterable[Sample],
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
) -> NormalizedValues:
    """
    Min-max normalization of a sequence with missing values.

    The minimum present value maps to low, the maximum to high, and every
    other present value is placed affinely between them.

    Args:
        values: Samples; None, NaN, pd.NA and pd.NaT are treated as missing
        low: Lower bound of the output range (default -1.0)
        high: Upper bound of the output range (default 1.0)

    Returns:
        List of the same length, floats at present positions, None at
        missing positions

    Raises:
        InvalidRangeError: If low >= high
        EmptyInputError: If there are no present values
        DivisionByZeroError: If all present values are identical
        ValidationError: If a present value is infinite
    """
    target = NormalizationRange(low, high)
    arr = _to_array(values)
    result = _rescale(arr, target)
    return [None if np.isnan(v) else float(r) for v, r in zip(arr, result)]


def normalize_series(
    series: pd.Series,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
) -> pd.Series:
    """
    Min-max normalization of a pandas Series.

    Same contract as normalize(); missing positions come back as NaN and
    the index and name of the input are kept.

    Args:
        series: Numeric series (nullable dtypes and object dtype with
            None are accepted)
        low: Lower bound of the output range
        high: Upper bound of the output range

    Returns:
        New float64 Series
    """
    target = NormalizationRange(low, high)
    feature = str(series.name) if series.name is not None else None

    numeric = pd.to_numeric(series, errors="raise")
    arr = numeric.to_numpy(dtype=np.float64, na_value=np.nan)
    result = _rescale(arr, target, feature)

    return pd.Series(result, index=series.index, name=series.name, dtype=np.float64)
