"""
FEATNORM - Min-max feature normalization

Rescales numeric features onto a target interval, anchored at the
minimum and maximum of the present (non-missing) values.

This package provides:
- normalize: min-max scaling of a plain sequence with missing values
- normalize_series: the same transform on a pandas Series
- NormalizationPipeline: per-column normalization of a pandas DataFrame
"""

__version__ = "0.1.0"
__author__ = "FEATNORM Team"

from featnorm.core.types import NormalizationRange
from featnorm.normalization.methods import normalize, normalize_series

__all__ = [
    "NormalizationRange",
    "normalize",
    "normalize_series",
]
