"""
Normalization module for FEATNORM.

Provides min-max normalization of sequences, Series and DataFrame columns.
"""

from featnorm.normalization.methods import (
    is_missing,
    normalize,
    normalize_series,
    present_bounds,
)
from featnorm.normalization.pipeline import NormalizationPipeline

__all__ = [
    "is_missing",
    "normalize",
    "normalize_series",
    "present_bounds",
    "NormalizationPipeline",
]
