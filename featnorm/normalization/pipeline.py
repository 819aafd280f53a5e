"""
Normalization pipeline.

Applies min-max normalization to the columns of a DataFrame, each column
with the output range given in its config entry.

COLUMN SELECTION:
    1. Explicit columns passed to the pipeline
    2. Columns listed in normalization.yaml
    3. Every numeric column of the frame
"""

import logging
from typing import Any

import pandas as pd

from featnorm.core.config import NormalizationConfig, load_config
from featnorm.core.exceptions import (
    DivisionByZeroError,
    EmptyInputError,
    ValidationError,
)
from featnorm.core.types import ColumnSummary, NormalizationRange
from featnorm.normalization.methods import normalize_series


logger = logging.getLogger(__name__)


class NormalizationPipeline:
    """
    Pipeline for normalizing DataFrame columns.

    Loads configuration from YAML and rescales each target column onto
    its configured range. The input frame is never modified.

    STRICT MODE:
        Constant or all-missing columns raise (default).
        With strict=False they are left unchanged and reported in .skipped.
    """

    def __init__(
        self,
        config: NormalizationConfig | None = None,
        columns: list[str] | None = None,
        strict: bool | None = None,
    ) -> None:
        """
        Initialize normalization pipeline.

        Args:
            config: Normalization configuration (loaded from YAML if not provided)
            columns: Columns to normalize (overrides the configured columns)
            strict: Raise on columns that cannot be normalized
                (defaults to the config's strict flag)
        """
        self.config = config or load_config("normalization")
        self.columns = list(columns) if columns is not None else None
        self.strict = self.config.strict if strict is None else strict

        self.summaries: list[ColumnSummary] = []
        self.skipped: list[str] = []

    def _target_columns(self, frame: pd.DataFrame) -> list[str]:
        """Resolve which columns to normalize."""
        if self.columns is not None:
            requested, source = self.columns, "explicit"
        elif self.config.columns:
            # Configured columns may belong to another dataset
            requested = [c for c in self.config.columns if c in frame.columns]
            source = "config"
        else:
            requested = [
                c for c in frame.columns
                if pd.api.types.is_numeric_dtype(frame[c])
                and not pd.api.types.is_bool_dtype(frame[c])
            ]
            source = "numeric"

        for column in requested:
            if column not in frame.columns:
                raise ValidationError("Column not found", field=column)
            if not pd.api.types.is_numeric_dtype(frame[column]):
                raise ValidationError(
                    "Column is not numeric",
                    field=column,
                    value=str(frame[column].dtype),
                )

        logger.debug(f"Target columns ({source}): {requested}")
        return list(requested)

    def normalize(self, frame: pd.DataFrame) -> pd.DataFrame:
        """
        Normalize the target columns of a DataFrame.

        Args:
            frame: Input table

        Returns:
            Copy of the frame with normalized columns, replaced in place or
            added as <column><suffix> when a suffix is configured
        """
        self.summaries = []
        self.skipped = []

        targets = self._target_columns(frame)
        result = frame.copy()
        suffix = self.config.suffix

        for column in targets:
            target_range = self.config.get_range(column)

            try:
                normalized = normalize_series(
                    frame[column], target_range.low, target_range.high
                )
            except (EmptyInputError, DivisionByZeroError) as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping column {column}: {e}")
                self.skipped.append(column)
                continue

            output = f"{column}{suffix}" if suffix else column
            result[output] = normalized
            self.summaries.append(self._summarize(column, frame[column], target_range))

        logger.info(
            f"Normalized {len(self.summaries)} column(s)"
            + (f", skipped {len(self.skipped)}" if self.skipped else "")
        )
        return result

    @staticmethod
    def _summarize(
        column: str,
        values: pd.Series,
        target_range: NormalizationRange,
    ) -> ColumnSummary:
        """Record input bounds and counts for a normalized column."""
        numeric = pd.to_numeric(values)
        missing = int(numeric.isna().sum())
        return ColumnSummary(
            column=column,
            input_min=float(numeric.min()),
            input_max=float(numeric.max()),
            output_range=target_range,
            present_count=len(numeric) - missing,
            missing_count=missing,
        )

    def get_normalization_summary(self) -> dict[str, Any]:
        """
        Get summary of the last normalization run.

        Returns:
            Dictionary with per-column status
        """
        return {
            "strict": self.strict,
            "suffix": self.config.suffix,
            "normalized": [s.column for s in self.summaries],
            "skipped": list(self.skipped),
            "columns": {s.column: s.to_dict() for s in self.summaries},
        }
