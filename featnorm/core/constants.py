"""
Constants for FEATNORM.

Central location for default values and configuration constants.
"""

# ============================================================
# NORMALIZATION RANGE
# ============================================================

# Default output interval for min-max scaling
DEFAULT_LOW = -1.0
DEFAULT_HIGH = 1.0

# Suffix appended to normalized columns ("" replaces the column in place)
DEFAULT_COLUMN_SUFFIX = ""

# ============================================================
# MISSING VALUE TOKENS
# ============================================================

# Command line tokens read as a missing value (compared case-insensitively)
MISSING_TOKENS = frozenset({"na", "nan", "none", "null", "-"})

# Token printed for a missing value
MISSING_OUTPUT = "NA"

# ============================================================
# CONFIG FILES
# ============================================================

CONFIG_FILES = {
    "normalization": "normalization.yaml",
}
