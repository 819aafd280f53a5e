"""
Pytest configuration and fixtures.
"""

import importlib.util
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from featnorm.core.config import NormalizationConfig


PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def passenger_frame() -> pd.DataFrame:
    """Small passenger survival table with missing ages."""
    return pd.DataFrame({
        "Name": [
            "Braund, Mr. Owen Harris",
            "Cumings, Mrs. John Bradley",
            "Heikkinen, Miss. Laina",
            "Futrelle, Mrs. Jacques Heath",
            "Moran, Mr. James",
        ],
        "Survived": [0, 1, 1, 1, 0],
        "Sex": ["male", "female", "female", "female", "male"],
        "Age": [22.0, 38.0, 26.0, np.nan, 35.0],
        "Fare": [7.25, 71.2833, 7.925, 53.1, 8.4583],
    })


@pytest.fixture
def vehicle_frame() -> pd.DataFrame:
    """Small vehicle fuel-economy table with a missing horsepower."""
    return pd.DataFrame({
        "name": ["chevrolet chevelle", "buick skylark", "ford pinto", "ford maverick"],
        "mpg": [18.0, 15.0, 25.0, 21.0],
        "horsepower": [130.0, 165.0, np.nan, 85.0],
        "weight": [3504, 3693, 2046, 2587],
        "cylinders": [8, 8, 4, 6],
    })


@pytest.fixture
def normalization_config() -> NormalizationConfig:
    """In-memory config with per-column ranges."""
    return NormalizationConfig.from_dict({
        "normalization": {
            "default_range": [-1.0, 1.0],
            "suffix": "",
            "strict": True,
            "columns": {
                "Age": {"range": [-1.0, 1.0]},
                "Fare": {"range": [0.0, 1.0]},
                "mpg": {"range": [0.0, 100.0]},
                "horsepower": {},
            },
        }
    })


@pytest.fixture
def empty_config() -> NormalizationConfig:
    """Config with no column entries."""
    return NormalizationConfig.from_dict({})


@pytest.fixture
def normalize_script():
    """Load scripts/normalize_values.py as a module."""
    path = PROJECT_ROOT / "scripts" / "normalize_values.py"
    spec = importlib.util.spec_from_file_location("normalize_values", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
