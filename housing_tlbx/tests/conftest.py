"""Test configuration for the housing toolbox."""

from pathlib import Path
import sys

import matplotlib
import numpy as np
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


BOSTON_SHORT_NAMES = [
    "crim", "zn", "indus", "chas", "nox", "rm", "age",
    "dis", "rad", "tax", "ptratio", "black", "lstat", "medv",
]  # fmt: skip


@pytest.fixture
def sample_df() -> pd.DataFrame:
    """Numeric ``a``, categorical ``b`` and the dependent variable, in that order."""
    return pd.DataFrame(
        {
            "a": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0],
            "b": pd.Categorical(["x", "y", "x", "y", "z", "z", "x", "y"]),
            "dependent_var": [10.0, 12.5, 13.0, 16.0, 18.5, 19.0, 22.0, 23.5],
        },
    )


@pytest.fixture
def sample_dataset(sample_df: pd.DataFrame):
    """TabularDataset over ``sample_df``."""
    from housing_tlbx.data import TabularDataset

    return TabularDataset(sample_df, target_col="dependent_var", source_caption="Source: test data")


@pytest.fixture
def boston_raw_df() -> pd.DataFrame:
    """Synthetic table with the raw (short) Boston housing column names."""
    rng = np.random.default_rng(0)
    n = 40
    rooms = rng.normal(6.3, 0.7, n).round(3)
    return pd.DataFrame(
        {
            "crim": rng.exponential(3.0, n).round(5),
            "zn": rng.choice([0.0, 12.5, 25.0], n),
            "indus": rng.uniform(0.5, 27.0, n).round(2),
            "chas": np.tile([0, 1], n // 2),
            "nox": rng.uniform(0.38, 0.87, n).round(3),
            "rm": rooms,
            "age": rng.uniform(3.0, 100.0, n).round(1),
            "dis": rng.uniform(1.1, 12.0, n).round(4),
            "rad": rng.integers(1, 9, n),
            "tax": rng.integers(187, 711, n),
            "ptratio": rng.uniform(12.6, 22.0, n).round(1),
            "black": rng.uniform(0.3, 396.9, n).round(2),
            "lstat": rng.uniform(1.7, 38.0, n).round(2),
            "medv": (9.0 * rooms - 34.0 + rng.normal(0, 3, n)).round(1),
        },
    )


@pytest.fixture
def boston_csv(boston_raw_df: pd.DataFrame, tmp_path: Path) -> Path:
    csv_path = tmp_path / "boston.csv"
    boston_raw_df.to_csv(csv_path, index=False)
    return csv_path


@pytest.fixture
def boston_dataset(boston_csv: Path):
    """BostonHousingDataset loaded from the synthetic CSV and the shipped metadata table."""
    from housing_tlbx.data import BostonHousingDataset

    return BostonHousingDataset.from_csv(csv_path=boston_csv)
