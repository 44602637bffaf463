"""Task-specific views over dataset content."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd

from .base_columns import ColumnKind


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset data and related metadata.

    Attributes:
        df: Dataframe copy containing the selected columns.
        pretty_by_col: Mapping from column names to display-friendly labels.
        kind_by_col: Mapping from column names to their semantic kind.
        target_col: Optional name of the dependent variable.
    """

    df: pd.DataFrame
    """Dataframe copy containing the selected columns."""
    pretty_by_col: Mapping[str, str]
    """Mapping from column names to display-friendly labels."""
    kind_by_col: Mapping[str, ColumnKind]
    target_col: str | None = None

