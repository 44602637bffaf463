"""Base column definitions and metadata structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import pandas as pd

from housing_tlbx.errors import UnsupportedColumnKindError
from housing_tlbx.utils.labels import format_label


class ColumnKind(StrEnum):
    """Semantic kind of a column, used to choose the plot overlay."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def infer_column_kind(series: pd.Series) -> ColumnKind:
    """Classify a column as numeric or categorical from its dtype.

    Booleans, ``category``, ``object`` and string columns are categorical; every
    other numeric dtype is numeric.

    Raises:
        UnsupportedColumnKindError: For datetime, timedelta, period, interval and
            any other dtype that is neither numeric nor categorical.
    """
    dtype = series.dtype
    if (
        pd.api.types.is_bool_dtype(dtype)
        or isinstance(dtype, pd.CategoricalDtype)
        or pd.api.types.is_object_dtype(dtype)
        or pd.api.types.is_string_dtype(dtype)
    ):
        return ColumnKind.CATEGORICAL
    if pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_complex_dtype(dtype):
        return ColumnKind.NUMERIC
    raise UnsupportedColumnKindError(str(series.name), dtype)


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a dataset column.

    Attributes:
        cleaned_name: Descriptive column name used in DataFrames and plot labels.
        dtype: Expected pandas data type as a string.
        kind: Declared semantic kind of the column.
        description: Long-form description from the companion metadata table.
    """

    original_name: str
    """Short column name as it appears in the raw CSV file."""
    cleaned_name: str
    dtype: str
    kind: ColumnKind
    description: str = ""


class BaseColumn(StrEnum):
    """Base class for dataset column enums.

    All derived column enums must define a TARGET member to specify
    the dependent variable of the dataset, and implement ``metadata()``.
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def categorical_columns(cls) -> list[str]:
        """Get all categorical column names, in declaration order."""
        return [col.value for col in cls if col.kind is ColumnKind.CATEGORICAL]

    @classmethod
    def rename_map(cls) -> dict[str, str]:
        """Map short (raw CSV) names to descriptive names."""
        return {col.original_name: col.value for col in cls}

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for plots and visualizations."""
        return format_label(self.value)

    @property
    def original_name(self) -> str:
        """Get the original column name from the CSV file."""
        return self.metadata().original_name

    @property
    def dtype_name(self) -> str:
        """Get the expected data type as a string."""
        return self.metadata().dtype

    @property
    def kind(self) -> ColumnKind:
        return self.metadata().kind

    @property
    def description(self) -> str:
        return self.metadata().description
