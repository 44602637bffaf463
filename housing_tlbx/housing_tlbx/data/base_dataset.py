"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

import pandas as pd

from housing_tlbx.errors import InvalidColumnError
from housing_tlbx.utils.labels import format_label

from .base_columns import BaseColumn, ColumnKind, infer_column_kind
from .views import DatasetView


class BaseDataset(ABC):
    """Abstract base class for datasets consumed by the plot builders.

    A dataset is a table of uniquely named columns, each classified once at
    construction as numeric or categorical, plus a numeric dependent variable
    (``target_col``) that every target plot draws on the vertical axis.
    """

    Col: type[BaseColumn] | None = None
    source_caption: str = "Source: unknown"

    def __init__(
        self,
        df: pd.DataFrame,
        target_col: str | None = None,
        kinds: Mapping[str, ColumnKind] | None = None,
    ) -> None:
        """Initialize and validate the dataset.

        Args:
            df: Pre-loaded and cleaned DataFrame
            target_col: Dependent variable (defaults to ``Col.TARGET``)
            kinds: Optional per-column kind overrides; columns not listed use the
                kind declared by ``Col`` or, failing that, the inferred one

        Raises:
            ValueError: If column names are not unique or no target is given
            InvalidColumnError: If a column name is not a string, or the target is
                missing or not numeric
            UnsupportedColumnKindError: If a column cannot be classified
        """
        if not df.columns.is_unique:
            dupes = df.columns[df.columns.duplicated()].unique().tolist()
            raise ValueError(f"Column names must be unique, duplicated: {dupes}")
        non_str = [col for col in df.columns if not isinstance(col, str)]
        if non_str:
            raise InvalidColumnError(str(non_str[0]), f"Column names must be strings, got {non_str[0]!r}.")

        target_col = target_col or (self.Col.TARGET if self.Col is not None else None)
        if target_col is None:
            raise ValueError("No target column given and no column enum declares TARGET.")

        self._df = df
        self._target_col = str(target_col)
        self._kinds = MappingProxyType(self._classify_columns(kinds or {}))

        if self._target_col not in self._kinds:
            raise InvalidColumnError(self._target_col, f"Target column '{self._target_col}' not found in dataset.")
        if self._kinds[self._target_col] is not ColumnKind.NUMERIC:
            raise InvalidColumnError(self._target_col, f"Target column '{self._target_col}' must be numeric.")

    @classmethod
    @abstractmethod
    def from_csv(cls, *args: object, **kwargs: object) -> "BaseDataset":
        """Load dataset from CSV file."""
        ...

    def _classify_columns(self, overrides: Mapping[str, ColumnKind]) -> dict[str, ColumnKind]:
        declared: dict[str, ColumnKind] = {col.value: col.kind for col in self.Col} if self.Col is not None else {}
        kinds: dict[str, ColumnKind] = {}
        for col in self._df.columns:
            if col in overrides:
                kinds[col] = ColumnKind(overrides[col])
            elif col in declared:
                kinds[col] = declared[col]
            else:
                kinds[col] = infer_column_kind(self._df[col])
        return kinds

    @property
    def df(self) -> pd.DataFrame:
        """Get the cleaned DataFrame."""
        return self._df

    @property
    def target_col(self) -> str:
        return self._target_col

    @property
    def column_kinds(self) -> Mapping[str, ColumnKind]:
        """Read-only mapping of column name to kind, in native column order."""
        return self._kinds

    def kind_of(self, column: str) -> ColumnKind:
        """Return the kind of ``column``.

        Raises:
            InvalidColumnError: If the column does not exist
        """
        try:
            return self._kinds[column]
        except KeyError:
            raise InvalidColumnError(column) from None

    def feature_columns(self, extra_exclude: Iterable[str] | None = None) -> list[str]:
        """Return all non-target columns in the dataset's native column order."""
        exclude = {self._target_col, *(extra_exclude or ())}
        return [col for col in self._kinds if col not in exclude]

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for visualization."""
        return format_label(column_name)

    def view(self, columns: Iterable[str] | None = None, *, dropna: bool = True) -> DatasetView:
        """Build an immutable view for the plotting layers.

        Args:
            columns: Columns to include in the view (defaults to all)
            dropna: Drop rows with missing values in the selected columns

        Returns:
            DatasetView holding a copy of the selected data and its metadata

        Raises:
            InvalidColumnError: If a requested column does not exist
        """
        selected_cols = list(columns) if columns is not None else list(self._kinds)
        for col in selected_cols:
            self.kind_of(col)

        frame = self._df.loc[:, selected_cols].copy()
        if dropna:
            frame = frame.dropna(axis=0, how="any")

        return DatasetView(
            df=frame,
            pretty_by_col=MappingProxyType({col: self.get_pretty_name(col) for col in selected_cols}),
            kind_by_col=MappingProxyType({col: self._kinds[col] for col in selected_cols}),
            target_col=self._target_col if self._target_col in selected_cols else None,
        )


class TabularDataset(BaseDataset):
    """Dataset over an arbitrary DataFrame with an explicitly named target.

    Example:
        >>> ds = TabularDataset(df, target_col="price", source_caption="Source: listings 2024")
        >>> ds.column_kinds["district"]
        <ColumnKind.CATEGORICAL: 'categorical'>
    """

    def __init__(
        self,
        df: pd.DataFrame,
        target_col: str,
        kinds: Mapping[str, ColumnKind] | None = None,
        source_caption: str | None = None,
    ) -> None:
        super().__init__(df, target_col=target_col, kinds=kinds)
        if source_caption is not None:
            self.source_caption = source_caption

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        *,
        target_col: str,
        categorical: Iterable[str] = (),
        source_caption: str | None = None,
        **read_csv_kwargs: object,
    ) -> "TabularDataset":
        """Load a CSV file, re-typing the listed columns as categorical.

        Args:
            filepath: Path to the CSV file
            target_col: Dependent variable column
            categorical: Columns to convert to ``category`` dtype
            source_caption: Caption identifying the data source
            **read_csv_kwargs: Passed through to :func:`pandas.read_csv`
        """
        df = pd.read_csv(filepath, **read_csv_kwargs)
        categorical = list(categorical)
        missing = [col for col in categorical if col not in df.columns]
        if missing:
            raise InvalidColumnError(missing[0])
        df = df.assign(**{col: df[col].astype("category") for col in categorical})
        return cls(df, target_col=target_col, source_caption=source_caption)
