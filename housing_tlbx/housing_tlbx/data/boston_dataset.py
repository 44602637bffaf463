"""Loading and cleaning of the Boston housing dataset."""

import logging
from pathlib import Path

import pandas as pd

from housing_tlbx.errors import InvalidColumnError
from housing_tlbx.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .boston_columns import BostonColumn as Col


logger = logging.getLogger(__name__)

_METADATA_COLUMNS = ("short_name", "long_name", "description")


class BostonHousingDataset(BaseDataset):
    """Loading and preprocessing for the Boston housing dataset.

    **Example workflow**:
    >>> from housing_tlbx.data import BostonHousingDataset, BostonCol
    >>> from housing_tlbx.plotting import build_all_plots, build_plot
    >>> ds = BostonHousingDataset.from_csv()
    >>> rooms = build_plot(ds, BostonCol.ROOMS)
    >>> fig = rooms.render()
    >>> plots = build_all_plots(ds)
    >>> plots[BostonCol.CHARLES_RIVER].layer_kinds
    (<LayerKind.POINTS: 'points'>, <LayerKind.BOXPLOT: 'boxplot'>)
    """

    Col = Col
    source_caption = "Source: Boston housing data (Harrison & Rubinfeld, 1978)"

    @classmethod
    def from_csv(
        cls,
        *,
        csv_path: str | Path | None = None,
        metadata_path: str | Path | None = None,
    ) -> "BostonHousingDataset":
        """Load the housing CSV and rename its short column names to descriptive ones.

        - Normalize header whitespace and case
        - Rename columns with the companion metadata table, falling back to the
          short names declared on ``BostonColumn``
        - Re-type the declared categorical columns (the Charles River indicator)

        Args:
            csv_path: Path to the housing CSV (defaults to ``_data/boston.csv``)
            metadata_path: Path to the metadata table with ``short_name``, ``long_name``
                and ``description`` columns (defaults to ``_data/boston_metadata.csv``)

        Returns:
            BostonHousingDataset instance with loaded and cleaned data
        """
        csv_path = get_dataset_path("boston") if csv_path is None else Path(csv_path)
        metadata_path = get_dataset_path("boston_metadata") if metadata_path is None else Path(metadata_path)

        metadata = cls.read_metadata(metadata_path)
        rename_map = Col.rename_map() | dict(zip(metadata["short_name"], metadata["long_name"], strict=True))
        housing_df = (
            pd.read_csv(csv_path)
            .pipe(cls._normalize_col_names)
            .rename(columns=rename_map)
            .pipe(cls._convert_data_types)
        )
        logger.info("Loaded %d rows x %d columns from %s", *housing_df.shape, csv_path)

        return cls(df=housing_df)

    @staticmethod
    def read_metadata(metadata_path: str | Path) -> pd.DataFrame:
        """Read the metadata table mapping short column names to long names.

        Raises:
            ValueError: If a required column is missing or a short name is duplicated
        """
        metadata = pd.read_csv(metadata_path).pipe(BostonHousingDataset._normalize_col_names)
        missing = [col for col in _METADATA_COLUMNS[:2] if col not in metadata.columns]
        if missing:
            raise ValueError(f"Metadata table {metadata_path} is missing columns: {missing}")
        metadata = metadata.assign(
            short_name=lambda d: d["short_name"].str.strip().str.lower(),
            long_name=lambda d: d["long_name"].str.strip(),
        )
        if metadata["short_name"].duplicated().any():
            raise ValueError(f"Metadata table {metadata_path} lists a short name more than once.")
        return metadata

    @staticmethod
    def _normalize_col_names(df: pd.DataFrame) -> pd.DataFrame:
        """Strip whitespace and lower-case the raw column names."""
        return df.set_axis(df.columns.str.strip().str.lower(), axis=1)

    @staticmethod
    def _convert_data_types(df: pd.DataFrame) -> pd.DataFrame:
        """Convert the declared categorical columns (the Charles River dummy) and the rest to numbers.

        Raises:
            InvalidColumnError: If the dependent variable is missing after renaming
        """
        if Col.TARGET not in df.columns:
            raise InvalidColumnError(Col.TARGET, f"Target column '{Col.TARGET}' not found after renaming.")

        categorical_cols = [col for col in Col.categorical_columns() if col in df.columns]
        numeric_cols = [col for col in df.columns if col not in categorical_cols]
        return df.assign(
            **{col: pd.to_numeric(df[col], errors="coerce") for col in numeric_cols},
            **{col: df[col].astype("Int64").astype("category") for col in categorical_cols},
        )
