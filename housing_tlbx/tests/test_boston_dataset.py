"""Tests for BostonHousingDataset."""

from pathlib import Path

import pandas as pd
import pytest

from housing_tlbx.data import BostonCol, BostonHousingDataset, ColumnKind
from housing_tlbx.errors import InvalidColumnError


class TestBostonHousingDataset:
    """Test loading, renaming and re-typing of the housing data."""

    def test_from_csv_renames_columns(self, boston_dataset: BostonHousingDataset) -> None:
        assert list(boston_dataset.df.columns) == [col.value for col in BostonCol if col is not BostonCol.TARGET] + [
            BostonCol.TARGET.value,
        ]

    def test_target_is_median_house_value(self, boston_dataset: BostonHousingDataset) -> None:
        assert boston_dataset.target_col == "median_house_value"
        assert pd.api.types.is_float_dtype(boston_dataset.df[BostonCol.TARGET])

    def test_charles_river_is_categorical(self, boston_dataset: BostonHousingDataset) -> None:
        chas = boston_dataset.df[BostonCol.CHARLES_RIVER]
        assert isinstance(chas.dtype, pd.CategoricalDtype)
        assert list(chas.cat.categories) == [0, 1]
        assert boston_dataset.kind_of(BostonCol.CHARLES_RIVER) is ColumnKind.CATEGORICAL

    def test_other_features_numeric(self, boston_dataset: BostonHousingDataset) -> None:
        kinds = boston_dataset.column_kinds
        numeric = [col for col, kind in kinds.items() if kind is ColumnKind.NUMERIC]
        assert len(numeric) == 13
        assert BostonCol.ROOMS in numeric

    def test_feature_columns_keep_csv_order(self, boston_dataset: BostonHousingDataset) -> None:
        features = boston_dataset.feature_columns()
        assert features[0] == "per_capita_crime_rate"
        assert features[-1] == "lower_status_population"
        assert "median_house_value" not in features

    def test_source_caption(self, boston_dataset: BostonHousingDataset) -> None:
        assert "Boston" in boston_dataset.source_caption

    def test_messy_headers_are_normalized(self, boston_raw_df: pd.DataFrame, tmp_path: Path) -> None:
        csv_path = tmp_path / "messy.csv"
        boston_raw_df.rename(columns={"crim": " CRIM ", "medv": "MEDV"}).to_csv(csv_path, index=False)

        ds = BostonHousingDataset.from_csv(csv_path=csv_path)

        assert "per_capita_crime_rate" in ds.df.columns
        assert ds.target_col in ds.df.columns

    def test_missing_target_column(self, boston_raw_df: pd.DataFrame, tmp_path: Path) -> None:
        csv_path = tmp_path / "no_target.csv"
        boston_raw_df.drop(columns=["medv"]).to_csv(csv_path, index=False)

        with pytest.raises(InvalidColumnError):
            BostonHousingDataset.from_csv(csv_path=csv_path)

    def test_custom_metadata_table(self, boston_raw_df: pd.DataFrame, tmp_path: Path) -> None:
        csv_path = tmp_path / "subset.csv"
        boston_raw_df[["rm", "chas", "medv"]].to_csv(csv_path, index=False)
        metadata_path = tmp_path / "meta.csv"
        pd.DataFrame(
            {
                "short_name": ["rm", "chas", "medv"],
                "long_name": ["number_of_rooms_per_dwelling", "bounds_charles_river", "median_house_value"],
                "description": ["", "", ""],
            },
        ).to_csv(metadata_path, index=False)

        ds = BostonHousingDataset.from_csv(csv_path=csv_path, metadata_path=metadata_path)

        assert ds.feature_columns() == ["number_of_rooms_per_dwelling", "bounds_charles_river"]

    def test_metadata_without_long_name(self, boston_csv: Path, tmp_path: Path) -> None:
        metadata_path = tmp_path / "meta.csv"
        pd.DataFrame({"short_name": ["rm"], "label": ["rooms"]}).to_csv(metadata_path, index=False)

        with pytest.raises(ValueError, match="missing columns"):
            BostonHousingDataset.from_csv(csv_path=boston_csv, metadata_path=metadata_path)

    def test_rename_falls_back_to_declared_short_names(self, boston_raw_df: pd.DataFrame, tmp_path: Path) -> None:
        csv_path = tmp_path / "subset.csv"
        boston_raw_df[["crim", "rm", "chas", "medv"]].to_csv(csv_path, index=False)
        metadata_path = tmp_path / "meta.csv"
        pd.DataFrame({"short_name": ["rm"], "long_name": ["rooms"]}).to_csv(metadata_path, index=False)

        ds = BostonHousingDataset.from_csv(csv_path=csv_path, metadata_path=metadata_path)

        assert list(ds.df.columns) == ["per_capita_crime_rate", "rooms", "bounds_charles_river", "median_house_value"]
        assert ds.kind_of("rooms") is ColumnKind.NUMERIC
        assert ds.kind_of(BostonCol.CHARLES_RIVER) is ColumnKind.CATEGORICAL
