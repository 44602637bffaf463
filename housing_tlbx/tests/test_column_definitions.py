"""Tests for column definition modules."""

import numpy as np
import pandas as pd
import pytest

from housing_tlbx.data import BostonHousingDataset
from housing_tlbx.data.base_columns import ColumnKind, ColumnMetadata, infer_column_kind
from housing_tlbx.data.boston_columns import BostonColumn
from housing_tlbx.errors import UnsupportedColumnKindError
from housing_tlbx.utils.paths import get_dataset_path


class TestColumnMetadata:
    """Test ColumnMetadata dataclass."""

    def test_column_metadata_creation(self) -> None:
        metadata = ColumnMetadata(
            original_name="rm",
            cleaned_name="number_of_rooms_per_dwelling",
            dtype="float64",
            kind=ColumnKind.NUMERIC,
        )
        assert metadata.original_name == "rm"
        assert metadata.cleaned_name == "number_of_rooms_per_dwelling"
        assert metadata.kind is ColumnKind.NUMERIC
        assert metadata.description == ""

    def test_column_metadata_is_frozen(self) -> None:
        metadata = ColumnMetadata(original_name="a", cleaned_name="a", dtype="str", kind=ColumnKind.CATEGORICAL)
        with pytest.raises(AttributeError):
            metadata.original_name = "Changed"  # type: ignore[misc]


class TestBostonColumn:
    """Test BostonColumn enum."""

    def test_target_column_exists(self) -> None:
        assert BostonColumn.TARGET.value == "median_house_value"
        assert BostonColumn.MEDIAN_HOUSE_VALUE is BostonColumn.TARGET

    def test_enum_values_are_snake_case(self) -> None:
        for col in BostonColumn:
            assert col.value.islower()
            assert " " not in col.value

    def test_every_member_has_metadata(self) -> None:
        for col in BostonColumn:
            assert col.metadata().cleaned_name == col.value

    def test_original_name_property(self) -> None:
        assert BostonColumn.ROOMS.original_name == "rm"
        assert BostonColumn.TARGET.original_name == "medv"

    def test_pretty_name_property(self) -> None:
        assert BostonColumn.ROOMS.pretty_name == "Number Of Rooms Per Dwelling"
        assert BostonColumn.TARGET.pretty_name == "Median House Value"

    def test_charles_river_is_categorical(self) -> None:
        assert BostonColumn.CHARLES_RIVER.kind is ColumnKind.CATEGORICAL
        assert BostonColumn.categorical_columns() == ["bounds_charles_river"]

    def test_rename_map_matches_shipped_metadata_table(self) -> None:
        metadata = BostonHousingDataset.read_metadata(get_dataset_path("boston_metadata"))
        assert dict(zip(metadata["short_name"], metadata["long_name"], strict=True)) == BostonColumn.rename_map()


class TestInferColumnKind:
    """Test dtype-based column classification."""

    @pytest.mark.parametrize(
        "series",
        [
            pd.Series([1.0, 2.5], name="f"),
            pd.Series([1, 2], name="i"),
            pd.Series(pd.array([1, None], dtype="Int64"), name="nullable"),
        ],
    )
    def test_numeric(self, series: pd.Series) -> None:
        assert infer_column_kind(series) is ColumnKind.NUMERIC

    @pytest.mark.parametrize(
        "series",
        [
            pd.Series([True, False], name="flag"),
            pd.Series(pd.Categorical([0, 1]), name="cat"),
            pd.Series(["a", "b"], name="obj"),
            pd.Series(["a", "b"], dtype="string", name="str"),
        ],
    )
    def test_categorical(self, series: pd.Series) -> None:
        assert infer_column_kind(series) is ColumnKind.CATEGORICAL

    def test_datetime_is_unsupported(self) -> None:
        series = pd.Series(pd.to_datetime(["2020-01-01", "2021-01-01"]), name="when")
        with pytest.raises(UnsupportedColumnKindError) as exc_info:
            infer_column_kind(series)
        assert exc_info.value.column == "when"

    def test_timedelta_is_unsupported(self) -> None:
        series = pd.Series(np.array([1, 2], dtype="timedelta64[s]"), name="delta")
        with pytest.raises(UnsupportedColumnKindError):
            infer_column_kind(series)
