"""Data module for dataset classes."""

from .base_columns import BaseColumn, ColumnKind, ColumnMetadata, infer_column_kind
from .base_dataset import BaseDataset, TabularDataset
from .boston_columns import BostonColumn as BostonCol
from .boston_dataset import BostonHousingDataset
from .views import DatasetView


__all__ = [
    "BaseColumn",
    "BaseDataset",
    "BostonCol",
    "BostonHousingDataset",
    "ColumnKind",
    "ColumnMetadata",
    "DatasetView",
    "TabularDataset",
    "infer_column_kind",
]
