"""Target plots for the Boston housing data and other tabular datasets."""

from .data import BostonHousingDataset, TabularDataset
from .errors import InvalidColumnError, UnsupportedColumnKindError
from .plotting import PlotCollection, PlotSpec, build_all_plots, build_plot, format_label


__all__ = [
    "BostonHousingDataset",
    "InvalidColumnError",
    "PlotCollection",
    "PlotSpec",
    "TabularDataset",
    "UnsupportedColumnKindError",
    "build_all_plots",
    "build_plot",
    "format_label",
]
