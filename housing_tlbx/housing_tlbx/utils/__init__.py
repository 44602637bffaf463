from .labels import format_label
from .paths import get_data_dir, get_dataset_path
from .plotting_config import DEFAULT_PLOT_CFG, DEFAULT_PLOT_OPTIONS, PlotOptions, PlottingConfig


__all__ = [
    "DEFAULT_PLOT_CFG",
    "DEFAULT_PLOT_OPTIONS",
    "PlotOptions",
    "PlottingConfig",
    "format_label",
    "get_data_dir",
    "get_dataset_path",
]
