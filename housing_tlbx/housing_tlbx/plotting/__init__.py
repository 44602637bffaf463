"""Target plots of dataset features against the dependent variable."""

from housing_tlbx.utils.labels import format_label

from .plot_spec import BoxplotLayer, LayerKind, PlotSpec, PointLayer, TrendLayer
from .renderers import render_matplotlib, render_plotly
from .target_plots import PlotCollection, build_all_plots, build_plot


__all__ = [
    "BoxplotLayer",
    "LayerKind",
    "PlotCollection",
    "PlotSpec",
    "PointLayer",
    "TrendLayer",
    "build_all_plots",
    "build_plot",
    "format_label",
    "render_matplotlib",
    "render_plotly",
]
