"""Target plots: every feature against the dependent variable.

The overlay follows the semantic kind of the feature. A trend line means
nothing on an unordered categorical axis, so categorical features get box
summaries of the dependent variable per level and numeric features get an
OLS trend with confidence band.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import numpy as np
import pandas as pd

from housing_tlbx.analysis.overlay_stats import category_levels, fit_linear_trend, summarize_groups
from housing_tlbx.data.base_columns import ColumnKind
from housing_tlbx.data.base_dataset import BaseDataset
from housing_tlbx.errors import InvalidColumnError, UnsupportedColumnKindError
from housing_tlbx.utils.plotting_config import DEFAULT_PLOT_OPTIONS, PlotOptions

from .plot_spec import BoxplotLayer, Layer, PlotSpec, PointLayer, TrendLayer


logger = logging.getLogger(__name__)


def _resolution(x: pd.Series) -> float:
    """Smallest gap between distinct values of ``x`` (1.0 with fewer than two values)."""
    values = np.unique(x.dropna().to_numpy(dtype=float))
    if values.size < 2:
        return 1.0
    return float(np.diff(values).min())


def build_plot(
    dataset: BaseDataset,
    x_variable: str,
    *,
    options: PlotOptions = DEFAULT_PLOT_OPTIONS,
) -> PlotSpec:
    """Build the target plot of ``x_variable`` against the dataset's dependent variable.

    The plot always contains a jittered, semi-transparent point layer. With
    ``options.overlay`` enabled it adds exactly one overlay:

    - categorical ``x_variable``: box summaries per level, outliers hidden
      (they are already visible as points), drawn semi-transparent;
    - numeric ``x_variable``: OLS trend line with a ``options.conf_level``
      confidence band.

    Axis labels are the column names passed through :func:`format_label`
    (unless ``options.pretty_labels`` is off) and the caption names the data
    source. The dataset is not modified.

    Example:
        >>> spec = build_plot(ds, "number_of_rooms_per_dwelling")
        >>> spec.x_label, spec.layer_kinds
        ('Number Of Rooms Per Dwelling', (<LayerKind.POINTS: 'points'>, <LayerKind.TREND: 'trend'>))
        >>> fig = spec.render()

    Args:
        dataset: Dataset holding ``x_variable`` and the dependent variable.
        x_variable: Independent variable; any column except the dependent variable.
        options: Plot behaviour (transparency, jitter, overlay and label stages, caption).

    Raises:
        InvalidColumnError: If ``x_variable`` is missing or is the dependent variable.
        UnsupportedColumnKindError: If the column kind is neither numeric nor categorical.
    """
    target = dataset.target_col
    if x_variable == target:
        msg = f"'{x_variable}' is the dependent variable and cannot be plotted against itself."
        raise InvalidColumnError(x_variable, msg)
    kind = dataset.kind_of(x_variable)

    view = dataset.view([x_variable, target])
    x, y = view.df[x_variable], view.df[target]

    if kind is ColumnKind.CATEGORICAL:
        levels = tuple(category_levels(x))
        jitter_width = options.jitter
    elif kind is ColumnKind.NUMERIC:
        levels = ()
        jitter_width = options.jitter * _resolution(x)
    else:
        raise UnsupportedColumnKindError(x_variable, kind)

    layers: list[Layer] = [PointLayer(alpha=options.point_alpha, jitter_width=jitter_width, seed=options.seed)]
    if options.overlay:
        if kind is ColumnKind.CATEGORICAL:
            layers.append(
                BoxplotLayer(
                    summary=summarize_groups(x, y),
                    alpha=options.box_alpha,
                    show_outliers=options.show_outliers,
                ),
            )
        else:
            layers.append(TrendLayer(fit=fit_linear_trend(x, y, conf_level=options.conf_level)))

    labels = view.pretty_by_col if options.pretty_labels else {x_variable: x_variable, target: target}
    spec = PlotSpec(
        data=view.df,
        x=x_variable,
        y=target,
        x_kind=kind,
        layers=tuple(layers),
        x_label=labels[x_variable],
        y_label=labels[target],
        caption=options.caption if options.caption is not None else dataset.source_caption,
        levels=levels,
    )
    logger.debug("Built %s plot for '%s' (%d rows)", "/".join(spec.layer_kinds), x_variable, len(view.df))
    return spec


class PlotCollection(Mapping[str, PlotSpec]):
    """Immutable, ordered mapping from feature name to its target plot.

    Example:
        >>> plots = build_all_plots(ds)
        >>> plots["number_of_rooms_per_dwelling"]  # point lookup
        >>> figs = [spec.render() for spec in plots.plots()]  # full enumeration
    """

    def __init__(self, specs: Iterable[tuple[str, PlotSpec]]) -> None:
        self._specs: Mapping[str, PlotSpec] = MappingProxyType(dict(specs))

    def __getitem__(self, column: str) -> PlotSpec:
        return self._specs[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._specs)})"

    def plots(self) -> tuple[PlotSpec, ...]:
        """All plots in column order."""
        return tuple(self._specs.values())

    def subset(self, columns: Iterable[str]) -> PlotCollection:
        """Collection restricted to ``columns`` (in the given order).

        Raises:
            InvalidColumnError: If a column has no plot in this collection.
        """
        selected = []
        for col in columns:
            if col not in self._specs:
                raise InvalidColumnError(col, f"No plot for column '{col}' in collection.")
            selected.append((col, self._specs[col]))
        return PlotCollection(selected)


def build_all_plots(
    dataset: BaseDataset,
    *,
    options: PlotOptions = DEFAULT_PLOT_OPTIONS,
    columns: Iterable[str] | None = None,
) -> PlotCollection:
    """Build the target plot of every feature column.

    Columns are visited in the dataset's native order, skipping the dependent
    variable. The first failing column aborts the batch; no partial collection
    is returned.

    Args:
        dataset: Dataset to plot.
        options: Passed to :func:`build_plot` for every column.
        columns: Optional subset of feature columns (validated, kept in the given order).
    """
    selected = dataset.feature_columns() if columns is None else list(columns)
    logger.debug("Building %d target plots against '%s'", len(selected), dataset.target_col)
    return PlotCollection((col, build_plot(dataset, col, options=options)) for col in selected)


__all__ = ["PlotCollection", "build_all_plots", "build_plot"]
