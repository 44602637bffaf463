"""Matplotlib/seaborn and plotly backends for :class:`PlotSpec`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import plotly.graph_objects as go
import seaborn as sns

from housing_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG

from .plot_spec import BoxplotLayer, PlotSpec, TrendLayer


if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from housing_tlbx.utils.plotting_config import PlottingConfig


_POINT_COLOR = "#1f77b4"
_OVERLAY_COLOR = "#d62728"
_BAND_ALPHA = 0.2


def _draw_trend(ax: Axes, layer: TrendLayer) -> None:
    band = layer.fit.band
    ax.plot(band["x"], band["mean"], color=_OVERLAY_COLOR, linewidth=2.0)
    if band[["mean_ci_lower", "mean_ci_upper"]].isna().all(axis=None):
        return
    ax.fill_between(band["x"], band["mean_ci_lower"], band["mean_ci_upper"], color=_OVERLAY_COLOR, alpha=_BAND_ALPHA)


def _draw_boxplot(ax: Axes, layer: BoxplotLayer, levels: tuple) -> None:
    summary = layer.summary
    stats = [
        {
            "label": str(level),
            "med": row["median"],
            "q1": row["q1"],
            "q3": row["q3"],
            "whislo": row["whisker_low"],
            "whishi": row["whisker_high"],
            "fliers": [],
        }
        for level, row in summary.iterrows()
    ]
    ax.bxp(
        stats,
        positions=range(len(stats)),
        widths=0.5,
        showfliers=layer.show_outliers,
        patch_artist=True,
        boxprops={"facecolor": _OVERLAY_COLOR, "alpha": layer.alpha},
        medianprops={"color": "black"},
    )
    ax.set_xticks(range(len(levels)), labels=[str(level) for level in levels])


def render_matplotlib(
    spec: PlotSpec,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7, 5),
    plot_cfg: PlottingConfig | None = None,
) -> Figure:
    """Draw ``spec`` on ``ax`` (or a new figure) and return the figure.

    Points are drawn first so the semi-transparent overlay sits on top of them.
    The caption is placed in the bottom-right corner of the figure.
    """
    cfg = plot_cfg or DEFAULT_PLOT_CFG
    with cfg.apply():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()

        points = spec.jittered_points()
        sns.scatterplot(
            data=points,
            x="x",
            y="y",
            alpha=spec.points.alpha,
            color=_POINT_COLOR,
            edgecolor=None,
            ax=ax,
        )

        if (trend := spec.trend) is not None:
            _draw_trend(ax, trend)
        if (box := spec.boxplot) is not None:
            _draw_boxplot(ax, box, spec.levels)
        elif spec.levels:
            ax.set_xticks(range(len(spec.levels)), labels=[str(level) for level in spec.levels])

        ax.set_xlabel(spec.x_label)
        ax.set_ylabel(spec.y_label)
        fig.text(0.99, 0.01, spec.caption, ha="right", va="bottom", fontsize=cfg.caption_size, style="italic")
        fig.tight_layout(rect=(0, 0.04, 1, 1))

    return fig


def render_plotly(spec: PlotSpec, *, plot_cfg: PlottingConfig | None = None) -> go.Figure:
    """Interactive counterpart of :func:`render_matplotlib`.

    Only the caption size is taken from ``plot_cfg``; the template is the active
    plotly default.
    """
    cfg = plot_cfg or DEFAULT_PLOT_CFG
    points = spec.jittered_points()
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=points["x"],
            y=points["y"],
            mode="markers",
            name=spec.y_label,
            opacity=spec.points.alpha,
            marker={"color": _POINT_COLOR},
        ),
    )

    if (trend := spec.trend) is not None:
        band = trend.fit.band
        fig.add_trace(
            go.Scatter(x=band["x"], y=band["mean_ci_upper"], mode="lines", line={"width": 0}, showlegend=False),
        )
        fig.add_trace(
            go.Scatter(
                x=band["x"],
                y=band["mean_ci_lower"],
                mode="lines",
                line={"width": 0},
                fill="tonexty",
                fillcolor="rgba(214, 39, 40, 0.2)",
                name=f"{trend.fit.conf_level:.0%} CI",
            ),
        )
        fig.add_trace(
            go.Scatter(x=band["x"], y=band["mean"], mode="lines", line={"color": _OVERLAY_COLOR}, name="OLS fit"),
        )

    if (box := spec.boxplot) is not None:
        summary = box.summary
        fig.add_trace(
            go.Box(
                x=list(range(len(summary))),
                q1=summary["q1"],
                median=summary["median"],
                q3=summary["q3"],
                lowerfence=summary["whisker_low"],
                upperfence=summary["whisker_high"],
                boxpoints=False,
                opacity=box.alpha,
                marker={"color": _OVERLAY_COLOR},
                name="Distribution",
            ),
        )

    if spec.levels:
        fig.update_xaxes(tickvals=list(range(len(spec.levels))), ticktext=[str(level) for level in spec.levels])

    fig.update_layout(
        xaxis_title=spec.x_label,
        yaxis_title=spec.y_label,
        annotations=[
            {
                "text": spec.caption,
                "xref": "paper",
                "yref": "paper",
                "x": 1,
                "y": -0.15,
                "xanchor": "right",
                "showarrow": False,
                "font": {"size": cfg.caption_size},
            },
        ],
    )
    return fig
