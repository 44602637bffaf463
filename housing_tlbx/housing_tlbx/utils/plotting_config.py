"""Shared plotting configuration: figure style and target-plot options."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns


@dataclass
class PlottingConfig:
    """Reusable plotting style that can be applied across figures."""

    style: str = "whitegrid"
    palette: str | list[str] = "tab10"
    font_family: str = "DejaVu Sans"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 12
    tick_size: int = 10
    caption_size: int = 9
    figure_dpi: int = 100
    context: str = "notebook"
    plotly_template: str = "plotly_white"
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def _set_style(self) -> None:
        palette_colors = sns.color_palette(self.palette)

        sns.set_theme(
            style=self.style,
            palette=palette_colors,
            context=self.context,
            font_scale=self.font_scale,
            **self.seaborn_kwargs,
        )
        mpl.rcParams.update(
            {
                "axes.titlesize": self.title_size,
                "axes.labelsize": self.label_size,
                "xtick.labelsize": self.tick_size,
                "ytick.labelsize": self.tick_size,
                "figure.dpi": self.figure_dpi,
                "axes.prop_cycle": mpl.cycler(color=palette_colors),
                "font.family": [self.font_family],
            },
        )
        pio.templates.default = self.plotly_template

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        Intended for notebooks and reports that set one plotting style at the top.
        For temporary styling use :meth:`apply` instead.
        """
        self._set_style()

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards."""
        prev_plotly_template = pio.templates.default

        with mpl.rc_context():
            self._set_style()
            try:
                yield
            finally:
                pio.templates.default = prev_plotly_template


@dataclass(frozen=True)
class PlotOptions:
    """Behaviour of :func:`housing_tlbx.plotting.build_plot`.

    The flags ``overlay`` and ``pretty_labels`` switch between the stages the
    target plot evolved through: a bare jittered scatter, then the
    type-dependent overlay, then formatted axis labels. The defaults give the
    final stage.
    """

    point_alpha: float = 0.4
    jitter: float = 0.25
    """Jitter half-width as a fraction of the x resolution."""
    box_alpha: float = 0.5
    show_outliers: bool = False
    conf_level: float = 0.95
    overlay: bool = True
    pretty_labels: bool = True
    caption: str | None = None
    """Caption override; ``None`` uses the dataset's source caption."""
    seed: int | None = 42

    def __post_init__(self) -> None:
        for name in ("point_alpha", "box_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}.")
        if not 0.0 < self.conf_level < 1.0:
            raise ValueError(f"conf_level must be within (0, 1), got {self.conf_level}.")
        if self.jitter < 0:
            raise ValueError(f"jitter must be non-negative, got {self.jitter}.")


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()
DEFAULT_PLOT_OPTIONS = PlotOptions()


__all__ = ["DEFAULT_PLOT_CFG", "DEFAULT_PLOT_OPTIONS", "PlotOptions", "PlottingConfig"]
