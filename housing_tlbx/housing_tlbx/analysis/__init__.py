"""Statistics computed for the plot overlays."""

from .overlay_stats import LinearTrend, category_levels, fit_linear_trend, summarize_groups


__all__ = [
    "LinearTrend",
    "category_levels",
    "fit_linear_trend",
    "summarize_groups",
]
