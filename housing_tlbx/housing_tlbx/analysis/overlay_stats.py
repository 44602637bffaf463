"""Statistics behind the target-plot overlays.

Numeric features get an ordinary least squares (OLS) trend line with a
confidence band for the mean response; categorical features get per-level box
summaries (quartiles and Tukey whiskers) of the dependent variable.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
import statsmodels.api as sm


_MIN_DISTINCT_X = 2
_WHISKER_IQR = 1.5
_SUMMARY_COLUMNS = ("n", "q1", "median", "q3", "whisker_low", "whisker_high", "n_outliers")
_BAND_COLUMNS = ("x", "mean", "mean_ci_lower", "mean_ci_upper")


@dataclass(frozen=True)
class LinearTrend:
    """Simple OLS fit ``y = intercept + slope * x`` with its confidence band."""

    intercept: float
    slope: float
    r2: float
    n_obs: int
    conf_level: float
    band: pd.DataFrame
    """Evaluation grid with columns ``x``, ``mean``, ``mean_ci_lower`` and ``mean_ci_upper``."""

    def predict(self, x: float | np.ndarray) -> float | np.ndarray:
        return self.intercept + self.slope * x


def fit_linear_trend(
    x: pd.Series,
    y: pd.Series,
    *,
    conf_level: float = 0.95,
    n_points: int = 100,
) -> LinearTrend:
    """Fit ``y ~ x`` by OLS and evaluate the mean response on an even grid.

    The band is a confidence interval for the mean response (not a prediction
    interval for new observations). Sparse data degrades the fit instead of
    failing it:

    - fewer than two distinct ``x`` values: no line can be fitted, so the
      coefficients are NaN and ``band`` is empty;
    - no residual degrees of freedom (two observations): the line is fitted but
      the confidence columns of ``band`` are NaN.

    Args:
        x: Predictor values.
        y: Response values, aligned with ``x``.
        conf_level: Coverage of the confidence band.
        n_points: Number of grid points spanning ``[min(x), max(x)]``.
    """
    frame = pd.DataFrame({"x": x, "y": y}).astype(float).dropna()
    if frame["x"].nunique() < _MIN_DISTINCT_X:
        return LinearTrend(
            intercept=np.nan,
            slope=np.nan,
            r2=np.nan,
            n_obs=len(frame),
            conf_level=conf_level,
            band=pd.DataFrame(columns=list(_BAND_COLUMNS), dtype=float),
        )

    model = sm.OLS(frame["y"], sm.add_constant(frame["x"], has_constant="add")).fit()

    grid = np.linspace(frame["x"].min(), frame["x"].max(), n_points)
    exog_pred = np.column_stack([np.ones_like(grid), grid])
    if model.df_resid > 0:
        summary = model.get_prediction(exog_pred).summary_frame(alpha=1 - conf_level)
        mean, lower, upper = (summary[col].to_numpy() for col in _BAND_COLUMNS[1:])
    else:
        mean = exog_pred @ model.params.to_numpy()
        lower = upper = np.full(n_points, np.nan)

    band = pd.DataFrame(dict(zip(_BAND_COLUMNS, (grid, mean, lower, upper), strict=True)))
    intercept, slope = model.params.to_numpy()
    return LinearTrend(
        intercept=float(intercept),
        slope=float(slope),
        r2=float(model.rsquared),
        n_obs=int(model.nobs),
        conf_level=conf_level,
        band=band,
    )


def category_levels(x: pd.Series) -> list:
    """Observed levels of ``x``: category order for categorical dtype, sorted otherwise."""
    if isinstance(x.dtype, pd.CategoricalDtype):
        observed = set(x.dropna().unique())
        return [level for level in x.cat.categories if level in observed]
    return sorted(x.dropna().unique(), key=lambda v: (str(type(v)), v))


def _box_stats(values: pd.Series) -> dict[str, float]:
    q1, median, q3 = values.quantile([0.25, 0.5, 0.75])
    iqr = q3 - q1
    inside = values[(values >= q1 - _WHISKER_IQR * iqr) & (values <= q3 + _WHISKER_IQR * iqr)]
    return {
        "n": len(values),
        "q1": q1,
        "median": median,
        "q3": q3,
        "whisker_low": inside.min(),
        "whisker_high": inside.max(),
        "n_outliers": len(values) - len(inside),
    }


def summarize_groups(x: pd.Series, y: pd.Series) -> pd.DataFrame:
    """Box-plot statistics of ``y`` per level of ``x``.

    Whiskers reach the most extreme observations within 1.5 IQR of the
    quartiles; everything beyond is counted in ``n_outliers``.

    Returns:
        DataFrame indexed by level (in :func:`category_levels` order) with
        columns ``n``, ``q1``, ``median``, ``q3``, ``whisker_low``,
        ``whisker_high`` and ``n_outliers``.
    """
    frame = pd.DataFrame({"x": x, "y": y}).dropna()
    levels = category_levels(frame["x"])
    rows = {level: _box_stats(frame.loc[frame["x"] == level, "y"].astype(float)) for level in levels}
    summary = pd.DataFrame.from_dict(rows, orient="index", columns=list(_SUMMARY_COLUMNS))
    summary.index.name = x.name
    return summary.astype({"n": int, "n_outliers": int})


__all__ = ["LinearTrend", "category_levels", "fit_linear_trend", "summarize_groups"]
