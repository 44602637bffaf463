"""Render the target plot of every Boston housing feature to files.

Loads the housing CSV and its metadata table, builds one target plot per
feature column (boxplot overlay for categorical features, OLS trend for
numeric ones) and writes each plot to ``<out-dir>/<column>.<format>``.
The ``html`` format writes interactive plotly figures.

Usage:
    python housing_tlbx/scripts/render_plots.py --csv _data/boston.csv --out-dir plots
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib


matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from housing_tlbx.data import BostonHousingDataset  # noqa: E402
from housing_tlbx.plotting import PlotCollection, build_all_plots  # noqa: E402
from housing_tlbx.utils.plotting_config import PlotOptions  # noqa: E402


logger = logging.getLogger(__name__)


def write_plots(plots: PlotCollection, out_dir: Path, fmt: str) -> int:
    """Write every plot of ``plots`` to ``out_dir`` and return the number written."""
    out_dir.mkdir(parents=True, exist_ok=True)
    count = 0
    for column, spec in plots.items():
        out_path = out_dir / f"{column}.{fmt}"
        if fmt == "html":
            spec.render_plotly().write_html(out_path)
        else:
            fig = spec.render()
            fig.savefig(out_path, bbox_inches="tight")
            plt.close(fig)
        logger.debug("Wrote %s", out_path)
        count += 1
    return count


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render target plots for the Boston housing dataset.")
    p.add_argument("--csv", type=Path, default=None, help="Housing CSV (default: _data/boston.csv)")
    p.add_argument("--metadata", type=Path, default=None, help="Metadata table (default: _data/boston_metadata.csv)")
    p.add_argument("--out-dir", type=Path, default=Path("plots"), help="Output directory")
    p.add_argument("--columns", nargs="+", default=None, help="Only plot these feature columns")
    p.add_argument("--format", choices=["png", "svg", "pdf", "html"], default="png", dest="fmt")
    p.add_argument("--no-overlay", action="store_true", help="Draw the jittered points only")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    dataset = BostonHousingDataset.from_csv(csv_path=args.csv, metadata_path=args.metadata)
    plots = build_all_plots(dataset, options=PlotOptions(overlay=not args.no_overlay), columns=args.columns)
    count = write_plots(plots, args.out_dir, args.fmt)
    logger.info("Done. Plots written to %s: %d", args.out_dir, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
