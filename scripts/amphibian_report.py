"""Summarise an amphibian population survey and plot two bar charts.

Expected input (CSV): one row per survey observation with at least a site,
a species and a count column. Column names are configurable below.

This script generates:
- <prefix>_totals_by_species.png
- <prefix>_top_sites.png
- <prefix>_totals_by_species.csv

Usage:
  python scripts/amphibian_report.py \
    --data ../data/raw/amphibian_survey.csv \
    --out_dir ../figures
"""

# %%
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from ecostats.transformers import DropIncompleteRows, FixNulls, SelectColumns, aggregate_counts, top_n
from ecostats.visualizers import plot_group_totals, plot_top_n

# %%
# params
DATA_PATH = "../data/raw/amphibian_survey.csv"
OUT_DIR = "../figures"
OUT_PREFIX = "amphibians"

# source column -> name used in the report
COLUMNS = {
    "Site": "site",
    "Species": "species",
    "Count": "count",
}
GROUP_COL = "species"
SITE_COL = "site"
VALUE_COL = "count"
AGGREGATION = "sum"
TOP_N = 10

SHOW_PLOTS = False

# %%
def load_survey(path, columns):
    """
    Load the survey, select and rename the report columns, drop incomplete rows
    """

    df = pd.read_csv(path)
    df = FixNulls().transform(df)
    df = SelectColumns(columns).fit_transform(df)
    df = DropIncompleteRows().fit_transform(df)
    df[VALUE_COL] = pd.to_numeric(df[VALUE_COL], errors="raise")
    return df

# %%
def summarise(df, group_col, site_col, value_col, agg, n):
    """
    Totals per group, and the top sites by total
    """

    totals = aggregate_counts(df, group_col, value_col, agg=agg)
    site_totals = aggregate_counts(df, site_col, value_col, agg=agg)
    top_sites = top_n(site_totals, value_col, n=n)
    return totals, top_sites

# %%
def save_figures(totals, top_sites, out_dir, prefix, show):
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    ax = plot_group_totals(totals, GROUP_COL, VALUE_COL, title=f"Total {VALUE_COL} by {GROUP_COL}", show=show)
    path = out_dir / f"{prefix}_totals_by_{GROUP_COL}.png"
    ax.figure.savefig(path, dpi=200)
    plt.close(ax.figure)
    print(f"Saved: {path}")

    ax = plot_top_n(top_sites, SITE_COL, VALUE_COL, title=f"Top {len(top_sites)} {SITE_COL}s by {VALUE_COL}", show=show)
    path = out_dir / f"{prefix}_top_{SITE_COL}s.png"
    ax.figure.savefig(path, dpi=200)
    plt.close(ax.figure)
    print(f"Saved: {path}")

    path = out_dir / f"{prefix}_totals_by_{GROUP_COL}.csv"
    totals.to_csv(path, index=False)
    print(f"Saved: {path}")

# %%
def main() -> None:
    parser = argparse.ArgumentParser(description="Amphibian survey summary charts")
    parser.add_argument("--data", type=Path, default=Path(DATA_PATH), help="Survey CSV")
    parser.add_argument("--out_dir", type=Path, default=Path(OUT_DIR), help="Directory to save figures")
    parser.add_argument("--prefix", type=str, default=OUT_PREFIX, help="Output file prefix")
    parser.add_argument("--top_n", type=int, default=TOP_N, help="Number of sites in the ranking")
    parser.add_argument("--agg", choices=["sum", "mean", "count", "max", "min"], default=AGGREGATION)
    parser.add_argument("--show", action="store_true", default=SHOW_PLOTS, help="Display figures")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    df = load_survey(args.data, COLUMNS)
    print(f"Loaded {len(df)} observations from: {args.data}")
    totals, top_sites = summarise(df, GROUP_COL, SITE_COL, VALUE_COL, args.agg, args.top_n)
    print(totals.to_string(index=False))
    save_figures(totals, top_sites, args.out_dir, args.prefix, args.show)


if __name__ == "__main__":
    main()
