"""Compare two linear models of ocean oxygen saturation with AIC and k-fold CV.

Expected inputs:
  - a CSV of bottle samples with numeric columns (oxygen saturation,
    temperature, salinity, depth, nutrients, ...)
  - a JSON file of candidate formulas, see config/oxygen_candidates.json

This script generates:
- oxygen_model_comparison.csv
- oxygen_cv_rmse.png
- oxygen_<best model>_diagnostics.png

Usage:
  python scripts/oxygen_models.py \
    --data ../data/raw/oxygen_samples.csv \
    --candidates config/oxygen_candidates.json \
    --k 10 --seed 42
"""

# %%
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from ecostats.diagnostics import compare_models, fit_ols, load_candidates, run_cross_validation
from ecostats.exceptions import MissingColumnError
from ecostats.transformers import DropIncompleteRows
from ecostats.visualizers import plot_cv_rmse, render_results_table, visualize_linear_regression

# %%
# params
SEED = 42
N_FOLDS = 10

DATA_PATH = "../data/raw/oxygen_samples.csv"
CANDIDATES_PATH = "../config/oxygen_candidates.json"
OUT_DIR = "../reports"
OUT_PREFIX = "oxygen"

PLOT_CV_RMSE = True
PLOT_DIAGNOSTICS = True
SHOW_PLOTS = False

# %%
def load_samples(path, candidates):
    """
    Load the samples and keep complete rows for the model columns present in the file.
    A candidate missing some predictors is kept and reported per candidate later.
    """

    df = pd.read_csv(path)
    responses = list(dict.fromkeys(c.response for c in candidates))
    missing = [c for c in responses if c not in df.columns]
    if missing:
        raise MissingColumnError(missing, df.columns)
    if not any(all(col in df.columns for col in c.columns) for c in candidates):
        absent = list(dict.fromkeys(col for c in candidates for col in c.columns if col not in df.columns))
        raise MissingColumnError(absent, df.columns)

    used = [col for col in dict.fromkeys(col for c in candidates for col in c.columns) if col in df.columns]
    return DropIncompleteRows(columns=used).fit_transform(df[used])

# %%
def save_figure(fig, out_dir, filename):
    path = Path(out_dir) / filename
    fig.savefig(path, dpi=200)
    plt.close(fig)
    print(f"Saved: {path}")

# %%
def main() -> None:
    parser = argparse.ArgumentParser(description="Oxygen saturation model comparison")
    parser.add_argument("--data", type=Path, default=Path(DATA_PATH), help="Samples CSV")
    parser.add_argument("--candidates", type=Path, default=Path(CANDIDATES_PATH), help="Candidate formulas JSON")
    parser.add_argument("--out_dir", type=Path, default=Path(OUT_DIR), help="Directory for tables and figures")
    parser.add_argument("--k", type=int, default=N_FOLDS, help="Number of folds")
    parser.add_argument("--seed", type=int, default=SEED, help="Seed of the fold assignment")
    parser.add_argument("--show", action="store_true", default=SHOW_PLOTS, help="Display figures")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    candidates = load_candidates(args.candidates)
    df = load_samples(args.data, candidates)
    print(f"Loaded {len(df)} samples from: {args.data}")

    args.out_dir.mkdir(parents=True, exist_ok=True)
    cv = run_cross_validation(df, args.k, args.seed, candidates, verbose=True)
    table = compare_models(df, candidates, verbose=True, cv=cv)
    print(render_results_table(table, path=args.out_dir / f"{OUT_PREFIX}_model_comparison.csv"))
    print(f"Saved: {args.out_dir / f'{OUT_PREFIX}_model_comparison.csv'}")

    if PLOT_CV_RMSE:
        ax = plot_cv_rmse(cv, show=args.show)
        save_figure(ax.figure, args.out_dir, f"{OUT_PREFIX}_cv_rmse.png")

    if PLOT_DIAGNOSTICS and pd.notna(table.loc[0, "aic"]):
        best = next(c for c in candidates if c.name == table.loc[0, "model"])
        fitted = fit_ols(df, best)
        fig = visualize_linear_regression(
            df[best.response], fitted.predict(df), title=f"{best.name} (in-sample)", show=args.show
        )
        save_figure(fig, args.out_dir, f"{OUT_PREFIX}_{best.name}_diagnostics.png")


if __name__ == "__main__":
    main()
