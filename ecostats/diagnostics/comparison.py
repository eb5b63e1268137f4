"""Side-by-side comparison of candidate formulas by AIC and CV RMSE."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from ..exceptions import MissingColumnError, RankDeficientError
from .cross_validation import CVSummary, run_cross_validation, validate_dataset
from .linear_model import CandidateModel, aic, fit_ols

__all__ = ["compare_models"]

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["model", "formula", "n_params", "aic", "delta_aic", "r2", "cv_rmse"]


def compare_models(
    df: pd.DataFrame,
    candidates: Iterable[CandidateModel],
    k: int = 10,
    seed: int = 42,
    verbose: bool = False,
    cv: Optional[CVSummary] = None,
) -> pd.DataFrame:
    """
    Fit each candidate on the full frame for AIC and R^2, and cross-validate
    them on shared folds for mean held-out RMSE. Rows are sorted by AIC.

    Pass ``cv`` to reuse an existing cross-validation run instead of running
    one with ``k`` and ``seed``. A candidate that cannot be fitted on the full
    frame gets NaN ``aic``, ``r2`` and ``delta_aic``; the others are unaffected.
    """
    candidates = list(candidates)
    validate_dataset(df, candidates)

    if cv is None:
        cv = run_cross_validation(df, k, seed, candidates)
    else:
        missing = [c.name for c in candidates if c.name not in cv.mean_rmse]
        if missing:
            raise ValueError(f"Cross-validation summary has no results for: {missing}")

    rows = []
    for candidate in candidates:
        try:
            fitted = fit_ols(df, candidate)
            candidate_aic, r2 = aic(fitted), fitted.r2
        except (MissingColumnError, RankDeficientError) as exc:
            logger.warning("Candidate '%s' not fitted on the full data: %s", candidate.name, exc)
            candidate_aic, r2 = float("nan"), float("nan")
        rows.append(
            {
                "model": candidate.name,
                "formula": candidate.formula,
                "n_params": candidate.n_params,
                "aic": candidate_aic,
                "r2": r2,
                "cv_rmse": cv.mean_rmse[candidate.name],
            }
        )

    table = pd.DataFrame(rows)
    finite = table["aic"][np.isfinite(table["aic"])]
    best_aic = finite.min() if len(finite) else float("nan")
    table["delta_aic"] = table["aic"] - best_aic
    table = table.sort_values("aic", na_position="last").reset_index(drop=True)[TABLE_COLUMNS]

    if verbose:
        print("Model comparison:")
        for row in table.itertuples(index=False):
            print(f"  {row.model:12s}: AIC {row.aic:.2f} (Δ {row.delta_aic:.2f}), CV RMSE {row.cv_rmse:.3f}")

    return table
