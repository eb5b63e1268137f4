"""Diagnostics utilities."""

from .candidates import load_candidates
from .comparison import compare_models
from .cross_validation import (
    CVSummary,
    FoldResult,
    assign_folds,
    calc_rmse,
    evaluate_fold,
    run_cross_validation,
    split_fold,
)
from .linear_model import CandidateModel, FittedModel, aic, fit_ols

__all__ = [
    "CandidateModel",
    "FittedModel",
    "FoldResult",
    "CVSummary",
    "aic",
    "fit_ols",
    "calc_rmse",
    "assign_folds",
    "split_fold",
    "evaluate_fold",
    "run_cross_validation",
    "compare_models",
    "load_candidates",
]
