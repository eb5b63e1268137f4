"""Helpers for small ecological survey and regression reports."""

from . import diagnostics, transformers, visualizers
from .diagnostics import (
    CandidateModel,
    assign_folds,
    calc_rmse,
    compare_models,
    evaluate_fold,
    load_candidates,
    run_cross_validation,
)
from .exceptions import DegenerateFoldError, EcostatsError, MissingColumnError, RankDeficientError
from .transformers import DropIncompleteRows, FixNulls, SelectColumns, aggregate_counts, top_n
from .visualizers import (
    plot_cv_rmse,
    plot_group_totals,
    plot_top_n,
    render_results_table,
    visualize_linear_regression,
)

__all__ = [
    "diagnostics",
    "transformers",
    "visualizers",
    "CandidateModel",
    "assign_folds",
    "calc_rmse",
    "evaluate_fold",
    "run_cross_validation",
    "compare_models",
    "load_candidates",
    "FixNulls",
    "SelectColumns",
    "DropIncompleteRows",
    "aggregate_counts",
    "top_n",
    "plot_group_totals",
    "plot_top_n",
    "plot_cv_rmse",
    "visualize_linear_regression",
    "render_results_table",
    "EcostatsError",
    "MissingColumnError",
    "RankDeficientError",
    "DegenerateFoldError",
]
