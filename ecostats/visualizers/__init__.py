"""Visualization helpers."""

from .regression import plot_cv_rmse, visualize_linear_regression
from .survey import plot_group_totals, plot_top_n
from .tables import render_results_table

__all__ = [
    "plot_group_totals",
    "plot_top_n",
    "plot_cv_rmse",
    "visualize_linear_regression",
    "render_results_table",
]
