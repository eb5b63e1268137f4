"""Model visualizations for regression tasks."""

from __future__ import annotations

import numpy as np
from matplotlib import pyplot as plt

from ..diagnostics.cross_validation import calc_rmse


def plot_cv_rmse(summary, ax=None, show=False):
    """Per-fold held-out RMSE for each candidate, with the mean as a dashed line."""
    table = summary.to_frame()
    names = list(table.columns)
    folds = table.index.to_numpy()

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 5))

    width = 0.8 / len(names)
    for idx, name in enumerate(names):
        offset = (idx - (len(names) - 1) / 2) * width
        bars = ax.bar(folds + offset, table[name].to_numpy(), width, label=name, alpha=0.8)
        ax.axhline(
            summary.mean_rmse[name],
            linestyle="--",
            color=bars.patches[0].get_facecolor(),
            linewidth=1,
        )

    ax.set_xticks(folds)
    ax.set_xlabel("Fold")
    ax.set_ylabel("Held-out RMSE")
    ax.set_title(f"{summary.k}-fold cross-validation RMSE (seed={summary.seed})")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    ax.figure.tight_layout()
    if show:
        plt.show()
    return ax


def visualize_linear_regression(y_true, y_pred, title="Predicted vs Actual", show=False):
    """Predicted-vs-actual and residual diagnostics side by side."""
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    rmse = calc_rmse(y_pred, y_true)

    bounds = (min(y_true.min(), y_pred.min()), max(y_true.max(), y_pred.max()))
    residuals = y_true - y_pred

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    axes[0].scatter(y_true, y_pred, alpha=0.5)
    axes[0].plot(bounds, bounds, linestyle="--")
    axes[0].set_xlabel("Actual")
    axes[0].set_ylabel("Predicted")
    axes[0].set_title(f"{title}  |  RMSE: {rmse:.3f}")

    axes[1].scatter(y_pred, residuals, alpha=0.5)
    axes[1].axhline(0, linestyle="--")
    axes[1].set_xlabel("Predicted")
    axes[1].set_ylabel("Residual (Actual - Predicted)")
    axes[1].set_title("Residuals vs Predicted")

    fig.tight_layout()
    if show:
        plt.show()
    return fig
