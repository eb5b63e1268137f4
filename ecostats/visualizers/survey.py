"""Bar charts for survey summaries."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import seaborn as sns
from matplotlib import pyplot as plt

from ..exceptions import MissingColumnError


def _require_cols(df: pd.DataFrame, cols) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise MissingColumnError(missing, df.columns)


def _finish(ax, title, xlabel, ylabel, show):
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.figure.tight_layout()
    if show:
        plt.show()
    return ax


def plot_group_totals(
    summary: pd.DataFrame,
    group_col: str,
    value_col: str,
    title: str = "Total count per group",
    ax: Optional[plt.Axes] = None,
    show: bool = False,
):
    """Vertical bar per group, in the row order of ``summary``."""
    _require_cols(summary, [group_col, value_col])
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    order = summary[group_col].astype(str).tolist()
    sns.barplot(
        x=summary[group_col].astype(str),
        y=summary[value_col],
        order=order,
        color="steelblue",
        ax=ax,
    )
    ax.tick_params(axis="x", labelrotation=45)
    return _finish(ax, title, group_col, value_col, show)


def plot_top_n(
    ranked: pd.DataFrame,
    label_col: str,
    value_col: str,
    title: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
    show: bool = False,
):
    """Horizontal bars, largest first, for the rows returned by ``top_n``."""
    _require_cols(ranked, [label_col, value_col])
    if ax is None:
        _, ax = plt.subplots(figsize=(8, max(3, 0.4 * len(ranked) + 1)))

    labels = ranked[label_col].astype(str)
    sns.barplot(
        x=ranked[value_col],
        y=labels,
        order=list(dict.fromkeys(labels)),
        orient="h",
        color="seagreen",
        ax=ax,
    )
    title = title or f"Top {len(ranked)} by {value_col}"
    return _finish(ax, title, value_col, label_col, show)
