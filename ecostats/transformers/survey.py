"""Group and rank survey records."""

from __future__ import annotations

import pandas as pd

from ..exceptions import MissingColumnError

__all__ = ["aggregate_counts", "top_n", "AGGREGATIONS"]

AGGREGATIONS = ("sum", "mean", "count", "max", "min")


def _require_cols(df: pd.DataFrame, cols) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise MissingColumnError(missing, df.columns)


def aggregate_counts(df: pd.DataFrame, group_col: str, value_col: str, agg: str = "sum") -> pd.DataFrame:
    """Aggregate ``value_col`` per ``group_col``; one row per group, sorted by group."""
    if agg not in AGGREGATIONS:
        raise ValueError(f"Unsupported aggregation '{agg}', expected one of {AGGREGATIONS}")
    _require_cols(df, [group_col, value_col])

    summary = df.groupby(group_col, as_index=False, dropna=True)[value_col].agg(agg)
    return summary.sort_values(group_col).reset_index(drop=True)


def top_n(df: pd.DataFrame, value_col: str, n: int = 10, ascending: bool = False) -> pd.DataFrame:
    """The ``n`` rows with the largest ``value_col`` (smallest when ``ascending``)."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    _require_cols(df, [value_col])
    # stable sort keeps input order among ties
    ranked = df.sort_values(value_col, ascending=ascending, kind="mergesort")
    return ranked.head(n).reset_index(drop=True)
