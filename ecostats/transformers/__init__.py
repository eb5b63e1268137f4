"""Transformers for preprocessing."""

from .data_cleaning import DropIncompleteRows, FixNulls, SelectColumns
from .survey import aggregate_counts, top_n

__all__ = [
    "FixNulls",
    "SelectColumns",
    "DropIncompleteRows",
    "aggregate_counts",
    "top_n",
]
