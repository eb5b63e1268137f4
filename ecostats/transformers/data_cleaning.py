"""Transformers for cleaning tabular data."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

from ..exceptions import MissingColumnError

__all__ = [
    "FixNulls",
    "SelectColumns",
    "DropIncompleteRows",
]

logger = logging.getLogger(__name__)

DEFAULT_NULL_VALUES: Sequence[str] = ("nan", "NaN", "NAN", "NULL", "", " ", "NA", "N/A", "-")


def _ensure_dataframe(obj):
    if not isinstance(obj, pd.DataFrame):
        raise ValueError("Input must be a pandas DataFrame")
    return obj


class FixNulls(BaseEstimator, TransformerMixin):
    """Replace custom null-like tokens with ``np.nan``."""

    def __init__(self, values: Optional[Iterable[str]] = None):
        self.values = tuple(values) if values is not None else DEFAULT_NULL_VALUES

    def fit(self, X, y=None):
        return self

    def transform(self, X):
        if not isinstance(X, (pd.DataFrame, pd.Series)):
            raise ValueError("Input must be a pandas DataFrame or Series")
        return X.replace(list(self.values), np.nan)


class SelectColumns(BaseEstimator, TransformerMixin):
    """Keep ``columns`` in the given order, renaming them when a mapping is passed.

    ``columns`` is either a list of names or a ``{source: target}`` mapping.
    """

    def __init__(self, columns: Union[Sequence[str], Mapping[str, str]]):
        self.columns = columns

    def _mapping(self):
        if isinstance(self.columns, Mapping):
            return dict(self.columns)
        return {c: c for c in self.columns}

    def fit(self, X, y=None):
        df = _ensure_dataframe(X)
        missing = [c for c in self._mapping() if c not in df.columns]
        if missing:
            raise MissingColumnError(missing, df.columns)
        return self

    def transform(self, X):
        df = _ensure_dataframe(X)
        mapping = self._mapping()
        missing = [c for c in mapping if c not in df.columns]
        if missing:
            raise MissingColumnError(missing, df.columns)
        return df[list(mapping)].rename(columns=mapping)


class DropIncompleteRows(BaseEstimator, TransformerMixin):
    """Drop rows with a missing value in ``columns`` (all columns when ``None``)."""

    def __init__(self, columns: Optional[Sequence[str]] = None):
        self.columns = columns
        self.n_dropped_: Optional[int] = None

    def fit(self, X, y=None):
        _ensure_dataframe(X)
        return self

    def transform(self, X):
        df = _ensure_dataframe(X)
        subset = list(self.columns) if self.columns is not None else None
        if subset is not None:
            missing = [c for c in subset if c not in df.columns]
            if missing:
                raise MissingColumnError(missing, df.columns)
        out = df.dropna(subset=subset)
        self.n_dropped_ = len(df) - len(out)
        if self.n_dropped_:
            logger.info("Dropped %d of %d rows with missing values", self.n_dropped_, len(df))
        return out.copy()
