"""Ordinary least squares fits for named linear formulas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression

from ..exceptions import MissingColumnError, RankDeficientError

__all__ = [
    "CandidateModel",
    "FittedModel",
    "fit_ols",
    "aic",
]


@dataclass(frozen=True)
class CandidateModel:
    """A linear formula: ``response ~ predictors[0] + predictors[1] + ...``."""

    name: str
    response: str
    predictors: Tuple[str, ...]

    def __post_init__(self):
        # accept lists from callers, store a tuple so the instance stays hashable
        object.__setattr__(self, "predictors", tuple(self.predictors))
        if not self.predictors:
            raise ValueError(f"Candidate '{self.name}' needs at least one predictor")

    @property
    def columns(self) -> Tuple[str, ...]:
        return (self.response,) + self.predictors

    @property
    def formula(self) -> str:
        return f"{self.response} ~ {' + '.join(self.predictors)}"

    @property
    def n_params(self) -> int:
        """Coefficients, intercept and residual variance."""
        return len(self.predictors) + 2


@dataclass(frozen=True)
class FittedModel:
    candidate: CandidateModel
    intercept: float
    coef: np.ndarray
    n_obs: int
    rss: float
    tss: float

    def predict(self, df: pd.DataFrame) -> np.ndarray:
        X = _design(df, self.candidate.predictors)
        return self.intercept + X @ self.coef

    @property
    def r2(self) -> float:
        if self.tss == 0:
            return float("nan")
        return 1.0 - self.rss / self.tss


def _require(df: pd.DataFrame, cols: Sequence[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise MissingColumnError(missing, df.columns)


def _design(df: pd.DataFrame, predictors: Sequence[str]) -> np.ndarray:
    _require(df, predictors)
    return df[list(predictors)].to_numpy(dtype=float)


def fit_ols(df: pd.DataFrame, candidate: CandidateModel) -> FittedModel:
    """Fit ``candidate`` by ordinary least squares on every row of ``df``.

    Raises ``MissingColumnError`` when a column of the formula is absent and
    ``RankDeficientError`` when the design matrix (intercept included) does
    not have full column rank, so coefficients would not be unique.
    """
    _require(df, candidate.columns)
    if len(df) == 0:
        raise ValueError(f"Cannot fit '{candidate.name}' on an empty frame")

    X = _design(df, candidate.predictors)
    y = df[candidate.response].to_numpy(dtype=float)
    if np.isnan(X).any() or np.isnan(y).any():
        raise ValueError(f"Missing values in columns used by '{candidate.name}'")

    design = np.column_stack([np.ones(len(y)), X])
    rank = np.linalg.matrix_rank(design)
    if rank < design.shape[1]:
        raise RankDeficientError(
            f"Design matrix for '{candidate.name}' has rank {rank} < {design.shape[1]} columns "
            f"({len(y)} rows, predictors {list(candidate.predictors)})"
        )

    model = LinearRegression().fit(X, y)
    residuals = y - model.predict(X)

    return FittedModel(
        candidate=candidate,
        intercept=float(model.intercept_),
        coef=np.asarray(model.coef_, dtype=float),
        n_obs=len(y),
        rss=float(np.sum(residuals ** 2)),
        tss=float(np.sum((y - y.mean()) ** 2)),
    )


def aic(fitted: FittedModel) -> float:
    """Akaike information criterion of a Gaussian linear model.

    Uses the full log-likelihood, so values match ``AIC()`` on an ``lm`` fit in R:
    ``n*log(2*pi) + n*log(RSS/n) + n + 2*(p + 2)``.
    """
    n = fitted.n_obs
    with np.errstate(divide="ignore"):
        log_sigma2 = np.log(fitted.rss / n)
    return float(n * np.log(2 * np.pi) + n * log_sigma2 + n + 2 * fitted.candidate.n_params)
