"""K-fold cross-validation of competing linear formulas.

Folds come from an explicitly seeded permutation of the repeating sequence
``1, 2, ..., k, 1, 2, ...`` so the partition depends only on ``(n, k, seed)``.
Each fold yields an immutable ``FoldResult`` and the reported statistic is the
mean held-out RMSE per candidate over the folds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from sklearn.metrics import root_mean_squared_error

from ..exceptions import DegenerateFoldError, MissingColumnError, RankDeficientError
from .linear_model import CandidateModel, fit_ols

__all__ = [
    "FoldResult",
    "CVSummary",
    "calc_rmse",
    "assign_folds",
    "split_fold",
    "validate_dataset",
    "evaluate_fold",
    "mean_fold_rmse",
    "run_cross_validation",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoldResult:
    """Held-out RMSE of every candidate on one fold.

    ``rmse`` holds NaN for a candidate that could not be evaluated on this
    fold, with the reason in ``errors``.
    """

    fold: int
    n_train: int
    n_test: int
    rmse: Mapping[str, float]
    errors: Mapping[str, str]


@dataclass(frozen=True, eq=False)
class CVSummary:
    k: int
    seed: int
    assignment: np.ndarray
    folds: Tuple[FoldResult, ...]
    mean_rmse: Mapping[str, float]

    def to_frame(self) -> pd.DataFrame:
        """Per-fold RMSE table, one row per fold and one column per candidate."""
        records = [{"fold": f.fold, **dict(f.rmse)} for f in self.folds]
        return pd.DataFrame.from_records(records).set_index("fold")

    def std_rmse(self) -> dict:
        table = self.to_frame()
        return {name: float(table[name].std(ddof=0)) for name in table.columns}


def calc_rmse(predicted, actual) -> float:
    """Root-mean-square error ``sqrt(mean((predicted - actual) ** 2))``."""
    predicted = np.asarray(predicted, dtype=float).ravel()
    actual = np.asarray(actual, dtype=float).ravel()
    if predicted.shape != actual.shape:
        raise ValueError(f"Length mismatch: predicted={predicted.size} vs actual={actual.size}")
    if predicted.size == 0:
        raise ValueError("RMSE is undefined for empty input")
    return float(root_mean_squared_error(actual, predicted))


def assign_folds(dataset: Union[pd.DataFrame, int], k: int, seed: int) -> np.ndarray:
    """Assign each record a fold id in ``1..k``.

    ``dataset`` may be a frame or the number of records. Fold sizes differ by
    at most one and the result is identical for identical ``(n, k, seed)``.
    """
    n = int(dataset) if isinstance(dataset, (int, np.integer)) else len(dataset)
    if k < 2:
        raise ValueError(f"Need k >= 2 folds, got k={k}")
    if k > n:
        raise ValueError(f"Cannot split {n} records into {k} folds")

    base = np.resize(np.arange(1, k + 1), n)
    rng = np.random.default_rng(seed)
    return rng.permutation(base)


def split_fold(assignment, fold_id: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return (train, held-out) row positions for ``fold_id``."""
    assignment = np.asarray(assignment)
    held_out = assignment == fold_id
    return np.flatnonzero(~held_out), np.flatnonzero(held_out)


def validate_dataset(dataset: pd.DataFrame, candidates: Sequence[CandidateModel]) -> None:
    """Reject inputs that would make every fold meaningless.

    A candidate whose predictors are absent is tolerated as long as at least
    one candidate is fully available; it then fails per fold.
    """
    if not isinstance(dataset, pd.DataFrame):
        raise ValueError("Input must be a pandas DataFrame")
    if dataset.empty:
        raise ValueError("Dataset is empty")
    if not candidates:
        raise ValueError("At least one candidate model is required")

    names = [c.name for c in candidates]
    duplicated = sorted({n for n in names if names.count(n) > 1})
    if duplicated:
        raise ValueError(f"Duplicate candidate names: {duplicated}")

    responses = sorted({c.response for c in candidates})
    missing = [r for r in responses if r not in dataset.columns]
    if missing:
        raise MissingColumnError(missing, dataset.columns)

    if not any(all(col in dataset.columns for col in c.columns) for c in candidates):
        absent = sorted({col for c in candidates for col in c.columns if col not in dataset.columns})
        raise MissingColumnError(absent, dataset.columns)

    used = [col for col in dict.fromkeys(col for c in candidates for col in c.columns) if col in dataset.columns]
    non_numeric = [col for col in used if not pd.api.types.is_numeric_dtype(dataset[col])]
    if non_numeric:
        raise ValueError(f"Non-numeric model columns: {non_numeric}")
    with_nulls = [col for col in used if dataset[col].isna().any()]
    if with_nulls:
        raise ValueError(f"Missing values in model columns: {with_nulls}")


def evaluate_fold(
    dataset: pd.DataFrame,
    assignment,
    fold_id: int,
    candidates: Iterable[CandidateModel],
    strict: bool = False,
) -> FoldResult:
    """Fit every candidate on the training part and score it on ``fold_id``.

    An empty partition raises ``DegenerateFoldError``. A rank-deficient fit or
    an absent predictor only invalidates that candidate on this fold unless
    ``strict`` is set, in which case it is raised.
    """
    assignment = np.asarray(assignment)
    if len(assignment) != len(dataset):
        raise ValueError(
            f"Assignment length {len(assignment)} does not match dataset length {len(dataset)}"
        )

    train_idx, test_idx = split_fold(assignment, fold_id)
    if len(train_idx) == 0 or len(test_idx) == 0:
        raise DegenerateFoldError(
            f"Fold {fold_id} has {len(train_idx)} training and {len(test_idx)} held-out records"
        )

    train = dataset.iloc[train_idx]
    test = dataset.iloc[test_idx]

    rmse = {}
    errors = {}
    for candidate in candidates:
        try:
            fitted = fit_ols(train, candidate)
            rmse[candidate.name] = calc_rmse(
                fitted.predict(test), test[candidate.response].to_numpy(dtype=float)
            )
        except (MissingColumnError, RankDeficientError) as exc:
            if strict:
                raise
            logger.warning("Fold %d: candidate '%s' not evaluated: %s", fold_id, candidate.name, exc)
            rmse[candidate.name] = float("nan")
            errors[candidate.name] = str(exc)

    logger.debug(
        "Fold %d: train=%d test=%d rmse=%s", fold_id, len(train_idx), len(test_idx), rmse
    )
    return FoldResult(
        fold=fold_id,
        n_train=len(train_idx),
        n_test=len(test_idx),
        rmse=MappingProxyType(rmse),
        errors=MappingProxyType(errors),
    )


def mean_fold_rmse(folds: Sequence[FoldResult], names: Sequence[str]) -> dict:
    """Arithmetic mean RMSE per candidate over the folds where it is defined."""
    means = {}
    for name in names:
        values = [f.rmse[name] for f in folds if not np.isnan(f.rmse[name])]
        means[name] = float(np.mean(values)) if values else float("nan")
    return means


def run_cross_validation(
    dataset: pd.DataFrame,
    k: int,
    seed: int,
    candidates: Iterable[CandidateModel],
    strict: bool = False,
    verbose: bool = False,
) -> CVSummary:
    """K-fold cross-validation of ``candidates``; returns mean held-out RMSE per candidate."""
    candidates = list(candidates)
    validate_dataset(dataset, candidates)

    assignment = assign_folds(dataset, k, seed)
    folds = tuple(
        evaluate_fold(dataset, assignment, fold_id, candidates, strict=strict)
        for fold_id in range(1, k + 1)
    )
    summary = CVSummary(
        k=k,
        seed=seed,
        assignment=assignment,
        folds=folds,
        mean_rmse=MappingProxyType(mean_fold_rmse(folds, [c.name for c in candidates])),
    )

    if verbose:
        stds = summary.std_rmse()
        print(f"Cross-validation results ({k} folds, seed={seed}):")
        for name, mean in summary.mean_rmse.items():
            print(f"  {name:12s}: {mean:.3f} ± {stds[name]:.3f}")

    return summary
