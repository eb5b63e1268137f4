"""Exceptions raised by ecostats."""

from __future__ import annotations

__all__ = [
    "EcostatsError",
    "MissingColumnError",
    "RankDeficientError",
    "DegenerateFoldError",
]


class EcostatsError(ValueError):
    """Base class for data problems detected by ecostats."""


class MissingColumnError(EcostatsError):
    """A required column is absent from the input frame."""

    def __init__(self, missing, available=None):
        self.missing = list(missing)
        msg = f"Missing required columns: {self.missing}"
        if available is not None:
            msg += f". Found: {list(available)}"
        super().__init__(msg)


class RankDeficientError(EcostatsError):
    """The design matrix has linearly dependent columns."""


class DegenerateFoldError(EcostatsError):
    """A fold has an empty training or held-out partition."""
