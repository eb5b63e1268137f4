"""Load candidate formulas from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from .linear_model import CandidateModel

__all__ = ["load_candidates", "CANDIDATE_REQUIRED_KEYS"]

CANDIDATE_REQUIRED_KEYS = ["name", "response", "predictors"]


def load_candidates(path: Union[str, Path]) -> List[CandidateModel]:
    """
    Read ``{"candidates": [{"name": ..., "response": ..., "predictors": [...]}, ...]}``.
    """
    with open(path, "r", encoding="utf-8") as f:
        config = json.load(f)

    if "candidates" not in config:
        raise KeyError(f"Missing keys in {path}: candidates")

    candidates = []
    for idx, entry in enumerate(config["candidates"]):
        missing = [k for k in CANDIDATE_REQUIRED_KEYS if k not in entry]
        if missing:
            missing_str = ", ".join(missing)
            raise KeyError(f"Missing keys in {path} (candidate {idx}): {missing_str}")
        if isinstance(entry["predictors"], str):
            raise ValueError(f"Predictors of '{entry['name']}' must be a list, got a string")
        candidates.append(
            CandidateModel(
                name=entry["name"],
                response=entry["response"],
                predictors=tuple(entry["predictors"]),
            )
        )

    if not candidates:
        raise ValueError(f"No candidates defined in {path}")
    names = [c.name for c in candidates]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate candidate names in {path}: {names}")
    return candidates
