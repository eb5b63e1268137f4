"""Plain-text rendering of result tables."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pandas as pd


def render_results_table(
    table: pd.DataFrame,
    path: Optional[Union[str, Path]] = None,
    float_format: str = "{:.3f}",
) -> str:
    """Format ``table`` for printing; also write it as CSV when ``path`` is given."""
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(path, index=False)

    return table.to_string(index=False, float_format=float_format.format)
