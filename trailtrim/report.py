"""CSV summary of the files changed by a run."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from .scanner import FileResult

SUMMARY_COLUMNS = ["path", "lines_trimmed", "chars_removed"]


def summary_frame(results: Iterable[FileResult]) -> pd.DataFrame:
    """Build a data frame with one row per changed file, in run order."""
    rows = [result.as_row() for result in results if result.changed]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary(results: Iterable[FileResult], output_path) -> Path:
    """Write the summary CSV to ``output_path``, creating its directory."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    summary_frame(results).to_csv(output_path, index=False)
    return output_path
