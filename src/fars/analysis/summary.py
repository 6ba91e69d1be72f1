"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the per-year list produced by ``data.reader.read_years``;
output is a month x year count table.

Package Location: src/fars/analysis/summary.py
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

_MONTH_COL: str = "MONTH"
_YEAR_COL: str = "year"


def summarize_years(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year and pivot years into columns.

    ``None`` entries (years that failed to load) are skipped.  The remaining
    frames are stacked, grouped by ``(year, MONTH)`` and counted.

    Args:
        frames: Iterable of DataFrames with columns ``[MONTH, year]``, or
            ``None`` placeholders.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending, only months present in the
        data) with one ``Int64`` column per year, in the order each year
        first appears.  Month/year combinations with no accidents are
        ``<NA>`` rather than 0.  When no frame is usable the result is an
        empty DataFrame whose index is still named ``MONTH``.

    Raises:
        ValueError: If a frame is missing the ``MONTH`` or ``year`` column.
    """
    usable = [df for df in frames if df is not None]
    if not usable:
        return pd.DataFrame(index=pd.Index([], name=_MONTH_COL))

    for df in usable:
        _validate_columns(df, required=[_MONTH_COL, _YEAR_COL])

    combined = pd.concat(usable, ignore_index=True)
    year_order = list(pd.unique(combined[_YEAR_COL]))

    counts = (
        combined.groupby([_YEAR_COL, _MONTH_COL], sort=False)
        .size()
        .rename("n")
        .reset_index()
    )

    table = counts.pivot(index=_MONTH_COL, columns=_YEAR_COL, values="n")
    table = table.sort_index().reindex(columns=year_order).astype("Int64")
    table.columns.name = _YEAR_COL
    return table


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"year frame is missing required columns: {missing}")
