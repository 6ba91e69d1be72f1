"""Shared fixtures: small FARS-style accident files written to tmp_path."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pandas as pd
import pytest


def _accident_frame(months: List[int], state: int = 36) -> pd.DataFrame:
    n = len(months)
    return pd.DataFrame({
        "ST_CASE": range(100001, 100001 + n),
        "STATE":    [state] * n,
        "MONTH":    months,
        "DAY":      [1] * n,
        "LATITUDE": [40.7 + 0.1 * i for i in range(n)],
        "LONGITUD": [-74.0 - 0.1 * i for i in range(n)],
        "FATALS":   [1] * n,
    })


@pytest.fixture
def write_year(tmp_path: Path) -> Callable[..., Path]:
    """Write ``accident_<year>.csv.bz2`` into tmp_path and return its path.

    Pass either ``months`` (builds a default frame) or a ready ``df``.
    """
    def _write(year: int, months: List[int] = None, df: pd.DataFrame = None) -> Path:
        if df is None:
            df = _accident_frame(months or [])
        path = tmp_path / f"accident_{year}.csv.bz2"
        df.to_csv(path, index=False, compression="bz2")
        return path

    return _write


@pytest.fixture
def two_years(write_year, tmp_path: Path) -> Path:
    """Two years, each with 3 January and 2 February accidents."""
    write_year(2013, months=[1, 1, 1, 2, 2])
    write_year(2014, months=[2, 1, 2, 1, 1])
    return tmp_path


@pytest.fixture
def mixed_states(write_year, tmp_path: Path) -> Path:
    """One year with two states and some sentinel coordinates."""
    df = pd.DataFrame({
        "STATE":    [36, 36, 36, 36, 6],
        "MONTH":    [1, 2, 3, 4, 5],
        "LATITUDE": [40.5, 99.9999, 42.0, 41.0, 34.0],
        "LONGITUD": [-74.0, -75.0, 999.9999, -73.5, -118.0],
        "FATALS":   [1, 2, 1, 1, 1],
    })
    write_year(2015, df=df)
    return tmp_path
