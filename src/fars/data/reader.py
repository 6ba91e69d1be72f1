"""
FARS Data Reader (Imperative Shell)

This module owns every filesystem touch in the package: resolving the
per-year accident filename, locating the data directory, and parsing the
(possibly compressed) CSV files into DataFrames.

Package Location: src/fars/data/reader.py

Filename convention:
    ``accident_<YEAR>.csv.bz2`` where ``<YEAR>`` is the integer year with
    no zero-padding.  A year that cannot be read as an integer becomes the
    ``NA`` sentinel, which produces a well-formed filename that never
    exists on disk, so the loader reports it as a missing file.

Data directory:
    Relative filenames are joined onto a data directory chosen in this
    order: explicit ``data_dir`` argument, the ``FARS_DATA_DIR``
    environment variable, then the current working directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

import pandas as pd

from ..utils.coerce import to_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_FILENAME_PATTERN: str = "accident_{year}.csv.bz2"
_NA_YEAR: str = "NA"
_DATA_DIR_ENV: str = "FARS_DATA_DIR"

# Columns kept by read_years(); "year" is added from the requested value.
_YEAR_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_filename(year: Any) -> str:
    """
    Map a year value to its FARS accident filename.

    Args:
        year: Four-digit year as ``int`` or ``str`` (``2013`` or ``'2013'``).

    Returns:
        Filename such as ``'accident_2013.csv.bz2'``.  Input that does not
        coerce to an integer yields ``'accident_NA.csv.bz2'``.
    """
    return _FILENAME_PATTERN.format(year=_coerce_year(year))


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the directory that per-year files are looked up in."""
    if data_dir is not None:
        return Path(data_dir).expanduser()
    env = os.getenv(_DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def read_accidents(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load one FARS accident file into a DataFrame.

    Compression is inferred from the file suffix (``.bz2``, ``.gz``,
    ``.zip``), so both raw and compressed CSVs are accepted.  All columns
    and the file's row order are preserved.

    Args:
        path: Path to the accident file.

    Returns:
        DataFrame with one row per accident.

    Raises:
        FileNotFoundError: If *path* does not exist.  Checked before parsing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    df = pd.read_csv(path, compression="infer", low_memory=False)
    logger.debug("Loaded %d rows from %s", len(df), path.name)
    return df


def read_years(
    years: Sequence[Any],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the month and year of every accident for each requested year.

    Each year is handled independently.  A year whose file is missing or
    cannot be parsed is logged as a warning and yields ``None`` in its slot;
    no exception reaches the caller.

    Args:
        years: Year values in the order they should be returned.  Duplicates
            are allowed and are loaded once per occurrence.
        data_dir: Directory holding the accident files.  See
            :func:`resolve_data_dir` for the fallback order.

    Returns:
        List aligned with *years*.  Each entry is a DataFrame with columns
        ``[MONTH, year]`` (``year`` holds the requested value verbatim) or
        ``None`` when that year failed to load.
    """
    base = resolve_data_dir(data_dir)
    results: List[Optional[pd.DataFrame]] = []

    for year in years:
        path = base / resolve_filename(year)
        try:
            df = read_accidents(path)
            results.append(df.assign(year=year)[_YEAR_COLUMNS])
        except (OSError, ValueError, KeyError) as exc:
            logger.warning(
                "invalid year: %s",
                year,
                extra={"year": str(year), "path": str(path), "reason": str(exc)},
            )
            results.append(None)

    return results


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _coerce_year(year: Any) -> Union[int, str]:
    """Coerce *year* to ``int``, or the ``NA`` sentinel when impossible."""
    value = to_int(year)
    return _NA_YEAR if value is None else value
