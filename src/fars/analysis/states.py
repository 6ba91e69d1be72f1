"""
FARS State Selection and Coordinate Cleaning (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/states.py

Coordinate Sentinel Rule:
    FARS encodes unknown positions with out-of-range numbers (e.g.
    ``LONGITUD = 999.9999``, ``LATITUDE = 99.9999``).  Any longitude above
    900 or latitude above 90 is replaced with ``<NA>`` in a nullable
    ``Float64`` column.  Downstream code only ever sees real coordinates
    or an explicit missing value; the numeric sentinels never leave this
    module.
"""

from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional

import numpy as np
import pandas as pd

from ..utils.coerce import to_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_STATE_COL: str = "STATE"
_LON_COL: str = "LONGITUD"
_LAT_COL: str = "LATITUDE"

_LON_UNKNOWN_ABOVE: float = 900.0
_LAT_UNKNOWN_ABOVE: float = 90.0

# Half-width (degrees) given to a viewport axis whose min equals its max.
_MIN_HALF_SPAN: float = 0.5

# FARS state codes (GSA geographic location codes)
STATE_NAMES: Dict[int, str] = {
    1: "Alabama",        2: "Alaska",          4: "Arizona",
    5: "Arkansas",       6: "California",      8: "Colorado",
    9: "Connecticut",   10: "Delaware",       11: "District of Columbia",
    12: "Florida",      13: "Georgia",        15: "Hawaii",
    16: "Idaho",        17: "Illinois",       18: "Indiana",
    19: "Iowa",         20: "Kansas",         21: "Kentucky",
    22: "Louisiana",    23: "Maine",          24: "Maryland",
    25: "Massachusetts", 26: "Michigan",      27: "Minnesota",
    28: "Mississippi",  29: "Missouri",       30: "Montana",
    31: "Nebraska",     32: "Nevada",         33: "New Hampshire",
    34: "New Jersey",   35: "New Mexico",     36: "New York",
    37: "North Carolina", 38: "North Dakota", 39: "Ohio",
    40: "Oklahoma",     41: "Oregon",         42: "Pennsylvania",
    43: "Puerto Rico",  44: "Rhode Island",   45: "South Carolina",
    46: "South Dakota", 47: "Tennessee",      48: "Texas",
    49: "Utah",         50: "Vermont",        51: "Virginia",
    52: "Virgin Islands", 53: "Washington",   54: "West Virginia",
    55: "Wisconsin",    56: "Wyoming",
}


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded accident data."""


class Viewport(NamedTuple):
    """Longitude/latitude bounds of a map view, in decimal degrees."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state: Any) -> pd.DataFrame:
    """
    Return the accidents recorded for one state.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state: State code; any integer-like value (``36``, ``'36'``,
            ``'36.0'``).

    Returns:
        Copy of the matching rows, original order kept.

    Raises:
        InvalidStateError: If *state* is not an integer or does not appear
            among the distinct ``STATE`` values of *df*.
        ValueError: If *df* has no ``STATE`` column.
    """
    _validate_columns(df, required=[_STATE_COL])

    code = to_int(state)
    if code is None:
        raise InvalidStateError(f"invalid STATE number: {state}")

    if code not in set(df[_STATE_COL].dropna().unique()):
        raise InvalidStateError(f"invalid STATE number: {code}")

    return df.loc[df[_STATE_COL] == code].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with explicit missing values.

    Args:
        df: Accident DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* where both coordinate columns are nullable ``Float64``
        and every longitude > 900 / latitude > 90 is ``<NA>``.  In-range
        values are untouched.
    """
    _validate_columns(df, required=[_LON_COL, _LAT_COL])

    out = df.copy()
    lon = pd.to_numeric(out[_LON_COL], errors="coerce").astype("Float64")
    lat = pd.to_numeric(out[_LAT_COL], errors="coerce").astype("Float64")
    out[_LON_COL] = lon.mask((lon > _LON_UNKNOWN_ABOVE).fillna(False))
    out[_LAT_COL] = lat.mask((lat > _LAT_UNKNOWN_ABOVE).fillna(False))
    return out


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return ``[LONGITUD, LATITUDE]`` rows where both values are known.

    Expects the output of :func:`sanitize_coordinates`.  Columns are
    returned as plain ``float64``.
    """
    points = df[[_LON_COL, _LAT_COL]].dropna()
    return points.astype("float64")


def compute_viewport(df: pd.DataFrame) -> Optional[Viewport]:
    """
    Compute map bounds from sanitized coordinates.

    Longitude and latitude ranges are taken independently, each ignoring
    its own missing values (a record with a known latitude but unknown
    longitude still widens the latitude range).

    Args:
        df: Output of :func:`sanitize_coordinates`.

    Returns:
        :class:`Viewport`, or ``None`` when either column has no known
        value at all.  A zero-width axis is widened by half a degree on
        each side.
    """
    lon = df[_LON_COL].dropna().to_numpy(dtype="float64")
    lat = df[_LAT_COL].dropna().to_numpy(dtype="float64")
    if lon.size == 0 or lat.size == 0:
        return None

    lon_min, lon_max = _padded_range(lon)
    lat_min, lat_max = _padded_range(lat)
    return Viewport(lon_min, lon_max, lat_min, lat_max)


def state_name(code: int) -> str:
    """Human-readable state name, falling back to ``'State <code>'``."""
    return STATE_NAMES.get(int(code), f"State {int(code)}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _padded_range(values: np.ndarray) -> tuple[float, float]:
    lo, hi = float(np.min(values)), float(np.max(values))
    if lo == hi:
        lo, hi = lo - _MIN_HALF_SPAN, hi + _MIN_HALF_SPAN
    return lo, hi


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident data is missing required columns: {missing}")
