"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary: Month x year accident count table
- states:  State selection, coordinate sentinels and map bounds
"""

from .summary import (
    summarize_years,
)

from .states import (
    InvalidStateError,
    Viewport,
    STATE_NAMES,
    select_state,
    sanitize_coordinates,
    plottable_points,
    compute_viewport,
    state_name,
)

__all__ = [
    # Summary
    'summarize_years',
    # States
    'InvalidStateError',
    'Viewport',
    'STATE_NAMES',
    'select_state',
    'sanitize_coordinates',
    'plottable_points',
    'compute_viewport',
    'state_name',
]
