"""
FARS - Fatality Analysis Reporting System tools

Monthly accident summaries and state accident maps built from the
yearly ``accident_<year>.csv.bz2`` files, using the Functional Core,
Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : public entry points summarize() and plot_state()
"""

from .data.reader import resolve_filename, read_accidents, read_years
from .analysis.states import InvalidStateError
from .reports.generators import summarize, plot_state

__version__ = "0.1.0"

__all__ = [
    'resolve_filename',
    'read_accidents',
    'read_years',
    'InvalidStateError',
    'summarize',
    'plot_state',
]
