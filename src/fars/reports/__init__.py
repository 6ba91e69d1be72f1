"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summarising and map output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: summarize() and plot_state(), the two public entry points.
"""

from .generators import (
    summarize,
    plot_state,
)

__all__ = [
    'summarize',
    'plot_state',
]
