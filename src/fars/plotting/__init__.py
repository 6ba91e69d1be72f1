"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames / dicts and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state and year over a basemap
               with state outlines.
"""

from .state_map import plot_accident_map

__all__ = [
    'plot_accident_map',
]
