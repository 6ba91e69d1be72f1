"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized points DataFrame + viewport + title metadata.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Basemap:
    Plotly's built-in geo layer supplies land, coastlines, country borders
    and US state outlines (``showsubunits``).  The view is clipped to the
    supplied viewport with a Mercator projection so the longitude/latitude
    ranges map directly onto the axes.  Each accident is drawn as a small
    dot, the equivalent of a single-pixel point marker.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import Viewport

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {
    'size':    3,
    'color':   'black',
    'opacity': 0.8,
}

_GEO_STYLE: Dict[str, Any] = {
    'projection_type': 'mercator',
    'resolution':      50,
    'showland':        True,
    'landcolor':       '#f5f7fb',
    'showlakes':       True,
    'lakecolor':       'white',
    'showcountries':   True,
    'countrycolor':    '#7f7f7f',
    'showsubunits':    True,
    'subunitcolor':    '#7f7f7f',
    'subunitwidth':    1,
    'showcoastlines':  True,
}

_HOVER_TEMPLATE = (
    "Longitude: %{lon:.4f}<br>"
    "Latitude: %{lat:.4f}<extra></extra>"
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_accident_map(
    df_points: pd.DataFrame,
    viewport: Viewport,
    metadata: Dict[str, Any],
) -> go.Figure:
    """
    Build a map of accident locations over a state basemap.

    Args:
        df_points: DataFrame with float columns ``LONGITUD`` and
            ``LATITUDE``; every row is drawn.  Rows with missing
            coordinates must already be removed.
        viewport: Map bounds (``lon_min``, ``lon_max``, ``lat_min``,
            ``lat_max``).
        metadata: Dict with keys ``state_name`` and ``year`` used for the
            title.  Missing keys fall back to generic text.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_points`` is missing required columns.
    """
    _validate_columns(df_points, required=['LONGITUD', 'LATITUDE'])

    fig = go.Figure(
        go.Scattergeo(
            lon=df_points['LONGITUD'].tolist(),
            lat=df_points['LATITUDE'].tolist(),
            mode='markers',
            marker=_MARKER_STYLE,
            name='Fatal accident',
            hovertemplate=_HOVER_TEMPLATE,
        )
    )

    fig.update_geos(
        lonaxis_range=[viewport.lon_min, viewport.lon_max],
        lataxis_range=[viewport.lat_min, viewport.lat_max],
        **_GEO_STYLE,
    )
    fig.update_layout(
        title=_build_title(metadata, n_points=len(df_points)),
        height=700,
        width=1000,
        margin=dict(t=80, l=20, r=20, b=20),
        showlegend=False,
    )
    return fig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

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
        raise ValueError(
            f"df_points is missing required columns: {missing}"
        )


def _build_title(metadata: Dict[str, Any], n_points: int) -> str:
    """
    Construct a plot title from metadata.

    Args:
        metadata: Dict with ``state_name`` / ``year`` keys.
        n_points: Number of plotted accidents.

    Returns:
        Formatted title string.
    """
    state = str(metadata.get('state_name') or 'State').strip()
    year  = str(metadata.get('year') or '').strip()

    location = f'{state} {year}' if year else state
    return f'{location} – Fatal Accidents (n = {n_points:,})'
