"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: resolves years → files, calls reader.py to
fetch DataFrames, calls the functional core to summarise or clean them,
calls plotting functions to build figures, and shows or writes them.

No parsing or counting logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import summarize, plot_state

    table = summarize([2013, 2014, 2015], data_dir=Path("data"))
    plot_state(36, 2014, data_dir=Path("data"),
               output_path=Path("ny_2014.html"), show=False)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..data import reader
from ..analysis.summary import summarize_years
from ..analysis.states import (
    select_state,
    sanitize_coordinates,
    plottable_points,
    compute_viewport,
    state_name,
)
from ..plotting.state_map import plot_accident_map
from ..utils.coerce import to_int

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def summarize(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file is missing or unreadable are skipped with a logged
    warning; they do not appear as columns.

    Args:
        years: Year values, e.g. ``[2013, 2014]`` or ``['2013', '2014']``.
            Column labels of the result are these values verbatim.
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.

    Returns:
        Month x year count table (see
        :func:`fars.analysis.summary.summarize_years`).  Empty when no
        requested year could be loaded.
    """
    years = list(years)
    frames = reader.read_years(years, data_dir=data_dir)
    table = summarize_years(frames)

    if table.empty:
        logger.warning(
            "No accident data loaded for years %s",
            years,
            extra={"years": [str(y) for y in years]},
        )
    else:
        logger.info(
            "Summarised %d year(s) across %d month(s)",
            table.shape[1],
            table.shape[0],
        )
    return table


def plot_state(
    state: Any,
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Map every accident in one state for one year.

    Args:
        state: FARS state code (``36``, ``'36'`` or ``'36.0'``).
        year: Year value (``2013`` or ``'2013'``).
        data_dir: Directory holding the accident files.
        output_path: When given, the figure is written there as HTML.
        show: When ``True`` and no *output_path* is given, open the figure
            with ``fig.show()``.

    Returns:
        The rendered figure, or ``None`` when there was nothing to plot
        (no accidents in the state, or no usable coordinates).

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state* does not occur in that year's data.
    """
    path = reader.resolve_data_dir(data_dir) / reader.resolve_filename(year)
    df = reader.read_accidents(path)

    df_state = select_state(df, state)
    code = to_int(state)

    if df_state.empty:
        logger.info("no accidents to plot")
        return None

    df_state = sanitize_coordinates(df_state)
    viewport = compute_viewport(df_state)
    if viewport is None:
        logger.info(
            "no valid coordinates to plot",
            extra={"state": code, "year": str(year)},
        )
        return None

    df_points = plottable_points(df_state)
    dropped = len(df_state) - len(df_points)
    if dropped:
        logger.debug("Dropped %d accident(s) with unknown coordinates", dropped)

    fig = plot_accident_map(
        df_points=df_points,
        viewport=viewport,
        metadata={"state_name": state_name(code), "year": year},
    )

    _emit_figure(fig, output_path=output_path, show=show)
    return fig


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _emit_figure(
    fig: go.Figure,
    output_path: Optional[Union[str, Path]],
    show: bool,
) -> None:
    """
    Write *fig* to HTML, or show it interactively.

    Args:
        fig: Figure to render.
        output_path: HTML destination; parent directories are created.
        show: Call ``fig.show()`` when no *output_path* is given.
    """
    if output_path is not None:
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out))
        logger.info("Map saved → %s", out)
    elif show:
        fig.show()
