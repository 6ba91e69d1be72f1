"""Tests for the plot_state entry point."""

import logging

import pandas as pd
import plotly.graph_objects as go
import pytest

from fars import InvalidStateError, plot_state


def test_plots_state_points_and_bounds(mixed_states):
    fig = plot_state(36, 2015, data_dir=mixed_states, show=False)

    trace = fig.data[0]
    # Rows 2 and 3 carry a sentinel coordinate and are not drawn.
    assert sorted(zip(trace.lon, trace.lat)) == [(-74.0, 40.5), (-73.5, 41.0)]

    geo = fig.layout.geo
    assert tuple(geo.lonaxis.range) == (-75.0, -73.5)
    assert tuple(geo.lataxis.range) == (40.5, 42.0)
    assert "New York 2015" in fig.layout.title.text


def test_string_arguments(mixed_states):
    fig = plot_state("6", "2015", data_dir=mixed_states, show=False)
    assert list(fig.data[0].lon) == [-118.0]


def test_float_like_state_code(mixed_states):
    fig = plot_state("36.0", 2015, data_dir=mixed_states, show=False)

    assert len(fig.data[0].lon) == 2
    assert "New York 2015" in fig.layout.title.text


def test_unknown_state_raises_before_plotting(mixed_states, monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("plot should not be built")

    monkeypatch.setattr("fars.reports.generators.plot_accident_map", _fail)
    with pytest.raises(InvalidStateError, match="invalid STATE number: 1"):
        plot_state(1, 2015, data_dir=mixed_states, show=False)


def test_missing_year_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="accident_2000.csv.bz2"):
        plot_state(36, 2000, data_dir=tmp_path, show=False)


def test_no_usable_coordinates_is_a_noop(write_year, tmp_path, caplog):
    write_year(2016, df=pd.DataFrame({
        "STATE": [10, 10],
        "MONTH": [1, 2],
        "LATITUDE": [99.9999, 99.9999],
        "LONGITUD": [999.9999, 999.9999],
    }))

    with caplog.at_level(logging.INFO, logger="fars"):
        result = plot_state(10, 2016, data_dir=tmp_path, show=False)

    assert result is None
    assert "no valid coordinates to plot" in caplog.text


def test_empty_selection_is_a_noop(mixed_states, monkeypatch, caplog):
    monkeypatch.setattr(
        "fars.reports.generators.select_state",
        lambda df, state: df.iloc[0:0],
    )
    with caplog.at_level(logging.INFO, logger="fars"):
        result = plot_state(36, 2015, data_dir=mixed_states, show=False)

    assert result is None
    assert "no accidents to plot" in caplog.text


def test_writes_html(mixed_states, tmp_path):
    out = tmp_path / "maps" / "ny.html"
    fig = plot_state(36, 2015, data_dir=mixed_states, output_path=out)

    assert isinstance(fig, go.Figure)
    assert out.exists()
    assert "<html>" in out.read_text(encoding="utf-8")


def test_show_is_called(mixed_states, monkeypatch):
    shown = []
    monkeypatch.setattr(go.Figure, "show", lambda self, *a, **k: shown.append(self))

    fig = plot_state(36, 2015, data_dir=mixed_states)
    assert shown == [fig]
