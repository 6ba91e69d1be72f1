"""Tests for the fars command-line interface and logging setup."""

import json
import logging

import pandas as pd
import pytest

from fars.cli import main
from fars.utils.logging import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


class TestSummaryCommand:

    def test_prints_table(self, two_years, capsys):
        main(["summary", "--years", "2013", "2014", "--data-dir", str(two_years)])

        out = capsys.readouterr().out
        assert "2013" in out and "2014" in out
        assert "MONTH" in out

    def test_writes_csv(self, two_years, tmp_path):
        out_csv = tmp_path / "out" / "summary.csv"
        main([
            "summary", "--years", "2013", "2014",
            "--data-dir", str(two_years), "--output", str(out_csv),
        ])

        saved = pd.read_csv(out_csv, index_col="MONTH")
        assert list(saved.columns) == ["2013", "2014"]
        assert saved.loc[1].tolist() == [3, 3]

    def test_all_missing_years_still_succeeds(self, tmp_path, capsys):
        main(["summary", "--years", "1980", "--data-dir", str(tmp_path)])
        assert "table is empty" in capsys.readouterr().out

    def test_unknown_data_dir_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["summary", "--years", "2013", "--data-dir", str(tmp_path / "nope")])
        assert exc.value.code == 1


class TestMapCommand:

    def test_writes_html(self, mixed_states, tmp_path):
        out_html = tmp_path / "ny.html"
        main([
            "map", "--state", "36", "--year", "2015",
            "--data-dir", str(mixed_states), "--output", str(out_html),
        ])
        assert out_html.exists()

    def test_invalid_state_exits(self, mixed_states, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["map", "--state", "99", "--year", "2015", "--data-dir", str(mixed_states)])

        assert exc.value.code == 1
        assert "invalid STATE number: 99" in capsys.readouterr().err

    def test_no_usable_coordinates_message(self, write_year, tmp_path, capsys):
        write_year(2016, df=pd.DataFrame({
            "STATE": [10],
            "MONTH": [1],
            "LATITUDE": [99.9999],
            "LONGITUD": [999.9999],
        }))
        main(["map", "--state", "10", "--year", "2016", "--data-dir", str(tmp_path)])

        captured = capsys.readouterr()
        assert "none with usable coordinates" in captured.out
        assert "no valid coordinates to plot" in captured.err

    def test_missing_year_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["map", "--state", "36", "--year", "1970", "--data-dir", str(tmp_path)])

        assert exc.value.code == 1
        assert "accident_1970.csv.bz2" in capsys.readouterr().err


class TestLogging:

    def test_json_formatter_merges_extra(self):
        record = logging.LogRecord(
            "fars.data.reader", logging.WARNING, __file__, 1,
            "invalid year: %s", ("1999",), None,
        )
        record.year = "1999"

        payload = json.loads(JsonFormatter().format(record))
        assert payload["msg"] == "invalid year: 1999"
        assert payload["level"] == "WARNING"
        assert payload["year"] == "1999"

    def test_json_timestamp_is_utc(self):
        record = logging.LogRecord(
            "fars", logging.INFO, __file__, 1, "hello", (), None,
        )
        record.created = 0.0

        payload = json.loads(JsonFormatter().format(record))
        assert payload["ts"] == "1970-01-01T00:00:00Z"

    def test_configure_logging_replaces_handler(self):
        configure_logging(logging.INFO)
        pkg_logger = configure_logging(logging.DEBUG, json_output=True)

        assert len(pkg_logger.handlers) == 1
        assert isinstance(pkg_logger.handlers[0].formatter, JsonFormatter)
        assert pkg_logger.level == logging.DEBUG

    def test_cli_json_logs_warning(self, two_years, capsys):
        main(["--log-json", "summary", "--years", "1999", "--data-dir", str(two_years)])

        lines = [
            json.loads(line)
            for line in capsys.readouterr().err.splitlines()
            if line.startswith("{")
        ]
        assert any(entry["msg"] == "invalid year: 1999" for entry in lines)
