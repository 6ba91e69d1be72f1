"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summary --years 2013 2014 [...]   Monthly accident counts per year
    fars map --state 36 --year 2013 [...]  Map one state's accidents

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_data_dir(args: argparse.Namespace) -> Path:
    """Resolve and check the data directory for a subcommand.

    Args:
        args: Parsed CLI arguments.  Optional field: ``args.data_dir``.

    Returns:
        Existing data directory.

    Raises:
        SystemExit: If the directory does not exist.
    """
    from .data.reader import resolve_data_dir

    data_dir = resolve_data_dir(args.data_dir)
    if not data_dir.is_dir():
        _die(
            f"Data directory not found: {data_dir}\n"
            f"Tip: pass --data-dir or set FARS_DATA_DIR."
        )
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summary
# ---------------------------------------------------------------------------

def handle_summary(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month x year accident count table.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from .reports.generators import summarize

    data_dir = _resolve_data_dir(args)

    print(f"\n📊  Summarising accidents for {', '.join(args.years)}")
    print(f"    Data: {data_dir}")

    table = summarize(args.years, data_dir=data_dir)

    if table.empty:
        print("\n⚠️   No requested year could be loaded — table is empty.")
    else:
        print()
        print(table.to_string(na_rep=""))

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(out)
        print(f"\n✅  Summary saved → {out}")


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Build the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    from .analysis.states import InvalidStateError
    from .reports.generators import plot_state

    data_dir = _resolve_data_dir(args)

    print(f"\n🗺️   Mapping accidents for state {args.state}, year {args.year}")

    try:
        fig = plot_state(
            args.state,
            args.year,
            data_dir=data_dir,
            output_path=args.output,
            show=args.show,
        )
    except (FileNotFoundError, InvalidStateError) as exc:
        _die(str(exc))

    if fig is None:
        print("    nothing to plot: no accidents, or none with usable coordinates")
    elif args.output:
        print(f"\n✅  Map saved → {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summary`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System tools\n"
            "Monthly accident summaries and state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summary
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summary",
        help="Count accidents per month for one or more years.",
        description=(
            "Read accident_<year>.csv.bz2 for each year and print a table\n"
            "with one row per month and one column per year.\n\n"
            "Years whose file is missing are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the accident files (default: $FARS_DATA_DIR or cwd).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Also write the table to this CSV file.",
    )
    p_sum.set_defaults(func=handle_summary)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map every accident in one state for one year.",
        description=(
            "Plot accident locations for a FARS state code and year over a\n"
            "basemap with state outlines.  Unknown coordinates are skipped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="CODE",
        help="FARS state code, e.g. 36 for New York.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YYYY",
        help="Year of the accident file, e.g. 2013.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the accident files (default: $FARS_DATA_DIR or cwd).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening it.",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in a browser when --output is not given.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_output=args.log_json,
    )
    args.func(args)


if __name__ == "__main__":
    main()
