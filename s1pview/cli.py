"""Command that loads an S1P file and prints its log-magnitude trace."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .data_handler import DataHandler
from .graph import GraphData, LineSeries
from .manager import DataUiManager, file_url_to_path
from .processing import LogMagProcessor
from .touchstone import TouchstoneParser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s1pview",
        description="Show the log magnitude of a one-port Touchstone file.",
    )
    parser.add_argument("file", help="path or file: URL of an .s1p file")
    parser.add_argument(
        "--bounds",
        action="store_true",
        help="print only the axis bounds: min_x max_x min_y max_y",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)

    target: str = args.file
    path = file_url_to_path(target) if target.lower().startswith("file:") else target

    errors: list[str] = []
    series = LineSeries()
    graph = GraphData(series)
    handler = DataHandler(parser=TouchstoneParser(), processor=LogMagProcessor())
    manager = DataUiManager(handler, graph, errors.append)
    manager.file_path_changed(path)

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1

    if args.bounds:
        bounds = graph.bounds
        print(
            " ".join(
                f"{value:.10g}"
                for value in (bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y)
            )
        )
    else:
        for x, y in series.points:
            print(f"{x:.10g} {y:.10g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())