"""Command-line interface for jsonzoom."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from jsonzoom.pipeline import FORMATS, run


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="jsonzoom",
        description="Infer a class diagram from a JSON document and render it as HTML.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON or YAML file to read, or '-' for standard input (default)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: next to the input, or jsonzoom.html)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="html",
        dest="fmt",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--no-edges",
        action="store_false",
        dest="with_edges",
        default=None,
        help="Only infer classes; skip relationship edges",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Diagram title (default: input file name)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        dest="open_browser",
        help="Open the generated HTML in a browser",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("jsonzoom").setLevel(logging.DEBUG)

    run(
        None if args.input == "-" else Path(args.input),
        output=args.output,
        fmt=args.fmt,
        with_edges=args.with_edges,
        title=args.title,
        open_browser=args.open_browser,
    )
