"""
Command-line entry point for N-up PDF imposition.

Usage:
    nup-merge invoice1.pdf invoice2.pdf ... -n 4 --orientation portrait -o out.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from nup_toolkit import __version__
from nup_toolkit.imposer import ImposeError, Orientation, RunRequest, impose
from nup_toolkit.imposer.layout import DEFAULT_CAPACITY, SUPPORTED_CAPACITIES
from nup_toolkit.imposer.output import default_output_name, save_pdf, save_previews
from nup_toolkit.imposer.output.preview import DEFAULT_PREVIEW_DPI

logger = logging.getLogger("nup_toolkit.cli")

DEFAULT_MAX_FILES = 50


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nup-merge",
        description="Merge many single-page PDFs onto fewer A4 sheets (N-up).",
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="Input PDF files, in sheet order")
    parser.add_argument(
        "-n", "--per-sheet",
        type=_positive_int,
        default=DEFAULT_CAPACITY,
        help=(
            f"Source pages per sheet (default {DEFAULT_CAPACITY}; "
            f"tuned layouts for {', '.join(map(str, SUPPORTED_CAPACITIES))})"
        ),
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=Orientation.PORTRAIT.value,
        help="Sheet orientation (default portrait)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output PDF file or directory (default ./merged_<timestamp>.pdf)",
    )
    parser.add_argument("--preview-dir", type=Path, default=None, help="Also write PNG previews here")
    parser.add_argument("--preview-dpi", type=_positive_int, default=DEFAULT_PREVIEW_DPI)
    parser.add_argument(
        "--max-files",
        type=_positive_int,
        default=DEFAULT_MAX_FILES,
        help=f"Refuse more than this many inputs (default {DEFAULT_MAX_FILES})",
    )
    parser.add_argument("-j", "--jobs", type=_positive_int, default=4, help="Threads for reading inputs")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log layout details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.inputs) > args.max_files:
        parser.error(
            f"too many input files ({len(args.inputs)}); limit is {args.max_files}"
        )

    _configure_logging(args.verbose, args.quiet)

    request = RunRequest(
        input_paths=tuple(args.inputs),
        capacity=args.per_sheet,
        orientation=Orientation.parse(args.orientation),
        max_workers=args.jobs,
    )

    try:
        result = impose(request)
    except ImposeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    output_path = args.output or Path.cwd() / default_output_name()
    try:
        written = save_pdf(result.pdf_bytes, output_path)
    except OSError as e:
        print(f"error: cannot write {output_path}: {e}", file=sys.stderr)
        return 1

    if args.preview_dir is not None:
        try:
            save_previews(result.pdf_bytes, args.preview_dir, args.preview_dpi)
        except OSError as e:
            print(f"error: cannot write previews to {args.preview_dir}: {e}", file=sys.stderr)
            return 1

    summary: List[str] = [
        f"{written}: {result.source_count} PDFs on {result.page_count} pages",
    ]
    if result.warnings:
        summary.append(f"{len(result.warnings)} skipped (see log)")
    print(", ".join(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
