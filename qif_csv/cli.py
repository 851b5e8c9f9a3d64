#!/usr/bin/env python3
"""
QIF -> CSV converter

Converts QIF transaction records (``D`` date, ``N`` reference, ``M`` memo,
``T`` amount, ``^`` end of record) into a ``date,reference,note,amount`` CSV.

INPUT may be a single QIF file or a directory, searched recursively for
``*.qif`` (hidden directories and files are skipped). All records go to one
CSV, written to OUTPUT or to standard output.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from qif_csv.controllers.csv_sink import open_csv_sink
from qif_csv.controllers.qif_loader import (
    QIF_EXTENSION,
    ConversionOptions,
    convert_sources,
    find_qif_files,
)
from qif_csv.utilities.config_logging import configure_logging
from qif_csv.utilities.errors import QifError

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-csv",
        description="Convert QIF (Quicken Interchange Format) transactions to CSV.",
    )
    ap.add_argument("input", type=Path, help="Path to a .qif file or a directory to search")
    ap.add_argument(
        "output",
        nargs="?",
        default="-",
        help="Path to output .csv file (default: '-' for standard output)",
    )
    ap.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of input QIF (default: utf-8). Try cp1252 for old exports.",
    )
    ap.add_argument(
        "--extension",
        default=QIF_EXTENSION,
        help=f"File suffix to search for in directories (default: {QIF_EXTENSION})",
    )
    ap.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Skip a source that fails to parse instead of stopping",
    )
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: INFO)",
    )
    ap.add_argument("--log-file", type=Path, help="Also write a rotating debug log here")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.input.exists():
        ap.error(f"Input not found: {args.input}")
    configure_logging(args.log_level, args.log_file)

    options = ConversionOptions(
        encoding=args.encoding,
        continue_on_error=args.continue_on_error,
        extension=args.extension,
    )
    paths: List[Path] = find_qif_files(args.input, options.extension)
    if not paths:
        log.warning("no %s files found under %s", options.extension, args.input)

    output = args.output if args.output == "-" else Path(args.output)
    with open_csv_sink(output) as sink:
        try:
            result = convert_sources(paths, sink, options)
        except QifError as e:
            log.error("%s", e)
            return EXIT_FAILED

    log.info(
        "wrote %d record(s) from %d of %d source(s)",
        result.records,
        len(result.converted),
        len(paths),
    )
    return EXIT_OK if result.ok else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
