"""Command line entry point.

Usage:
    hoursheet [-o OUTPUT_DIR] [--log-level LEVEL] export1.csv [export2.csv ...]
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from hoursheet.converter.pipeline import convert_files
from hoursheet.core.config import AppSettings
from hoursheet.core.logging_setup import configure_logging
from hoursheet.persistence import create_output_store

USAGE = "Usage: hoursheet [-o outputdir] <csv-file1> <csv-file2> ..."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoursheet",
        description="Convert exported hours CSV logs into four-week timesheet CSVs",
    )
    parser.add_argument("files", nargs="*", help="Hours export CSV files")
    parser.add_argument("-o", "--output-dir", default=None, help="Directory for timesheet files (default: .)")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.files:
        print(USAGE)
        return 0

    settings = AppSettings()
    configure_logging(args.log_level or settings.log_level)

    store = create_output_store(settings, output_dir=args.output_dir)
    batch = convert_files(args.files, store, settings.timesheet.to_layout(), settings.encoding)

    if not batch.ok:
        print("An error occurred while processing the CSV files.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
