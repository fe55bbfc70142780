"""Validate a gradebook sheet and print averages and top performers."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, List, Optional

from pipeline import analyze_rows
from report import write_report
from sheet_source import (
    DEFAULT_SHEET_NAME,
    Row,
    SheetSourceError,
    read_google_sheet_rows,
    read_sheet_rows,
)

LOGGER = logging.getLogger(__name__)


def _env(key: str) -> str:
    try:
        return os.environ[key]
    except KeyError as exc:
        raise SystemExit(f"Missing required environment variable: {key}") from exc


def load_rows(source: str, sheet_name: str, *, google_sheet: bool) -> List[Row]:
    if google_sheet:
        creds_json_path = _env("GOOGLE_SERVICE_ACCOUNT_JSON")
        return read_google_sheet_rows(source, sheet_name, creds_json_path=creds_json_path)
    return read_sheet_rows(source, sheet_name)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check gradebook totals and report averages and top students"
    )
    parser.add_argument("source", help="Path to the XLSX gradebook (or spreadsheet name with --google-sheet)")
    parser.add_argument(
        "--sheet",
        default=os.environ.get("GRADEBOOK_SHEET_NAME", DEFAULT_SHEET_NAME),
        help="Worksheet to read (default: %(default)s)",
    )
    parser.add_argument(
        "--google-sheet",
        action="store_true",
        help="Read from Google Sheets using GOOGLE_SERVICE_ACCOUNT_JSON credentials",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        rows = load_rows(args.source, args.sheet, google_sheet=args.google_sheet)
    except SheetSourceError as exc:
        raise SystemExit(f"Failed to open file: {exc}") from exc

    summary = analyze_rows(rows)
    write_report(summary, sys.stdout)
    LOGGER.info("Finished. Reported on %d record(s).", len(summary.records))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
