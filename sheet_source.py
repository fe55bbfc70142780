"""Load gradebook rows as lists of text cells.

Two sources are supported: a worksheet inside a local XLSX file (read with
pandas/openpyxl) and a worksheet of a Google Sheets spreadsheet (read with
gspread using a service account). Both return every row of the sheet,
header included, with trailing empty cells removed so that incomplete rows
stay short.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Iterable, List, Optional, Union

import gspread
import pandas as pd
from oauth2client.service_account import ServiceAccountCredentials

LOGGER = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "CSF111_202425_01_GradeBook"

GOOGLE_SCOPES = [
    "https://spreadsheets.google.com/feeds",
    "https://www.googleapis.com/auth/drive",
]

Row = List[str]


class SheetSourceError(RuntimeError):
    """Raised when a gradebook source cannot be opened or read."""


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value)


def _trim_row(values: Iterable[Any]) -> Row:
    row = [_cell_text(value) for value in values]
    while row and row[-1] == "":
        row.pop()
    return row


def read_sheet_rows(
    path: Union[str, os.PathLike], sheet_name: str = DEFAULT_SHEET_NAME
) -> List[Row]:
    """Return all rows of *sheet_name* in the XLSX workbook at *path*."""

    try:
        frame = pd.read_excel(
            path,
            sheet_name=sheet_name,
            header=None,
            dtype=str,
            keep_default_na=False,
            engine="openpyxl",
        )
    except FileNotFoundError as exc:
        raise SheetSourceError(f"{path}: file not found") from exc
    except Exception as exc:  # bad zip, unknown worksheet, unreadable cells
        raise SheetSourceError(f"{path}: {exc}") from exc

    rows = [_trim_row(values) for values in frame.itertuples(index=False, name=None)]
    LOGGER.info("Loaded %d row(s) from sheet %r of %s", len(rows), sheet_name, path)
    return rows


def authorize_google_sheets(creds_json_path: str) -> gspread.Client:
    """Authorize a gspread client with a service account key file."""

    creds = ServiceAccountCredentials.from_json_keyfile_name(creds_json_path, GOOGLE_SCOPES)
    return gspread.authorize(creds)


def read_google_sheet_rows(
    spreadsheet_name: str,
    worksheet_name: str = DEFAULT_SHEET_NAME,
    *,
    creds_json_path: Optional[str] = None,
    client: Optional[gspread.Client] = None,
) -> List[Row]:
    """Return all rows of a worksheet in a Google Sheets spreadsheet.

    Either an authorized *client* or a *creds_json_path* to authorize one
    must be given.
    """

    if client is None:
        if not creds_json_path:
            raise SheetSourceError("No Google service account credentials configured")
        try:
            client = authorize_google_sheets(creds_json_path)
        except (OSError, ValueError) as exc:
            raise SheetSourceError(f"Cannot load credentials {creds_json_path}: {exc}") from exc

    try:
        worksheet = client.open(spreadsheet_name).worksheet(worksheet_name)
        values = worksheet.get_all_values()
    except gspread.exceptions.GSpreadException as exc:
        raise SheetSourceError(f"{spreadsheet_name}/{worksheet_name}: {exc!r}") from exc

    rows = [_trim_row(row) for row in values]
    LOGGER.info(
        "Loaded %d row(s) from worksheet %r of spreadsheet %r",
        len(rows),
        worksheet_name,
        spreadsheet_name,
    )
    return rows
