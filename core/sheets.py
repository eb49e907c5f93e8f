import json
from typing import Any, List, Sequence

import gspread
import requests
from gspread.utils import absolute_range_name
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

import config

from .errors import MissingInputError, SheetWriteError
from .logging_utils import info


# errors gspread and its HTTP session raise for a failed call
SHEETS_ERRORS = (gspread.exceptions.GSpreadException, GoogleAuthError, PermissionError, requests.RequestException)


def _describe(e: Exception) -> str:
    return str(e) or type(e).__name__


def _client(credentials_json: str) -> gspread.Client:
    try:
        info_dict = json.loads(credentials_json)
    except ValueError as e:
        raise MissingInputError("Service account credentials are not valid JSON.") from e
    try:
        creds = Credentials.from_service_account_info(info_dict, scopes=config.SHEETS_SCOPES)
    except (ValueError, KeyError) as e:
        raise MissingInputError(f"Service account credentials are incomplete: {e}") from e
    return gspread.authorize(creds)


def open_spreadsheet(credentials_json: str, sheet_id: str) -> gspread.Spreadsheet:
    client = _client(credentials_json)
    try:
        return client.open_by_key(sheet_id)
    except SHEETS_ERRORS as e:
        msg = f"Could not open spreadsheet {sheet_id}: {_describe(e)}"
        if isinstance(e, PermissionError):
            msg += " (is the sheet shared with the service account?)"
        raise SheetWriteError(msg) from e


def open_ws(ss: gspread.Spreadsheet, title: str, rows: int = 1000, cols: int = 26) -> gspread.Worksheet:
    try:
        ws = ss.worksheet(title)
    except gspread.WorksheetNotFound:
        info(f"Sheet ({title}) not found, adding it...")
        ws = ss.add_worksheet(title=title, rows=rows, cols=cols)
    return ws


def _append(ss: gspread.Spreadsheet, rng: str, values: Sequence[Sequence[Any]]):
    return ss.values_append(
        rng,
        params={"valueInputOption": config.VALUE_INPUT_OPTION},
        body={"majorDimension": "ROWS", "range": rng, "values": [list(v) for v in values]},
    )


def write_sheet(ss: gspread.Spreadsheet, sheet_name: str, header: List[str], rows: List[List[Any]]) -> None:
    """Replace the contents of ``sheet_name`` with ``header`` followed by ``rows``.

    Both appends target the first row of the tab; the Sheets append call
    writes after the last row of the table it finds there, so the data ends
    up directly under the header.
    """

    first_row = absolute_range_name(sheet_name, "A1:1")
    try:
        open_ws(ss, sheet_name, cols=max(26, len(header)))

        info(f"Cleaning old Sheet ({sheet_name})...")
        ss.values_clear(absolute_range_name(sheet_name))

        info("Adding header...")
        _append(ss, first_row, [header])

        if rows:
            info("Appending data...")
            _append(ss, first_row, rows)
        else:
            info("No Issues to append.")
    except SHEETS_ERRORS as e:
        raise SheetWriteError(f"Writing to sheet {sheet_name!r} of {ss.id} failed: {_describe(e)}") from e
