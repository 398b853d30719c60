"""Google Sheets API request payload builder."""

from __future__ import annotations

from typing import Any

from .spreadsheet_models import RemoteSpreadsheet


def build_spreadsheet_payload(spreadsheet: RemoteSpreadsheet) -> dict[str, Any]:
    """Build the ``spreadsheets.create`` request body.

    Empty cells are sent without ``userEnteredValue`` so the API leaves them
    blank instead of storing an empty string.
    """
    if not spreadsheet.title:
        raise ValueError("Spreadsheet title cannot be empty.")
    return {
        "properties": {"title": spreadsheet.title},
        "sheets": [
            {
                "properties": {"title": sheet.title},
                "data": [{"rowData": [_row_data(row) for row in sheet.rows]}],
            }
            for sheet in spreadsheet.sheets
        ],
    }


def _row_data(row: tuple[str, ...]) -> dict[str, Any]:
    return {"values": [_cell_data(value) for value in row]}


def _cell_data(value: str) -> dict[str, Any]:
    if value == "":
        return {}
    return {"userEnteredValue": {"stringValue": value}}
