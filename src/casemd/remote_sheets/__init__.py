"""Remote spreadsheet exports."""

from .sheets_client import DEFAULT_SHEETS_ENDPOINT, GoogleSheetsClient, SheetsApiError
from .spreadsheet_models import RemoteSheet, RemoteSpreadsheet, SpreadsheetCreator
from .spreadsheet_payload import build_spreadsheet_payload

__all__ = [
    "DEFAULT_SHEETS_ENDPOINT",
    "GoogleSheetsClient",
    "RemoteSheet",
    "RemoteSpreadsheet",
    "SheetsApiError",
    "SpreadsheetCreator",
    "build_spreadsheet_payload",
]
