"""Row projection exports."""

from .case_row_projector import Row, build_sheet_rows, project_case_row
from .constants import CASE_COLUMNS, HEADINGS_HEADERS, REVIEW_COLUMNS, SPREADSHEET_HEADERS

__all__ = [
    "CASE_COLUMNS",
    "REVIEW_COLUMNS",
    "SPREADSHEET_HEADERS",
    "HEADINGS_HEADERS",
    "Row",
    "build_sheet_rows",
    "project_case_row",
]
