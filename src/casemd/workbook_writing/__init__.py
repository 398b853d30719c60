"""Workbook writing exports."""

from .sheet_naming import (
    MAX_SHEET_NAME_LENGTH,
    SheetNameRegistry,
    derive_sheet_name,
    sanitize_sheet_name,
)
from .workbook_serializer import (
    Sheet,
    WorkbookValidationError,
    column_name,
    serialize_workbook,
    write_workbook,
)

__all__ = [
    "MAX_SHEET_NAME_LENGTH",
    "Sheet",
    "SheetNameRegistry",
    "WorkbookValidationError",
    "column_name",
    "derive_sheet_name",
    "sanitize_sheet_name",
    "serialize_workbook",
    "write_workbook",
]
