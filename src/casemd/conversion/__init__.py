"""Conversion exports."""

from .conversion_errors import (
    ConversionError,
    InputError,
    ParseError,
    RemoteSpreadsheetError,
    SerializationError,
)
from .markdown_converters import (
    convert_headings,
    convert_to_csv,
    convert_to_workbook,
    create_remote_spreadsheet,
)

__all__ = [
    "ConversionError",
    "InputError",
    "ParseError",
    "RemoteSpreadsheetError",
    "SerializationError",
    "convert_headings",
    "convert_to_csv",
    "convert_to_workbook",
    "create_remote_spreadsheet",
]
