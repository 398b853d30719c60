"""Conversion error taxonomy."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for conversion failures."""


class InputError(ConversionError):
    """Raised when a conversion request is rejected before parsing."""


class ParseError(ConversionError):
    """Raised when reading a Markdown source fails."""

    def __init__(self, source_name: str, cause: BaseException) -> None:
        super().__init__(f"parse {source_name}: {cause}")
        self.source_name = source_name


class SerializationError(ConversionError):
    """Raised when writing CSV or workbook output fails."""


class RemoteSpreadsheetError(ConversionError):
    """Raised when the remote spreadsheet service fails."""
