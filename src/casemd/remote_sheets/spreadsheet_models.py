"""Remote spreadsheet entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class RemoteSheet:
    """One worksheet to create remotely."""

    title: str
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class RemoteSpreadsheet:
    """Spreadsheet document to create through the remote API."""

    title: str
    sheets: tuple[RemoteSheet, ...]


class SpreadsheetCreator(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for services that create remote spreadsheets."""

    def create_spreadsheet(self, spreadsheet: RemoteSpreadsheet) -> str: ...
