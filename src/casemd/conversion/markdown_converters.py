"""Markdown to CSV, workbook and remote spreadsheet converters."""

from __future__ import annotations

import csv
import logging
from collections.abc import Callable, Sequence
from typing import BinaryIO, TextIO

from casemd.case_extraction import Case, Source, extract_cases, extract_headings
from casemd.remote_sheets import (
    RemoteSheet,
    RemoteSpreadsheet,
    SheetsApiError,
    SpreadsheetCreator,
)
from casemd.row_projection import (
    HEADINGS_HEADERS,
    SPREADSHEET_HEADERS,
    Row,
    build_sheet_rows,
    project_case_row,
)
from casemd.workbook_writing import Sheet, SheetNameRegistry, derive_sheet_name, write_workbook

from .conversion_errors import (
    InputError,
    ParseError,
    RemoteSpreadsheetError,
    SerializationError,
)

CaseParser = Callable[[str | bytes], Sequence[Case]]

logger = logging.getLogger(__name__)


def convert_to_csv(
    sources: Sequence[Source], output: TextIO, *, parse: CaseParser = extract_cases
) -> None:
    """Write every case of every source as one CSV document.

    The header is written before the first source is parsed, so a failed
    conversion can leave it behind in ``output``.
    """
    _require_sources(sources)
    writer = csv.writer(output, lineterminator="\n")
    _write_csv_row(writer, SPREADSHEET_HEADERS)

    for source in sources:
        cases = _parse_source(source, parse)
        for case in cases:
            _write_csv_row(writer, project_case_row(case))


def convert_to_workbook(
    sources: Sequence[Source], output: BinaryIO, *, parse: CaseParser = extract_cases
) -> None:
    """Write one worksheet per source into an xlsx workbook."""
    _require_sources(sources)
    sheets = [Sheet(name=name, rows=rows) for name, rows in _build_named_rows(sources, parse)]
    try:
        write_workbook(output, sheets)
    except (OSError, ValueError) as exc:
        raise SerializationError(f"write workbook: {exc}") from exc


def convert_headings(sources: Sequence[Source], output: TextIO) -> None:
    """Write the level-1 headings of every source as a one-column CSV."""
    _require_sources(sources)
    writer = csv.writer(output, lineterminator="\n")
    _write_csv_row(writer, HEADINGS_HEADERS)
    for source in sources:
        headings = _parse_source(source, extract_headings)
        for heading in headings:
            _write_csv_row(writer, (heading,))


def create_remote_spreadsheet(
    title: str,
    sources: Sequence[Source],
    creator: SpreadsheetCreator,
    *,
    parse: CaseParser = extract_cases,
) -> str:
    """Create a remote spreadsheet with one sheet per source and return its id."""
    if not title:
        raise InputError("spreadsheet title cannot be empty")
    _require_sources(sources)

    spreadsheet = RemoteSpreadsheet(
        title=title,
        sheets=tuple(
            RemoteSheet(title=name, rows=rows) for name, rows in _build_named_rows(sources, parse)
        ),
    )
    try:
        return creator.create_spreadsheet(spreadsheet)
    except SheetsApiError as exc:
        raise RemoteSpreadsheetError(f"create google spreadsheet: {exc}") from exc


def _build_named_rows(
    sources: Sequence[Source], parse: CaseParser
) -> list[tuple[str, tuple[Row, ...]]]:
    registry = SheetNameRegistry()
    named_rows: list[tuple[str, tuple[Row, ...]]] = []
    for index, source in enumerate(sources):
        sheet_name = registry.claim(derive_sheet_name(source.name, index))
        cases = _parse_source(source, parse)
        named_rows.append((sheet_name, tuple(build_sheet_rows(cases))))
    return named_rows


def _parse_source(source: Source, parse: Callable[[str | bytes], Sequence]) -> Sequence:
    try:
        parsed = parse(source.content)
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(source.name, exc) from exc
    logger.debug("Parsed %d entries from %s", len(parsed), source.name or "<unnamed>")
    return parsed


def _write_csv_row(writer, row: Sequence[str]) -> None:
    try:
        writer.writerow(row)
    except (OSError, csv.Error) as exc:
        raise SerializationError(f"write csv row: {exc}") from exc


def _require_sources(sources: Sequence[Source]) -> None:
    if not sources:
        raise InputError("no sources provided")
