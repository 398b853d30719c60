"""Minimal SpreadsheetML workbook serializer."""

from __future__ import annotations

import io
import re
import zipfile
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import BinaryIO

from .package_parts import (
    APP_PROPERTIES,
    APP_PROPERTIES_PART,
    CONTENT_TYPES_NS,
    CONTENT_TYPES_PART,
    CORE_PROPERTIES,
    CORE_PROPERTIES_PART,
    OFFICE_RELATIONSHIPS_NS,
    PACKAGE_RELATIONSHIPS_NS,
    RELATIONSHIPS_CONTENT_TYPE,
    ROOT_RELATIONSHIPS,
    ROOT_RELATIONSHIPS_PART,
    SPREADSHEET_MAIN_NS,
    WORKBOOK_CONTENT_TYPE,
    WORKBOOK_PART,
    WORKBOOK_RELATIONSHIPS_PART,
    WORKSHEET_CONTENT_TYPE,
    WORKSHEET_PART_TEMPLATE,
    WORKSHEET_RELATIONSHIP_TYPE,
    XML_CONTENT_TYPE,
    XML_DECLARATION,
)
from .sheet_naming import INVALID_SHEET_NAME_CHARS, MAX_SHEET_NAME_LENGTH

COLUMN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
REPLACEMENT_CHARACTER = "\ufffd"

# Characters XML 1.0 cannot carry at all, even as character references.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_TEXT_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}
)
_ATTRIBUTE_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&apos;"}
)


class WorkbookValidationError(ValueError):
    """Raised when sheets cannot form a valid workbook."""


@dataclass(frozen=True)
class Sheet:
    """Named worksheet; ``rows[0]`` is the header row."""

    name: str
    rows: tuple[tuple[str, ...], ...]


def serialize_workbook(sheets: Sequence[Sheet]) -> bytes:
    """Return the workbook container for ``sheets`` as bytes."""
    buffer = io.BytesIO()
    write_workbook(buffer, sheets)
    return buffer.getvalue()


def write_workbook(output: BinaryIO, sheets: Sequence[Sheet]) -> None:
    """Write ``sheets`` as an xlsx zip container to ``output``.

    Args:
      output: Writable binary stream; it does not need to be seekable.
      sheets: Worksheets in tab order.

    Raises:
      WorkbookValidationError: If ``sheets`` is empty or a name is unusable.
      OSError: If writing to ``output`` fails. The stream content is then
        incomplete and must be discarded by the caller.
    """
    _validate_sheets(sheets)
    with zipfile.ZipFile(output, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for part_name, content in iter_package_parts(sheets):
            archive.writestr(part_name, content.encode("utf-8"))


def iter_package_parts(sheets: Sequence[Sheet]) -> Iterator[tuple[str, str]]:
    """Yield ``(part name, XML text)`` for every part of the package."""
    yield CONTENT_TYPES_PART, build_content_types(len(sheets))
    yield ROOT_RELATIONSHIPS_PART, ROOT_RELATIONSHIPS
    yield APP_PROPERTIES_PART, APP_PROPERTIES
    yield CORE_PROPERTIES_PART, CORE_PROPERTIES
    yield WORKBOOK_PART, build_workbook_xml(sheets)
    yield WORKBOOK_RELATIONSHIPS_PART, build_workbook_relationships(len(sheets))
    for number, sheet in enumerate(sheets, start=1):
        yield WORKSHEET_PART_TEMPLATE.format(number=number), build_worksheet_xml(sheet.rows)


def build_content_types(sheet_count: int) -> str:
    parts = [
        XML_DECLARATION,
        f'<Types xmlns="{CONTENT_TYPES_NS}">',
        f'<Default Extension="rels" ContentType="{RELATIONSHIPS_CONTENT_TYPE}"/>',
        f'<Default Extension="xml" ContentType="{XML_CONTENT_TYPE}"/>',
        f'<Override PartName="/{WORKBOOK_PART}" ContentType="{WORKBOOK_CONTENT_TYPE}"/>',
    ]
    for number in range(1, sheet_count + 1):
        part_name = WORKSHEET_PART_TEMPLATE.format(number=number)
        parts.append(
            f'<Override PartName="/{part_name}" ContentType="{WORKSHEET_CONTENT_TYPE}"/>'
        )
    parts.append("</Types>")
    return "".join(parts)


def build_workbook_xml(sheets: Sequence[Sheet]) -> str:
    parts = [
        XML_DECLARATION,
        f'<workbook xmlns="{SPREADSHEET_MAIN_NS}" xmlns:r="{OFFICE_RELATIONSHIPS_NS}">',
        "<sheets>",
    ]
    for number, sheet in enumerate(sheets, start=1):
        parts.append(
            f'<sheet name="{escape_attribute(sheet.name)}" sheetId="{number}" r:id="rId{number}"/>'
        )
    parts.append("</sheets></workbook>")
    return "".join(parts)


def build_workbook_relationships(sheet_count: int) -> str:
    parts = [XML_DECLARATION, f'<Relationships xmlns="{PACKAGE_RELATIONSHIPS_NS}">']
    for number in range(1, sheet_count + 1):
        parts.append(
            f'<Relationship Id="rId{number}" Type="{WORKSHEET_RELATIONSHIP_TYPE}" '
            f'Target="worksheets/sheet{number}.xml"/>'
        )
    parts.append("</Relationships>")
    return "".join(parts)


def build_worksheet_xml(rows: Sequence[Sequence[str]]) -> str:
    parts = [XML_DECLARATION, f'<worksheet xmlns="{SPREADSHEET_MAIN_NS}">']
    if rows and rows[0]:
        parts.append(f'<dimension ref="A1:{column_name(len(rows[0]))}{len(rows)}"/>')

    parts.append("<sheetData>")
    for row_number, row in enumerate(rows, start=1):
        parts.append(f'<row r="{row_number}">')
        for column_number, value in enumerate(row, start=1):
            reference = f"{column_name(column_number)}{row_number}"
            if value == "":
                parts.append(f'<c r="{reference}"/>')
                continue
            parts.append(
                f'<c r="{reference}" t="inlineStr"><is><t>{escape_cell_text(value)}</t></is></c>'
            )
        parts.append("</row>")
    parts.append("</sheetData></worksheet>")
    return "".join(parts)


def column_name(index: int) -> str:
    """Return spreadsheet column letters for a 1-based column index."""
    if index <= 0:
        return "A"
    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = COLUMN_LETTERS[remainder] + letters
    return letters


def escape_cell_text(value: str) -> str:
    """Escape cell text; line breaks become character references."""
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHARACTER, value).translate(_TEXT_ESCAPES)


def escape_attribute(value: str) -> str:
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHARACTER, value).translate(_ATTRIBUTE_ESCAPES)


def _validate_sheets(sheets: Sequence[Sheet]) -> None:
    if not sheets:
        raise WorkbookValidationError("Workbook requires at least one sheet.")
    seen: set[str] = set()
    for sheet in sheets:
        if not sheet.name or len(sheet.name) > MAX_SHEET_NAME_LENGTH:
            raise WorkbookValidationError(
                f"Sheet name must be 1-{MAX_SHEET_NAME_LENGTH} characters: {sheet.name!r}"
            )
        if INVALID_SHEET_NAME_CHARS.search(sheet.name):
            raise WorkbookValidationError(f"Sheet name contains invalid characters: {sheet.name!r}")
        if sheet.name in seen:
            raise WorkbookValidationError(f"Duplicate sheet name: {sheet.name!r}")
        seen.add(sheet.name)
