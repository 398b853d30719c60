"""Case to row projection."""

from __future__ import annotations

from collections.abc import Iterable

from casemd.case_extraction.case_models import Case

from .constants import REVIEW_COLUMNS, SPREADSHEET_HEADERS

Row = tuple[str, ...]


def project_case_row(case: Case) -> Row:
    """Project a case onto the fixed spreadsheet column layout."""
    return (
        case.major_item,
        case.medium_item,
        case.minor_item,
        "\n".join(case.validation_steps),
        "\n".join(case.checkpoints),
    ) + ("",) * len(REVIEW_COLUMNS)


def build_sheet_rows(cases: Iterable[Case]) -> list[Row]:
    """Return the header row followed by one row per case."""
    rows: list[Row] = [SPREADSHEET_HEADERS]
    rows.extend(project_case_row(case) for case in cases)
    return rows
