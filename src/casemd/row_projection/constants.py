"""Shared row layout constants."""

from __future__ import annotations

CASE_COLUMNS: tuple[str, ...] = (
    "Major Item",
    "Medium Item",
    "Minor Item",
    "Validation Steps",
    "Checkpoints",
)
REVIEW_COLUMNS: tuple[str, ...] = ("Result", "Test Date", "Tester", "Notes")

SPREADSHEET_HEADERS: tuple[str, ...] = CASE_COLUMNS + REVIEW_COLUMNS
HEADINGS_HEADERS: tuple[str, ...] = ("Heading",)
