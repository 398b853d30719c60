"""Worksheet name derivation and uniqueness."""

from __future__ import annotations

import re

MAX_SHEET_NAME_LENGTH = 31

INVALID_SHEET_NAME_CHARS = re.compile(r"[*:?\[\]/\\]")
# Undecodable bytes in file names arrive as lone surrogates.
SURROGATE_CHARS = re.compile("[\ud800-\udfff]")
PATH_SEPARATORS = re.compile(r"[\\/]")


def derive_sheet_name(source_name: str, index: int) -> str:
    """Derive a spreadsheet-legal base name for the source at ``index``."""
    fallback = f"Sheet{index + 1}"
    if not source_name:
        return fallback

    base = PATH_SEPARATORS.split(source_name.rstrip("/\\"))[-1]
    extension_start = base.rfind(".")
    if extension_start >= 0:
        base = base[:extension_start]

    return sanitize_sheet_name(base) or fallback


def sanitize_sheet_name(name: str) -> str:
    """Replace forbidden characters, trim spaces and cap the length."""
    cleaned = INVALID_SHEET_NAME_CHARS.sub("_", SURROGATE_CHARS.sub("_", name)).strip(" ")
    return cleaned[:MAX_SHEET_NAME_LENGTH]


class SheetNameRegistry:
    """Hands out unique sheet names within one workbook.

    Usage counts per base drive the numeric suffix; the finalized set is what
    collisions are checked against. A base that is itself taken as a suffixed
    name by another source (``alpha_2``) is still detected.
    """

    def __init__(self) -> None:
        self._usage: dict[str, int] = {}
        self._finalized: set[str] = set()

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._finalized)

    def claim(self, base: str) -> str:
        count = self._usage.get(base, 0)
        if base not in self._finalized:
            self._usage[base] = max(count, 1)
            self._finalized.add(base)
            return base

        while True:
            count += 1
            candidate = _with_suffix(base, count)
            if candidate in self._finalized:
                continue
            self._usage[base] = count
            self._finalized.add(candidate)
            return candidate


def _with_suffix(base: str, count: int) -> str:
    suffix = f"_{count}"
    max_base_length = max(MAX_SHEET_NAME_LENGTH - len(suffix), 1)
    return base[:max_base_length] + suffix
