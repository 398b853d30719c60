"""Conversion run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for executing one conversion run."""

    input_paths: tuple[str, ...]
    csv_output: str | None = None
    spreadsheet_output: str | None = None
    spreadsheet_title: str | None = None
    config_path: str | None = None


@dataclass(frozen=True)
class ConversionOutcome:
    """Output contract for one completed conversion run."""

    csv_path: Path | None = None
    spreadsheet_path: Path | None = None
    spreadsheet_id: str | None = None


@dataclass(frozen=True)
class HeadingsRequest:
    """Input contract for the headings listing mode."""

    input_paths: tuple[str, ...]
    output_path: str | None = None
    config_path: str | None = None
