"""Conversion run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import TextIO

from casemd.case_extraction import Source
from casemd.configuration import (
    ACCESS_TOKEN_ENV_VAR,
    Configuration,
    ConfigurationError,
    RemoteSheetsSettings,
    load_configuration,
)
from casemd.conversion import (
    ConversionError,
    convert_headings,
    convert_to_csv,
    convert_to_workbook,
    create_remote_spreadsheet,
)
from casemd.remote_sheets import GoogleSheetsClient, SpreadsheetCreator

from .run_contracts import ConversionOutcome, ConversionRequest, HeadingsRequest

SpreadsheetCreatorFactory = Callable[[RemoteSheetsSettings], SpreadsheetCreator]

logger = logging.getLogger(__name__)


class ConversionRunError(Exception):
    """Raised when a conversion run cannot be completed."""


def execute_conversion(
    request: ConversionRequest,
    *,
    spreadsheet_creator_factory: SpreadsheetCreatorFactory | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConversionOutcome:
    """Read the requested inputs and write every requested output."""
    if not request.input_paths:
        raise ConversionRunError("missing required option: --input")
    if not (request.csv_output or request.spreadsheet_output or request.spreadsheet_title):
        raise ConversionRunError(
            "missing required option: --csv-output, --spreadsheet-output, "
            "or --google-spreadsheet-title"
        )

    try:
        configuration = load_configuration(request.config_path, environ=environ)
    except ConfigurationError as exc:
        raise ConversionRunError(str(exc)) from exc
    sources = read_sources(request.input_paths)

    csv_path = None
    if request.csv_output:
        csv_path = _write_csv_output(request.csv_output, sources, configuration)

    spreadsheet_path = None
    if request.spreadsheet_output:
        spreadsheet_path = _write_spreadsheet_output(
            request.spreadsheet_output, sources, configuration
        )

    spreadsheet_id = None
    if request.spreadsheet_title:
        factory = spreadsheet_creator_factory or _google_sheets_client
        spreadsheet_id = _create_remote_output(
            request.spreadsheet_title, sources, configuration, factory
        )

    return ConversionOutcome(
        csv_path=csv_path,
        spreadsheet_path=spreadsheet_path,
        spreadsheet_id=spreadsheet_id,
    )


def execute_headings(
    request: HeadingsRequest, stdout: TextIO, *, environ: Mapping[str, str] | None = None
) -> Path | None:
    """List level-1 headings as CSV to ``request.output_path`` or ``stdout``."""
    if not request.input_paths:
        raise ConversionRunError("missing required option: --input")
    try:
        configuration = load_configuration(request.config_path, environ=environ)
    except ConfigurationError as exc:
        raise ConversionRunError(str(exc)) from exc
    sources = read_sources(request.input_paths)
    try:
        if request.output_path is None:
            convert_headings(sources, stdout)
            return None
        destination = Path(request.output_path)
        if configuration.output.create_parent_directories:
            _ensure_parent_directory(destination)
        with destination.open("w", encoding="utf-8", newline="") as handle:
            convert_headings(sources, handle)
    except (ConversionError, OSError) as exc:
        raise ConversionRunError(f"list headings: {exc}") from exc
    return destination.resolve()


def read_sources(input_paths: Sequence[str]) -> list[Source]:
    """Read every input file up front so a missing file fails before any output."""
    sources: list[Source] = []
    for raw_path in input_paths:
        try:
            content = Path(raw_path).read_bytes()
        except OSError as exc:
            raise ConversionRunError(f"open input file {raw_path}: {exc}") from exc
        sources.append(Source(name=raw_path, content=content))
    return sources


def _write_csv_output(
    output_path: str, sources: Sequence[Source], configuration: Configuration
) -> Path:
    destination = Path(output_path)
    try:
        if configuration.output.create_parent_directories:
            _ensure_parent_directory(destination)
        with destination.open("w", encoding="utf-8", newline="") as handle:
            convert_to_csv(sources, handle)
    except (ConversionError, OSError) as exc:
        raise ConversionRunError(f"convert markdown to CSV: {exc}") from exc
    logger.info("CSV written to %s", destination)
    return destination.resolve()


def _write_spreadsheet_output(
    output_path: str, sources: Sequence[Source], configuration: Configuration
) -> Path:
    destination = Path(output_path)
    try:
        if configuration.output.create_parent_directories:
            _ensure_parent_directory(destination)
        with destination.open("wb") as handle:
            convert_to_workbook(sources, handle)
    except (ConversionError, OSError) as exc:
        # A truncated zip container is not a workbook.
        destination.unlink(missing_ok=True)
        raise ConversionRunError(f"convert markdown to spreadsheet: {exc}") from exc
    logger.info("Spreadsheet written to %s", destination)
    return destination.resolve()


def _create_remote_output(
    title: str,
    sources: Sequence[Source],
    configuration: Configuration,
    factory: SpreadsheetCreatorFactory,
) -> str:
    settings = configuration.google_sheets
    if not settings.access_token:
        raise ConversionRunError(
            "google spreadsheet requested but no access token is configured "
            f"(set {ACCESS_TOKEN_ENV_VAR} or google_sheets.access_token)"
        )
    try:
        creator = factory(settings)
        return create_remote_spreadsheet(title, sources, creator)
    except (ConversionError, ValueError) as exc:
        raise ConversionRunError(f"create google spreadsheet: {exc}") from exc


def _google_sheets_client(settings: RemoteSheetsSettings) -> SpreadsheetCreator:
    return GoogleSheetsClient(
        settings.access_token or "",
        endpoint=settings.endpoint,
        timeout_seconds=settings.timeout_seconds,
    )


def _ensure_parent_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
