"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from casemd.remote_sheets import DEFAULT_SHEETS_ENDPOINT

from .runtime_settings import (
    ACCESS_TOKEN_ENV_VAR,
    Configuration,
    OutputSettings,
    RemoteSheetsSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(
    config_path: Path | str | None = None, *, environ: Mapping[str, str] | None = None
) -> Configuration:
    """Load and validate the configuration file.

    Without a path, defaults are used. The ``GOOGLE_SHEETS_ACCESS_TOKEN``
    environment variable takes precedence over a token from the file.
    """
    environ = os.environ if environ is None else environ
    if config_path is None:
        parsed: Mapping[str, Any] = {}
        path = None
    else:
        path = Path(config_path)
        parsed = _read_mapping(path)

    google_sheets = _parse_google_sheets_section(parsed.get("google_sheets"), environ)
    output = _parse_output_section(parsed.get("output"))
    return Configuration(path=path, google_sheets=google_sheets, output=output)


def _read_mapping(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _parse_google_sheets_section(value: Any, environ: Mapping[str, str]) -> RemoteSheetsSettings:
    section = _optional_mapping(value, "google_sheets")
    endpoint = _optional_string(section.get("endpoint"), "google_sheets.endpoint")
    access_token = _optional_string(section.get("access_token"), "google_sheets.access_token")
    env_token = environ.get(ACCESS_TOKEN_ENV_VAR, "").strip()
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "google_sheets.timeout_seconds"
    )
    return RemoteSheetsSettings(
        endpoint=endpoint or DEFAULT_SHEETS_ENDPOINT,
        access_token=env_token or access_token,
        timeout_seconds=timeout_seconds,
    )


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    create_parent_directories = section.get("create_parent_directories", True)
    if not isinstance(create_parent_directories, bool):
        raise ConfigurationError("output.create_parent_directories must be a boolean.")
    return OutputSettings(create_parent_directories=create_parent_directories)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == "<OPTIONAL>":
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
