"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from casemd.remote_sheets import DEFAULT_SHEETS_ENDPOINT

ACCESS_TOKEN_ENV_VAR = "GOOGLE_SHEETS_ACCESS_TOKEN"


@dataclass(frozen=True)
class RemoteSheetsSettings:
    """Google Sheets API connectivity configuration."""

    endpoint: str = DEFAULT_SHEETS_ENDPOINT
    access_token: str | None = field(default=None, repr=False)
    timeout_seconds: int = 30


@dataclass(frozen=True)
class OutputSettings:
    """Output file handling configuration."""

    create_parent_directories: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    google_sheets: RemoteSheetsSettings = field(default_factory=RemoteSheetsSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
