"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "casemd.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for casemd.
# Every setting is optional; delete the ones you do not need.

google_sheets:
  # Sheets API endpoint used by convert --google-spreadsheet-title.
  endpoint: "https://sheets.googleapis.com/v4/spreadsheets"
  # OAuth token with the spreadsheets scope.
  # The GOOGLE_SHEETS_ACCESS_TOKEN environment variable overrides this value.
  access_token: "<OPTIONAL>"
  timeout_seconds: 30

output:
  # Create missing parent directories of --csv-output / --spreadsheet-output.
  create_parent_directories: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
