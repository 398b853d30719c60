"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from casemd.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template for casemd" in scaffold
    assert "google_sheets:" in scaffold
    assert "endpoint:" in scaffold
    assert "access_token:" in scaffold
    assert "timeout_seconds:" in scaffold
    assert "output:" in scaffold
    assert "create_parent_directories:" in scaffold
    assert "<OPTIONAL>" in scaffold
    assert "GOOGLE_SHEETS_ACCESS_TOKEN" in scaffold


def test_placeholder_configuration_is_valid_yaml() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert set(parsed) == {"google_sheets", "output"}
    assert parsed["google_sheets"]["timeout_seconds"] == 30
    assert parsed["output"]["create_parent_directories"] is True


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "casemd.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<OPTIONAL>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "casemd.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
