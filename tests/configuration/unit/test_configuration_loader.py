"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from casemd.configuration.loader import ConfigurationError, load_configuration
from casemd.remote_sheets import DEFAULT_SHEETS_ENDPOINT


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_defaults_without_configuration_file() -> None:
    configuration = load_configuration(environ={})

    assert configuration.path is None
    assert configuration.google_sheets.endpoint == DEFAULT_SHEETS_ENDPOINT
    assert configuration.google_sheets.access_token is None
    assert configuration.google_sheets.timeout_seconds == 30
    assert configuration.output.create_parent_directories is True


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "casemd.yaml",
        """
google_sheets:
  endpoint: "http://localhost:8089/v4/spreadsheets"
  access_token: "file-token"
  timeout_seconds: 5
output:
  create_parent_directories: false
""",
    )

    configuration = load_configuration(config_path, environ={})

    assert configuration.path == config_path
    assert configuration.google_sheets.endpoint == "http://localhost:8089/v4/spreadsheets"
    assert configuration.google_sheets.access_token == "file-token"
    assert configuration.google_sheets.timeout_seconds == 5
    assert configuration.output.create_parent_directories is False


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "casemd.json",
        json.dumps({"google_sheets": {"timeout_seconds": 12}}),
    )

    configuration = load_configuration(config_path, environ={})

    assert configuration.google_sheets.timeout_seconds == 12
    assert configuration.google_sheets.endpoint == DEFAULT_SHEETS_ENDPOINT


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "casemd.yaml", "")

    configuration = load_configuration(config_path, environ={})

    assert configuration.output.create_parent_directories is True


def test_environment_token_overrides_file_token(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "casemd.yaml", "google_sheets:\n  access_token: file-token\n"
    )

    configuration = load_configuration(
        config_path, environ={"GOOGLE_SHEETS_ACCESS_TOKEN": " env-token "}
    )

    assert configuration.google_sheets.access_token == "env-token"


def test_environment_token_applies_without_file() -> None:
    configuration = load_configuration(environ={"GOOGLE_SHEETS_ACCESS_TOKEN": "env-token"})

    assert configuration.google_sheets.access_token == "env-token"


def test_optional_placeholder_token_is_treated_as_missing(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "casemd.yaml", 'google_sheets:\n  access_token: "<OPTIONAL>"\n'
    )

    configuration = load_configuration(config_path, environ={})

    assert configuration.google_sheets.access_token is None


def test_access_token_is_hidden_from_repr(tmp_path: Path) -> None:
    configuration = load_configuration(environ={"GOOGLE_SHEETS_ACCESS_TOKEN": "secret-value"})

    assert "secret-value" not in repr(configuration)


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml", environ={})


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "casemd.yaml", "google_sheets: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path, environ={})


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "casemd.yaml", "- one\n- two\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path, environ={})


def test_non_mapping_section_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "casemd.yaml", "google_sheets: enabled\n")

    with pytest.raises(ConfigurationError, match="'google_sheets' must be a mapping"):
        load_configuration(config_path, environ={})


@pytest.mark.parametrize("timeout", ["0", "-5", "true", '"thirty"', "1.5"])
def test_invalid_timeout_is_rejected(tmp_path: Path, timeout: str) -> None:
    config_path = _write_file(
        tmp_path / "casemd.yaml", f"google_sheets:\n  timeout_seconds: {timeout}\n"
    )

    with pytest.raises(ConfigurationError, match="google_sheets.timeout_seconds"):
        load_configuration(config_path, environ={})


def test_non_string_endpoint_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "casemd.yaml", "google_sheets:\n  endpoint: 42\n")

    with pytest.raises(ConfigurationError, match="google_sheets.endpoint must be a string"):
        load_configuration(config_path, environ={})


def test_non_boolean_parent_directory_flag_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "casemd.yaml", "output:\n  create_parent_directories: yes please\n"
    )

    with pytest.raises(ConfigurationError, match="must be a boolean"):
        load_configuration(config_path, environ={})
