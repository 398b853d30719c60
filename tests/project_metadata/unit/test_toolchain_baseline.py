"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_project_uses_uv_style_metadata_without_poetry() -> None:
    pyproject = _pyproject()
    dev_dependencies = pyproject["dependency-groups"]["dev"]

    assert "black" not in dev_dependencies
    assert "black" not in pyproject["tool"]
    assert "poetry" not in pyproject["tool"]
    assert pyproject["build-system"]["build-backend"] != "poetry.core.masonry.api"


def test_console_script_points_at_cli_main() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["scripts"]["casemd"] == "casemd.cli:main"


def test_readme_documents_every_command_and_the_token_variable() -> None:
    readme = (_project_root() / "README.md").read_text(encoding="utf-8")

    for text in (
        "casemd convert",
        "casemd headings",
        "casemd generate-config",
        "--csv-output",
        "--spreadsheet-output",
        "--google-spreadsheet-title",
        "GOOGLE_SHEETS_ACCESS_TOKEN",
    ):
        assert text in readme
