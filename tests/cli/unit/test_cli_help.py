"""CLI smoke tests."""

from casemd.cli import cli
from click.testing import CliRunner


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "headings" in result.output
    assert "generate-config" in result.output


def test_convert_help_lists_output_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "--help"])

    assert result.exit_code == 0
    for option in ("--input", "--csv-output", "--spreadsheet-output", "--google-spreadsheet-title"):
        assert option in result.output
