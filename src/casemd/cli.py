"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from casemd.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from casemd.run_execution import (
    ConversionRequest,
    ConversionRunError,
    HeadingsRequest,
    execute_conversion,
    execute_headings,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="casemd")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Convert Markdown inspection sheets into CSV files, Excel workbooks, and Google Sheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
        )


@cli.command(name="convert")
@click.option(
    "--input",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="Path to a Markdown source file (repeat for multiple files)",
)
@click.option(
    "--csv-output",
    "csv_output",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the CSV destination file",
)
@click.option(
    "--spreadsheet-output",
    "spreadsheet_output",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the spreadsheet (.xlsx) destination file",
)
@click.option(
    "--google-spreadsheet-title",
    "spreadsheet_title",
    required=False,
    help="Title for the Google Spreadsheet to create",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON configuration file",
)
def convert(
    input_paths: tuple[str, ...],
    csv_output: str | None,
    spreadsheet_output: str | None,
    spreadsheet_title: str | None,
    config_path: str | None,
) -> None:
    """Convert Markdown inspection sheets into the requested outputs."""
    if any(not path for path in input_paths):
        raise CliError("input path cannot be empty")
    try:
        outcome = execute_conversion(
            ConversionRequest(
                input_paths=input_paths,
                csv_output=csv_output,
                spreadsheet_output=spreadsheet_output,
                spreadsheet_title=spreadsheet_title,
                config_path=config_path,
            )
        )
    except ConversionRunError as exc:
        raise CliError(str(exc)) from exc
    if outcome.csv_path is not None:
        click.echo(f"CSV written to {csv_output}")
    if outcome.spreadsheet_path is not None:
        click.echo(f"Spreadsheet written to {spreadsheet_output}")
    if outcome.spreadsheet_id is not None:
        click.echo(f"Google Spreadsheet created with ID {outcome.spreadsheet_id}")


@cli.command(name="headings")
@click.option(
    "--input",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="Path to a Markdown source file (repeat for multiple files)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional CSV destination; defaults to standard output",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON configuration file",
)
def headings(
    input_paths: tuple[str, ...], output_path: str | None, config_path: str | None
) -> None:
    """List the level-1 headings of Markdown files as CSV."""
    try:
        written = execute_headings(
            HeadingsRequest(
                input_paths=input_paths, output_path=output_path, config_path=config_path
            ),
            sys.stdout,
        )
    except ConversionRunError as exc:
        raise CliError(str(exc)) from exc
    if written is not None:
        click.echo(str(written))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="casemd", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
