"""Word counter CLI: count words in a text file and write an XHTML table.

Examples:
  - Prompt for both file names: wordcounter
  - Non-interactive: wordcounter notes.txt notes --output-dir reports
  - Also print the table: wordcounter notes.txt notes --print
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

import typer

from common.cli_helpers import setup_logging
from common.exceptions import FileOperationError, ValidationError
from wordcounter.config import load_settings, validate_output_dir
from wordcounter.pipeline import count_file, write_result

app = typer.Typer(help="Count words in a text file and write an HTML report.")
logger = logging.getLogger(__name__)


@app.command()
def main(
    input_file: Optional[str] = typer.Argument(None, help="Text file to read"),
    output_file: Optional[str] = typer.Argument(
        None, help="Report name; .html and the output directory are added if missing"
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", help="Directory prefix for the report (default: data)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging verbosity (default: INFO)"
    ),
    print_table: bool = typer.Option(
        False, "--print", help="Also print word<TAB>count lines in report order"
    ),
) -> None:
    """Count the words in INPUT_FILE and write a sorted word/count table."""
    try:
        settings = load_settings()
        overrides = {}
        if output_dir is not None:
            overrides["output_dir"] = validate_output_dir(output_dir, "--output-dir")
        if log_level is not None:
            overrides["log_level"] = log_level
        settings = dataclasses.replace(settings, **overrides)
        setup_logging(settings.log_level)
    except ValidationError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=2)

    if input_file is None:
        input_file = typer.prompt("Please enter the name of the input file")
    if output_file is None:
        output_file = typer.prompt("Please enter the name of the output file")

    try:
        result = count_file(input_file, encoding=settings.input_encoding)
    except FileOperationError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=2)
    try:
        target = write_result(result, output_file, input_file, settings)
    except FileOperationError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=1)

    if print_table:
        for word in result.words:
            typer.echo(f"{word}\t{result.counts[word]}")
    typer.echo(f"Saved word counts to {target}")


if __name__ == "__main__":
    app()
