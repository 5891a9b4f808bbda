"""Classify command implementation.

Reports whether a path string denotes a directory or a file.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.table import Table

from pathsift.cli.types import FormatOption, OutputFormat
from pathsift.core.errors import PathValidationError
from pathsift.paths.classifier import Classification, PathKind, classify_path
from pathsift.utils.formatting import console, format_kind, print_error


class ExpectedKind(str, Enum):
    """Kind the user asks about."""

    DIRECTORY = "directory"
    FILE = "file"


def classify_command(
    paths: Annotated[list[str], typer.Argument(help="Path strings to classify.")],
    expected: Annotated[
        ExpectedKind,
        typer.Option("--as", "-a", help="Kind to test the paths against.", case_sensitive=False),
    ] = ExpectedKind.DIRECTORY,
    lexical: Annotated[
        bool,
        typer.Option("--lexical", "-l", help="Skip the filesystem lookup."),
    ] = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Classify path strings as directory, file, ambiguous or not a path."""
    results: list[Classification] = []
    failed = False
    for path in paths:
        try:
            results.append(
                classify_path(
                    path,
                    expected=PathKind(expected.value),
                    probe_filesystem=not lexical,
                )
            )
        except PathValidationError as e:
            print_error(str(e))
            failed = True

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([_to_dict(r) for r in results]))
    elif results:
        console.print(_create_table(results, expected))

    if failed:
        raise typer.Exit(code=1)


def _to_dict(result: Classification) -> dict[str, object]:
    return {
        "path": result.tested_path,
        "kind": result.kind.value,
        "expected": result.expected.value,
        "matched": result.matched,
        "exists": result.exists,
        "best_guess_is_directory": result.best_guess_is_directory,
    }


def _create_table(results: list[Classification], expected: ExpectedKind) -> Table:
    table = Table(
        title="Path Classification",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="text", no_wrap=True)
    table.add_column("Kind")
    table.add_column(f"Is {expected.value}", justify="center")
    table.add_column("Best guess", style="muted")
    table.add_column("Exists", justify="center")

    for result in results:
        if result.matched is None:
            matched = "[warning]?[/]"
        else:
            matched = "[success]yes[/]" if result.matched else "[muted]no[/]"
        guess = "-"
        if result.best_guess_is_directory is not None:
            guess = "directory" if result.best_guess_is_directory else "file"
        exists = "[success]yes[/]" if result.exists else "[muted]no[/]"
        table.add_row(result.tested_path, format_kind(result), matched, guess, exists)

    return table
