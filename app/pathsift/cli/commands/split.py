"""Split command implementation.

Breaks a path string into its directory, name and extension parts.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from pathsift.cli.types import FormatOption, OutputFormat
from pathsift.core.errors import PathValidationError
from pathsift.paths.split import split_extension, split_path
from pathsift.utils.formatting import console, print_error


def split_command(
    path: Annotated[str, typer.Argument(help="Path string to split.")],
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Split a path string into directory, file name and extension."""
    try:
        directory, name_ext = split_path(path)
    except PathValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    base_name, extension = split_extension(name_ext) if name_ext else ("", "")
    parts = {
        "directory": directory,
        "name_ext": name_ext,
        "name": base_name,
        "extension": extension,
    }

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(parts))
        return

    table = Table(show_header=False, border_style="border")
    table.add_column("Part", style="bold_header")
    table.add_column("Value", style="text")
    table.add_row("Directory", directory or "[muted]-[/]")
    table.add_row("File", name_ext or "[muted]-[/]")
    table.add_row("Name", base_name or "[muted]-[/]")
    table.add_row("Extension", extension or "[muted]-[/]")
    console.print(table)
