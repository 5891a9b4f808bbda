"""Copy command implementation.

Copies files matching selection criteria into another directory,
keeping their layout relative to the start directory.
"""

from typing import Annotated

import typer

from pathsift.cli.display import print_copy_result
from pathsift.cli.types import (
    AnyOption,
    FormatOption,
    ModeOption,
    NewerThanDaysOption,
    OlderThanDaysOption,
    OutputFormat,
    PatternOption,
    StartPathArgument,
    build_criteria,
    is_quiet,
)
from pathsift.core.errors import PathsiftError
from pathsift.utils.formatting import print_error
from pathsift.walker.copy import copy_tree
from pathsift.walker.tree import find_files


def copy_command(
    ctx: typer.Context,
    start_path: StartPathArgument,
    dest_dir: Annotated[
        str,
        typer.Argument(help="Directory to copy the matching files into."),
    ],
    patterns: PatternOption = None,
    older_than_days: OlderThanDaysOption = None,
    newer_than_days: NewerThanDaysOption = None,
    mode: ModeOption = None,
    any_match: AnyOption = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Copy files matching the selection criteria into another directory."""
    criteria = build_criteria(patterns, older_than_days, newer_than_days, mode, any_match)

    try:
        found = find_files(start_path, criteria)
        result = copy_tree(found, dest_dir)
    except PathsiftError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_copy_result(result, output_format, walk_errors=found.errors, quiet=is_quiet(ctx))

    if found.has_errors or result.has_errors:
        raise typer.Exit(code=1)
