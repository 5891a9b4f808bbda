"""Find command implementation.

Lists files below a start directory that match selection criteria.
"""

import typer

from pathsift.cli.display import print_walk_result
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
from pathsift.walker.tree import find_files


def find_command(
    ctx: typer.Context,
    start_path: StartPathArgument,
    patterns: PatternOption = None,
    older_than_days: OlderThanDaysOption = None,
    newer_than_days: NewerThanDaysOption = None,
    mode: ModeOption = None,
    any_match: AnyOption = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Find files matching the selection criteria."""
    criteria = build_criteria(patterns, older_than_days, newer_than_days, mode, any_match)

    try:
        result = find_files(start_path, criteria)
    except PathsiftError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_walk_result(result, output_format, quiet=is_quiet(ctx))

    if result.has_errors:
        raise typer.Exit(code=1)
