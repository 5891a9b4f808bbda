"""Delete command implementation.

Deletes files below a start directory that match selection criteria.
Matching files are listed first and the deletion must be confirmed
unless --yes is given.
"""

from typing import Annotated

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
from pathsift.utils.formatting import print_error, print_info
from pathsift.walker.tree import delete_files, find_files


def delete_command(
    ctx: typer.Context,
    start_path: StartPathArgument,
    patterns: PatternOption = None,
    older_than_days: OlderThanDaysOption = None,
    newer_than_days: NewerThanDaysOption = None,
    mode: ModeOption = None,
    any_match: AnyOption = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Delete files matching the selection criteria."""
    criteria = build_criteria(patterns, older_than_days, newer_than_days, mode, any_match)
    quiet = is_quiet(ctx)

    if dry_run or not yes:
        try:
            plan = find_files(start_path, criteria)
        except PathsiftError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

        title = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
        print_walk_result(plan, output_format, title=title, quiet=quiet)

        if dry_run:
            if plan.has_errors:
                raise typer.Exit(code=1)
            return

        if not plan.files:
            print_info("Nothing to delete.")
            return

        confirmed = typer.confirm(
            f"\nProceed with deleting {len(plan.files)} file(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        result = delete_files(start_path, criteria)
    except PathsiftError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_walk_result(result, output_format, quiet=quiet)

    if result.has_errors:
        raise typer.Exit(code=1)
