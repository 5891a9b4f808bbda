"""Shared types and option helpers for CLI commands.

The selection options are shared by ``find``, ``delete`` and ``copy``; they are
validated through the same CriteriaConfig model the job file uses.
"""

from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError

from pathsift.selection.config import CriteriaConfig
from pathsift.selection.criteria import FileSelectionCriteria
from pathsift.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


StartPathArgument = Annotated[
    str,
    typer.Argument(help="Directory to start walking from."),
]
PatternOption = Annotated[
    list[str] | None,
    typer.Option("--pattern", "-p", help="Glob pattern for file names. Repeatable."),
]
OlderThanDaysOption = Annotated[
    float | None,
    typer.Option("--older-than-days", min=0, help="Select files modified more than N days ago (0 disables)."),
]
NewerThanDaysOption = Annotated[
    float | None,
    typer.Option("--newer-than-days", min=0, help="Select files modified less than N days ago (0 disables)."),
]
ModeOption = Annotated[
    str | None,
    typer.Option("--mode", "-m", help="Select files with this exact mode (octal, e.g. 0644)."),
]
AnyOption = Annotated[
    bool,
    typer.Option("--any", help="Select files matching any criterion instead of all."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]


def build_criteria(
    patterns: list[str] | None,
    older_than_days: float | None,
    newer_than_days: float | None,
    mode: str | None,
    any_match: bool,
) -> FileSelectionCriteria:
    """Build selection criteria from command-line options.

    Exits with code 1 after printing an error if the options are invalid.
    """
    try:
        config = CriteriaConfig(
            patterns=patterns or [],
            older_than_days=older_than_days,
            newer_than_days=newer_than_days,
            file_mode=mode,
            combine="or" if any_match else "and",
        )
    except ValidationError as e:
        print_error(f"Invalid selection criteria: {e}")
        raise typer.Exit(code=1) from e
    return config.to_criteria()


def is_quiet(ctx: typer.Context) -> bool:
    """Return True if the global --quiet flag was given."""
    return bool(ctx.obj and ctx.obj.get("quiet"))
