"""Shared Rich display functions for walk results.

Used by the find, delete, copy and run commands.
"""

import json
from typing import Any

from pathsift.cli.types import OutputFormat
from pathsift.records.models import FileRecord
from pathsift.utils.formatting import (
    console,
    create_file_table,
    format_file_row,
    print_info,
    print_success,
    print_warning,
)
from pathsift.walker.copy import CopyResult
from pathsift.walker.tree import WalkMode, WalkResult


def file_record_to_dict(record: FileRecord) -> dict[str, Any]:
    """Convert a file record to a JSON-serializable dictionary."""
    info = record.info
    return {
        "path": record.absolute_path,
        "directory": record.directory.path,
        "name": record.base_name,
        "extension": record.extension,
        "exists": record.exists,
        "size": info.size if info else None,
        "mode": f"{info.permissions:04o}" if info else None,
        "modified": info.mod_time.isoformat() if info else None,
    }


def walk_result_to_dict(result: WalkResult) -> dict[str, Any]:
    """Convert a walk result to a JSON-serializable dictionary."""
    return {
        "start_path": result.start_path,
        "mode": result.mode.value,
        "criteria": result.criteria.describe(),
        "directories": [d.path for d in result.directories],
        "files": [file_record_to_dict(f) for f in result.files],
        "errors": list(result.errors),
    }


def print_walk_result(
    result: WalkResult,
    output_format: OutputFormat = OutputFormat.TABLE,
    *,
    title: str | None = None,
    quiet: bool = False,
) -> None:
    """Display the files of a walk result, followed by a summary.

    Args:
        result: Result to display.
        output_format: Table or JSON.
        title: Table title. Defaults to one derived from the walk mode.
        quiet: Suppress the summary lines.
    """
    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(walk_result_to_dict(result)))
        return

    files = result.files
    if files:
        if title is None:
            title = "Deleted Files" if result.mode == WalkMode.DELETE else "Matching Files"
        table = create_file_table(title)
        for record in files:
            table.add_row(*format_file_row(record))
        console.print(table)

    for error in result.errors:
        print_warning(error)

    if quiet:
        return

    console.print(f"[dim]Criteria: {result.criteria.describe()}[/dim]")
    verb = "Deleted" if result.mode == WalkMode.DELETE else "Found"
    summary = (
        f"{verb} {len(files)} file(s) in {len(result.directories)} director(ies) "
        f"under {result.start_path}"
    )
    if result.has_errors:
        print_warning(f"{summary}, {len(result.errors)} error(s)")
    elif files:
        print_success(summary)
    else:
        print_info(summary)


def copy_result_to_dict(result: CopyResult, walk_errors: list[str] | None = None) -> dict[str, Any]:
    """Convert a copy result to a JSON-serializable dictionary."""
    return {
        "base_dir": result.base_dir,
        "new_base_dir": result.new_base_dir,
        "directories": [d.path for d in result.directories],
        "files": [file_record_to_dict(f) for f in result.copied_files],
        "errors": list(walk_errors or []) + list(result.errors),
    }


def print_copy_result(
    result: CopyResult,
    output_format: OutputFormat = OutputFormat.TABLE,
    *,
    walk_errors: list[str] | None = None,
    quiet: bool = False,
) -> None:
    """Display the copied files, followed by a summary.

    Args:
        result: Result to display.
        output_format: Table or JSON.
        walk_errors: Errors from the walk that selected the files.
        quiet: Suppress the summary line.
    """
    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(copy_result_to_dict(result, walk_errors)))
        return

    if result.copied_files:
        table = create_file_table("Copied Files")
        for record in result.copied_files:
            table.add_row(*format_file_row(record))
        console.print(table)

    errors = list(walk_errors or []) + result.errors
    for error in errors:
        print_warning(error)

    if quiet:
        return

    summary = (
        f"Copied {len(result.copied_files)} file(s) into {len(result.directories)} "
        f"director(ies) under {result.new_base_dir}"
    )
    if errors:
        print_warning(f"{summary}, {len(errors)} error(s)")
    elif result.copied_files:
        print_success(summary)
    else:
        print_info(summary)
