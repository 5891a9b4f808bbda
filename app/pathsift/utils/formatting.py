"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from pathsift.core.theme import get_theme

if TYPE_CHECKING:
    from pathsift.paths.classifier import Classification
    from pathsift.records.models import FileRecord


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_file_table(title: str) -> Table:
    """Create a pre-configured table for listing file records.

    Args:
        title: Table title.

    Returns:
        Rich Table with path, size, mode and modification time columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Path", style="text", no_wrap=True)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Mode", style="muted")
    table.add_column("Modified", style="muted")
    return table


def format_file_row(record: FileRecord) -> tuple[str, str, str, str]:
    """Format a file record as a table row.

    Args:
        record: The file record to format.

    Returns:
        Tuple of (path, size, mode, modified).
    """
    info = record.info
    if info is None:
        return (record.absolute_path, "-", "-", "-")
    return (
        record.absolute_path,
        format_size(info.size),
        f"{info.permissions:04o}",
        info.mod_time.strftime("%Y-%m-%d %H:%M:%S"),
    )


def format_kind(classification: Classification) -> str:
    """Format a classification's kind with color markup."""
    kind = classification.kind.value
    return f"[kind.{kind}]{kind.replace('_', ' ')}[/]"


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
