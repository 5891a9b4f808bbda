"""Exception hierarchy for pathsift.

Input-validation problems raise synchronously. Per-entry problems found
while walking a tree are never raised; the walker turns them into strings
on the walk result instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathsift.records.models import DirectoryRecord


class PathsiftError(Exception):
    """Base exception for all pathsift errors."""


class PathValidationError(PathsiftError, ValueError):
    """Raised when a path string is empty or lexically invalid."""


class StartPathNotFoundError(PathsiftError):
    """Raised when a tree walk is started on a path that does not exist."""

    def __init__(self, start_path: str) -> None:
        super().__init__(f"Start path does not exist: {start_path}")
        self.start_path = start_path


class RecordConstructionError(PathsiftError):
    """Raised when a directory or file record cannot be fully built.

    Attributes:
        partial: The record as far as it could be built, or None when
            construction failed before anything usable existed.
    """

    def __init__(self, message: str, partial: DirectoryRecord | None = None) -> None:
        super().__init__(message)
        self.partial = partial
