"""Directory and file records.

This module exports the immutable value types used to describe
directories and files visited during a tree walk.
"""

from pathsift.records.models import AugmentedFileInfo, DirectoryRecord, FileRecord

__all__ = [
    "AugmentedFileInfo",
    "DirectoryRecord",
    "FileRecord",
]
