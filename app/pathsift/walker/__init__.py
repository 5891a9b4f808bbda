"""Directory tree walking.

Finds or deletes files matching a FileSelectionCriteria, collecting
per-entry errors instead of aborting. Found files can be copied into
another tree.
"""

from pathsift.walker.copy import CopyResult, copy_tree
from pathsift.walker.tree import (
    EnteredDirectory,
    VisitedFile,
    WalkEvent,
    WalkFailure,
    WalkMode,
    WalkResult,
    delete_files,
    find_files,
    fold_events,
    iter_walk,
    walk,
)

__all__ = [
    "CopyResult",
    "EnteredDirectory",
    "VisitedFile",
    "WalkEvent",
    "WalkFailure",
    "WalkMode",
    "WalkResult",
    "copy_tree",
    "delete_files",
    "find_files",
    "fold_events",
    "iter_walk",
    "walk",
]
