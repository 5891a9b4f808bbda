"""Copying walk results into another directory tree.

The files collected by a FIND walk are copied below a new base
directory, keeping their layout relative to the old base. Every
directory the walk visited is recreated, even when it held no match.
As with the walk itself, a problem with one entry is recorded in
``CopyResult.errors`` and the copy carries on.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from pathsift.core.errors import PathValidationError, RecordConstructionError
from pathsift.records.models import AugmentedFileInfo, DirectoryRecord, FileRecord
from pathsift.walker.tree import WalkMode, WalkResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CopyResult:
    """Outcome of copying a walk result to a new base directory.

    Attributes:
        base_dir: Absolute directory the copied paths were relative to.
        new_base_dir: Absolute directory the tree was copied into.
        directories: Directories created (or already present) in the new tree.
        copied_files: Records of the copies, in walk order.
        errors: Non-fatal errors collected while copying.
    """

    base_dir: str
    new_base_dir: str
    directories: list[DirectoryRecord] = field(default_factory=list)
    copied_files: list[FileRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def add_error(self, msg: str) -> None:
        """Log a non-fatal error and record it."""
        logger.warning(msg)
        self.errors.append(msg)


def _absolute_dir(path_str: str, label: str) -> str:
    if not path_str.strip():
        msg = f"{label} cannot be empty"
        raise PathValidationError(msg)
    return os.path.abspath(path_str)


def _relocate(path: str, base_dir: str, new_base_dir: str) -> Path:
    """Map a path below base_dir to the same place below new_base_dir.

    Raises:
        ValueError: If path is not below base_dir.
    """
    return Path(new_base_dir) / Path(path).relative_to(base_dir)


def copy_tree(result: WalkResult, new_base_dir: str, base_dir: str | None = None) -> CopyResult:
    """Copy the directories and found files of a walk below new_base_dir.

    Args:
        result: Result of a FIND walk.
        new_base_dir: Directory to copy into. Created if missing.
        base_dir: Directory whose layout is reproduced. Defaults to the
            walk's start directory (its parent when the walk started at
            a single file).

    Returns:
        CopyResult owned by the caller. Check ``errors`` for entries that
        could not be copied.

    Raises:
        PathValidationError: If a directory argument is empty, or the
            result comes from a DELETE walk.
    """
    if result.mode != WalkMode.FIND:
        msg = "Only the result of a find walk can be copied"
        raise PathValidationError(msg)

    if base_dir is None:
        start = result.start_path
        base_dir = start if os.path.isdir(start) else os.path.dirname(start)
    source = _absolute_dir(base_dir, "Base directory")
    target = _absolute_dir(new_base_dir, "New base directory")
    copied = CopyResult(base_dir=source, new_base_dir=target)

    try:
        Path(target).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        copied.add_error(f"Cannot create directory {target}: {e}")
        return copied

    for directory in result.directories:
        try:
            dest_dir = _relocate(directory.path, source, target)
        except ValueError:
            copied.add_error(f"Directory {directory.path} is not below {source}")
            continue
        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
            copied.directories.append(DirectoryRecord.from_path(str(dest_dir)))
        except (OSError, RecordConstructionError) as e:
            copied.add_error(f"Cannot create directory {dest_dir}: {e}")

    for record in result.found_files:
        try:
            dest = _relocate(record.absolute_path, source, target)
        except ValueError:
            copied.add_error(f"File {record.absolute_path} is not below {source}")
            continue
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(record.absolute_path, dest, follow_symlinks=False)
            owner = DirectoryRecord.from_path(str(dest.parent))
            info = AugmentedFileInfo.from_stat(owner.path, dest.name, os.lstat(dest))
            copied.copied_files.append(FileRecord.from_directory(owner, dest.name, info=info))
        except (OSError, RecordConstructionError) as e:
            copied.add_error(f"Cannot copy {record.absolute_path} to {dest}: {e}")
            continue
        logger.debug("Copied %s to %s", record.absolute_path, dest)

    return copied
