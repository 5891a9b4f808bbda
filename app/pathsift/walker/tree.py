"""Criteria-driven directory tree walking.

The walker visits every directory and file below a start path, applies
a FileSelectionCriteria to each file, and either collects or deletes
the matches. Problems with individual entries never stop the walk:
they are reported as WalkFailure events and end up as strings in
``WalkResult.errors``. Only a missing start path is raised.

Traversal is exposed as a finite stream of events (:func:`iter_walk`)
that :func:`fold_events` accumulates into a WalkResult. The stream is
not restartable; walking again means calling :func:`iter_walk` again.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from pathsift.core.errors import PathValidationError, RecordConstructionError, StartPathNotFoundError
from pathsift.records.models import AugmentedFileInfo, DirectoryRecord, FileRecord
from pathsift.selection.criteria import FileSelectionCriteria

logger = logging.getLogger(__name__)


class WalkMode(str, Enum):
    """What the walker does with matching files.

    Attributes:
        FIND: Collect matching files.
        DELETE: Delete matching files and collect the ones removed.
    """

    FIND = "find"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class EnteredDirectory:
    """A directory was reached.

    Attributes:
        directory: Record for the directory. On failure this is the
            partial record, or None if nothing could be built.
        error: Construction error message, None on success.
    """

    directory: DirectoryRecord | None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class VisitedFile:
    """A file was evaluated against the criteria.

    Attributes:
        file: Record for the file.
        matched: Whether the criteria selected the file.
        deleted: Whether the file was deleted (DELETE mode only).
    """

    file: FileRecord
    matched: bool
    deleted: bool = False


@dataclass(frozen=True, slots=True)
class WalkFailure:
    """A non-fatal problem with one entry.

    Attributes:
        path: Path of the entry that failed.
        message: Human-readable error description.
    """

    path: str
    message: str


WalkEvent = EnteredDirectory | VisitedFile | WalkFailure


@dataclass(slots=True)
class WalkResult:
    """Accumulated outcome of one tree walk.

    Attributes:
        start_path: Absolute start path of the walk.
        mode: Walk mode used.
        criteria: Criteria applied to files.
        directories: Directories visited, start directory first.
        found_files: Matching files (FIND mode).
        deleted_files: Files deleted (DELETE mode).
        errors: Non-fatal errors collected during the walk.
    """

    start_path: str
    mode: WalkMode
    criteria: FileSelectionCriteria
    directories: list[DirectoryRecord] = field(default_factory=list)
    found_files: list[FileRecord] = field(default_factory=list)
    deleted_files: list[FileRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def files(self) -> list[FileRecord]:
        """Found or deleted files, depending on the walk mode."""
        return self.deleted_files if self.mode == WalkMode.DELETE else self.found_files

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def apply(self, event: WalkEvent) -> None:
        """Fold a single walk event into this result."""
        if isinstance(event, EnteredDirectory):
            if event.error is not None:
                self.errors.append(event.error)
            if event.directory is not None and event.directory.is_initialized:
                self.directories.append(event.directory)
        elif isinstance(event, VisitedFile):
            if event.deleted:
                self.deleted_files.append(event.file)
            elif event.matched and self.mode == WalkMode.FIND:
                self.found_files.append(event.file)
        else:
            self.errors.append(event.message)


def iter_walk(
    start_path: str,
    criteria: FileSelectionCriteria | None = None,
    mode: WalkMode = WalkMode.FIND,
) -> Iterator[WalkEvent]:
    """Validate the start path and return the stream of walk events.

    The start path is checked immediately; the traversal itself only
    runs as the returned iterator is consumed. In DELETE mode, files
    are deleted as their events are produced.

    Args:
        start_path: Directory (or single file) to start from.
        criteria: Selection criteria. None selects every file.
        mode: FIND or DELETE.

    Returns:
        Iterator of walk events in depth-first order.

    Raises:
        PathValidationError: If start_path is empty.
        StartPathNotFoundError: If start_path does not exist.
    """
    start = _resolve_start_path(start_path)
    return _walk_events(start, criteria or FileSelectionCriteria(), mode)


def fold_events(result: WalkResult, events: Iterable[WalkEvent]) -> WalkResult:
    """Apply every event to a result and return it."""
    for event in events:
        result.apply(event)
    return result


def walk(
    start_path: str,
    criteria: FileSelectionCriteria | None = None,
    mode: WalkMode = WalkMode.FIND,
) -> WalkResult:
    """Walk a directory tree, finding or deleting files that match criteria.

    Args:
        start_path: Directory (or single file) to start from.
        criteria: Selection criteria. None selects every file.
        mode: FIND or DELETE.

    Returns:
        WalkResult owned by the caller. Check ``errors`` for entries that
        could not be processed.

    Raises:
        PathValidationError: If start_path is empty.
        StartPathNotFoundError: If start_path does not exist.
    """
    selection = criteria or FileSelectionCriteria()
    start = _resolve_start_path(start_path)
    result = WalkResult(start_path=start, mode=mode, criteria=selection)
    fold_events(result, _walk_events(start, selection, mode))
    logger.debug(
        "Walk of %s finished: %d directories, %d files, %d errors",
        result.start_path,
        len(result.directories),
        len(result.files),
        len(result.errors),
    )
    return result


def find_files(start_path: str, criteria: FileSelectionCriteria | None = None) -> WalkResult:
    """Collect every file below start_path that matches criteria."""
    return walk(start_path, criteria, WalkMode.FIND)


def delete_files(start_path: str, criteria: FileSelectionCriteria | None = None) -> WalkResult:
    """Delete every file below start_path that matches criteria."""
    return walk(start_path, criteria, WalkMode.DELETE)


def _resolve_start_path(start_path: str) -> str:
    """Return the absolute start path, raising if it does not exist.

    The string is used as given. Surrounding whitespace is part of the
    name and backslashes are not treated as separators on POSIX.
    """
    if not start_path.strip():
        msg = "Start path cannot be empty"
        raise PathValidationError(msg)
    absolute = os.path.abspath(start_path)
    if not os.path.exists(absolute):
        raise StartPathNotFoundError(absolute)
    return absolute


def _walk_events(start: str, criteria: FileSelectionCriteria, mode: WalkMode) -> Iterator[WalkEvent]:
    """Dispatch on the start path type."""
    if os.path.isdir(start):
        yield from _visit_directory(start, criteria, mode)
        return

    parent, name = os.path.split(start)
    owner = _enter_directory_quietly(parent)
    yield from _visit_file(owner, start, name, criteria, mode)


def _enter_directory_quietly(path: str) -> DirectoryRecord:
    """Build a directory record for a file's parent, falling back to a bare record."""
    try:
        return DirectoryRecord.from_path(path)
    except RecordConstructionError as e:
        logger.warning("Cannot build record for %s: %s", path, e)
        return e.partial or DirectoryRecord(path=path, is_initialized=False)


def _visit_directory(path: str, criteria: FileSelectionCriteria, mode: WalkMode) -> Iterator[WalkEvent]:
    """Yield the events for one directory and, recursively, its contents."""
    try:
        owner = DirectoryRecord.from_path(path)
        yield EnteredDirectory(directory=owner)
    except RecordConstructionError as e:
        msg = f"Cannot build directory record for {path}: {e}"
        logger.warning(msg)
        yield EnteredDirectory(directory=e.partial, error=msg)
        owner = e.partial or DirectoryRecord(path=path, is_initialized=False)

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        msg = f"Cannot list directory {path}: {e}"
        logger.warning(msg)
        yield WalkFailure(path=path, message=msg)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            msg = f"Cannot determine type of {entry.path}: {e}"
            logger.warning(msg)
            yield WalkFailure(path=entry.path, message=msg)
            continue

        if is_dir:
            yield from _visit_directory(entry.path, criteria, mode)
        else:
            yield from _visit_file(owner, entry.path, entry.name, criteria, mode)


def _visit_file(
    owner: DirectoryRecord,
    path: str,
    name: str,
    criteria: FileSelectionCriteria,
    mode: WalkMode,
) -> Iterator[WalkEvent]:
    """Yield the event for one file, deleting it first in DELETE mode."""
    try:
        info = AugmentedFileInfo.from_stat(owner.path, name, os.lstat(path))
        record = FileRecord.from_directory(owner, name, info=info)
    except (OSError, RecordConstructionError) as e:
        msg = f"Cannot read file {path}: {e}"
        logger.warning(msg)
        yield WalkFailure(path=path, message=msg)
        return

    if not criteria.matches(info):
        yield VisitedFile(file=record, matched=False)
        return

    if mode == WalkMode.FIND:
        yield VisitedFile(file=record, matched=True)
        return

    try:
        Path(path).unlink()
    except OSError as e:
        msg = f"Cannot delete {path}: {e}"
        logger.warning(msg)
        yield WalkFailure(path=path, message=msg)
        return

    logger.debug("Deleted %s", path)
    yield VisitedFile(file=replace(record, exists=False), matched=True, deleted=True)
