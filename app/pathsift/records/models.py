"""Directory and file records built on top of the path classifier.

These are immutable value types describing filesystem entries seen
during a tree walk. Each record normalizes its path to an absolute
path at construction time and optionally carries a metadata snapshot
taken from ``os.stat``.
"""

import logging
import os
import stat
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from pathsift.core.errors import PathValidationError, RecordConstructionError
from pathsift.paths.classifier import PathKind, classify_as_directory, classify_as_file
from pathsift.paths.split import make_absolute_path, split_extension

logger = logging.getLogger(__name__)


def _clean_dir_path(dir_path: str) -> str:
    """Reject a blank directory path and drop one trailing native separator."""
    if not dir_path.strip():
        msg = "Directory path cannot be empty"
        raise ValueError(msg)
    if len(dir_path) > 1 and dir_path[-1] in (os.sep, os.altsep or os.sep):
        return dir_path[:-1]
    return dir_path


@dataclass(frozen=True, slots=True)
class AugmentedFileInfo:
    """Metadata for a file or directory plus the directory that holds it.

    Attributes:
        name: Base name of the entry.
        size: Size in bytes as reported by stat.
        mode: Full ``st_mode`` bits (file type and permissions).
        mod_time: Last modification time, timezone-aware UTC.
        is_dir: True if the entry is a directory.
        dir_path: Directory that contains the entry, without trailing separator.
        created_at: When this snapshot was taken. Not part of equality.
    """

    name: str
    size: int
    mode: int
    mod_time: datetime
    is_dir: bool
    dir_path: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)

    def __post_init__(self) -> None:
        """Validate info data after initialization."""
        if not self.name:
            msg = "Name cannot be empty"
            raise ValueError(msg)
        if not self.dir_path.strip():
            msg = "Directory path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size cannot be negative, got {self.size}"
            raise ValueError(msg)

    @property
    def path(self) -> str:
        """Full path of the entry."""
        return os.path.join(self.dir_path, self.name)

    @property
    def permissions(self) -> int:
        """Permission bits only (``stat.S_IMODE``)."""
        return stat.S_IMODE(self.mode)

    def with_dir_path(self, dir_path: str) -> "AugmentedFileInfo":
        """Return a copy with a different containing directory.

        Raises:
            ValueError: If dir_path is empty or blank.
        """
        return replace(self, dir_path=_clean_dir_path(dir_path))

    @classmethod
    def from_stat(cls, dir_path: str, name: str, st: os.stat_result) -> "AugmentedFileInfo":
        """Build info from an ``os.stat_result`` and the containing directory.

        Args:
            dir_path: Directory holding the entry.
            name: Base name of the entry.
            st: Stat result for the entry.

        Returns:
            Newly created AugmentedFileInfo.
        """
        return cls(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=UTC),
            is_dir=stat.S_ISDIR(st.st_mode),
            dir_path=_clean_dir_path(dir_path),
        )

    @classmethod
    def from_path(cls, path: str) -> "AugmentedFileInfo":
        """Stat a path (without following symlinks) and build info for it.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        absolute = os.path.abspath(path)
        parent, name = os.path.split(absolute)
        if not name:
            # Filesystem root: the entry is its own container
            parent, name = absolute, absolute
        return cls.from_stat(parent, name, os.lstat(absolute))


@dataclass(frozen=True, slots=True)
class DirectoryRecord:
    """A directory identified by its normalized absolute path.

    Attributes:
        path: Absolute directory path without trailing separator.
        is_initialized: True once the absolute path has been established.
        info: Metadata snapshot, None if the directory did not exist or
            its metadata could not be read.
    """

    path: str
    is_initialized: bool = True
    info: AugmentedFileInfo | None = None

    @property
    def name(self) -> str:
        """Last path element (the path itself for a filesystem root)."""
        return os.path.basename(self.path) or self.path

    @property
    def parent_path(self) -> str:
        return os.path.dirname(self.path)

    def exists(self) -> bool:
        """Check whether the directory currently exists on disk."""
        return os.path.isdir(self.path)

    def with_info(self, info: AugmentedFileInfo | None) -> "DirectoryRecord":
        """Return a copy carrying a different metadata snapshot."""
        return replace(self, info=info)

    @classmethod
    def from_path(cls, path_str: str) -> "DirectoryRecord":
        """Build a record for a directory path string.

        An existing directory is taken exactly as given. Any other string
        is made absolute and checked by the classifier, where an
        ambiguous classification is accepted only when its best guess is
        a directory. Metadata is captured when the directory exists.

        Args:
            path_str: Directory path, relative or absolute.

        Returns:
            Fully initialized DirectoryRecord.

        Raises:
            RecordConstructionError: If the string is invalid, names a
                file, or the existing directory's metadata cannot be read.
                ``partial`` holds the record built so far, if any.
        """
        if path_str.strip() and os.path.isdir(path_str):
            # On-disk names may hold spaces or backslashes; keep them as given
            absolute = os.path.abspath(path_str)
            partial = cls(path=absolute)
        else:
            try:
                absolute = make_absolute_path(path_str)
            except PathValidationError as e:
                msg = f"Invalid directory path {path_str!r}: {e}"
                raise RecordConstructionError(msg) from e

            partial = cls(path=absolute)

            try:
                result = classify_as_directory(absolute)
            except PathValidationError as e:
                msg = f"Invalid directory path {absolute!r}: {e}"
                raise RecordConstructionError(msg, partial=partial) from e

            if result.resolve(trust_guess=True) != PathKind.DIRECTORY:
                msg = f"Path is not a directory: {absolute}"
                raise RecordConstructionError(msg)

            if not result.exists:
                return partial

        try:
            info = AugmentedFileInfo.from_path(absolute)
        except OSError as e:
            msg = f"Cannot read metadata for directory {absolute}: {e}"
            raise RecordConstructionError(msg, partial=partial) from e

        return partial.with_info(info)


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A file identified by its owning directory and name.

    Attributes:
        directory: Record of the containing directory (held by value).
        base_name: File name without extension.
        extension: Extension including the leading dot, '' if none.
        absolute_path: Absolute path of the file.
        exists: Whether the file existed when the record was built.
        info: Metadata snapshot, None if unavailable.
    """

    directory: DirectoryRecord
    base_name: str
    extension: str
    absolute_path: str
    exists: bool
    info: AugmentedFileInfo | None = None

    def __post_init__(self) -> None:
        """Validate file record data after initialization."""
        if not self.base_name and not self.extension:
            msg = "File name cannot be empty"
            raise ValueError(msg)

    @property
    def name_ext(self) -> str:
        """File name including extension."""
        return self.base_name + self.extension

    @classmethod
    def from_directory(
        cls,
        directory: DirectoryRecord,
        name_ext: str,
        *,
        info: AugmentedFileInfo | None = None,
    ) -> "FileRecord":
        """Build a record for a file name inside a known directory.

        Args:
            directory: Containing directory record.
            name_ext: File name with extension (a single path component).
            info: Optional metadata snapshot already read by the caller.

        Returns:
            New FileRecord.

        Raises:
            RecordConstructionError: If the name is blank or contains a native
                path separator.
        """
        name = name_ext
        if not name.strip() or any(sep in name for sep in (os.sep, os.altsep) if sep):
            msg = f"Invalid file name {name_ext!r} in directory {directory.path}"
            raise RecordConstructionError(msg)

        base_name, extension = split_extension(name)
        absolute = os.path.join(directory.path, name)
        return cls(
            directory=directory,
            base_name=base_name,
            extension=extension,
            absolute_path=absolute,
            exists=info is not None or os.path.lexists(absolute),
            info=info,
        )

    @classmethod
    def from_path(cls, path_str: str) -> "FileRecord":
        """Build a record for a full file path string.

        Args:
            path_str: File path, relative or absolute.

        Returns:
            New FileRecord with metadata when the file exists.

        Raises:
            RecordConstructionError: If the string is invalid or names a
                directory.
        """
        try:
            result = classify_as_file(path_str)
            absolute = make_absolute_path(path_str)
        except PathValidationError as e:
            msg = f"Invalid file path {path_str!r}: {e}"
            raise RecordConstructionError(msg) from e

        if result.kind == PathKind.DIRECTORY:
            msg = f"Path is a directory, not a file: {absolute}"
            raise RecordConstructionError(msg)

        dir_path, name = os.path.split(absolute)
        try:
            directory = DirectoryRecord.from_path(dir_path)
        except RecordConstructionError as e:
            if e.partial is None:
                raise
            logger.warning("Using partial directory record for %s: %s", dir_path, e)
            directory = e.partial

        info: AugmentedFileInfo | None = None
        if result.exists:
            try:
                info = AugmentedFileInfo.from_path(absolute)
            except OSError as e:
                logger.warning("Cannot read metadata for %s: %s", absolute, e)

        return cls.from_directory(directory, name, info=info)
