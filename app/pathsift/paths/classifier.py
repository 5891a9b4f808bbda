"""Directory / file classification of path strings.

When a path exists on disk, ``os.stat`` decides. Otherwise a fixed
sequence of lexical rules is applied to the tokenized string. Some
strings (``a/..``) cannot be decided lexically; those come back as
AMBIGUOUS with a best guess the caller has to accept or reject
explicitly through :meth:`Classification.resolve`.
"""

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum

from pathsift.core.errors import PathValidationError
from pathsift.paths.tokenizer import PathTokens, normalize_separators, tokenize

logger = logging.getLogger(__name__)


class PathKind(str, Enum):
    """Outcome of classifying a path string.

    Attributes:
        DIRECTORY: The string denotes a directory.
        FILE: The string denotes a file (directory part optional).
        AMBIGUOUS: Lexical rules cannot decide; see the best guess.
        NOT_A_PATH: A bare name with neither separators nor dots.
    """

    DIRECTORY = "directory"
    FILE = "file"
    AMBIGUOUS = "ambiguous"
    NOT_A_PATH = "not_a_path"


@dataclass(frozen=True, slots=True)
class Classification:
    """Tagged classification result.

    Attributes:
        kind: Classification outcome.
        tested_path: Separator-normalized string the decision was made on.
        expected: Kind the caller asked about (DIRECTORY or FILE).
        exists: True if the filesystem made the decision.
        best_guess_is_directory: Non-authoritative guess, set only when
            kind is AMBIGUOUS.
    """

    kind: PathKind
    tested_path: str
    expected: PathKind = PathKind.DIRECTORY
    exists: bool = False
    best_guess_is_directory: bool | None = None

    def __post_init__(self) -> None:
        """Reject combinations that cannot describe a real outcome."""
        if self.expected not in (PathKind.DIRECTORY, PathKind.FILE):
            msg = f"Expected kind must be directory or file, got {self.expected.value}"
            raise ValueError(msg)
        if self.kind == PathKind.AMBIGUOUS and self.best_guess_is_directory is None:
            msg = "Ambiguous classification requires a best guess"
            raise ValueError(msg)
        if self.kind != PathKind.AMBIGUOUS and self.best_guess_is_directory is not None:
            msg = f"Best guess only applies to ambiguous results, not {self.kind.value}"
            raise ValueError(msg)
        if self.exists and self.kind not in (PathKind.DIRECTORY, PathKind.FILE):
            msg = "An existing path is always a directory or a file"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        return self.kind == PathKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == PathKind.FILE

    @property
    def is_ambiguous(self) -> bool:
        return self.kind == PathKind.AMBIGUOUS

    @property
    def matched(self) -> bool | None:
        """Answer the question the entry point was asked.

        Returns:
            True if the kind equals the expected kind, None if the result
            is ambiguous, False otherwise.
        """
        if self.is_ambiguous:
            return None
        return self.kind == self.expected

    def resolve(self, *, trust_guess: bool) -> PathKind:
        """Collapse an ambiguous result according to the caller's decision.

        Args:
            trust_guess: If True, an ambiguous result becomes its best
                guess. If False, AMBIGUOUS is returned unchanged.

        Returns:
            The decided PathKind.
        """
        if not self.is_ambiguous or not trust_guess:
            return self.kind
        return PathKind.DIRECTORY if self.best_guess_is_directory else PathKind.FILE


def classify_as_directory(path_str: str) -> Classification:
    """Classify a path string, asking whether it denotes a directory.

    Args:
        path_str: Path string to analyze.

    Returns:
        Classification with ``expected`` set to DIRECTORY.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    return classify_path(path_str, expected=PathKind.DIRECTORY)


def classify_as_file(path_str: str) -> Classification:
    """Classify a path string, asking whether it denotes a file.

    Args:
        path_str: Path string to analyze.

    Returns:
        Classification with ``expected`` set to FILE.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    return classify_path(path_str, expected=PathKind.FILE)


def classify_path(
    path_str: str,
    *,
    expected: PathKind = PathKind.DIRECTORY,
    probe_filesystem: bool = True,
) -> Classification:
    """Decide whether a path string names a directory or a file.

    Args:
        path_str: Path string to analyze. May mix '/' and '\\'.
        expected: Kind the caller is asking about.
        probe_filesystem: If False, skip the ``os.stat`` lookup and apply
            only the lexical rules.

    Returns:
        Classification for the string.

    Raises:
        PathValidationError: If the string is empty, or does not exist
            and contains a '...' sequence.
    """
    if not path_str:
        msg = "Path string cannot be empty"
        raise PathValidationError(msg)

    tested = normalize_separators(path_str)

    if probe_filesystem:
        existing = _stat_kind(tested)
        if existing is not None:
            return Classification(kind=existing, tested_path=tested, expected=expected, exists=True)

    if "..." in tested:
        msg = f"Invalid path string, contains '...': {tested}"
        raise PathValidationError(msg)

    kind, guess = _decide(tokenize(tested))
    logger.debug("Classified %r as %s (guess=%s)", tested, kind.value, guess)
    return Classification(
        kind=kind,
        tested_path=tested,
        expected=expected,
        best_guess_is_directory=guess,
    )


def _stat_kind(path: str) -> PathKind | None:
    """Return DIRECTORY or FILE for an existing path, None otherwise."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return None
    return PathKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else PathKind.FILE


def _decide(tokens: PathTokens) -> tuple[PathKind, bool | None]:
    """Apply the lexical rules in order.

    Args:
        tokens: Tokenized path string.

    Returns:
        Tuple of (kind, best guess). The guess is None unless the kind
        is AMBIGUOUS.
    """
    path = tokens.path
    dot_count = len(tokens.dot_indices)
    sep_count = len(tokens.separator_indices)

    if path == tokens.volume_name:
        return PathKind.DIRECTORY, None

    # "." and ".name" style current-directory references
    if path.startswith(".") and dot_count == 1:
        return PathKind.DIRECTORY, None

    # "../name" style parent-directory references
    if path.startswith("..") and dot_count == 2:
        return PathKind.DIRECTORY, None

    if dot_count == 0 and sep_count == 0:
        return PathKind.NOT_A_PATH, None

    if dot_count == 0:
        return PathKind.DIRECTORY, None

    # Only separators, dots and punctuation, e.g. "./.." or "-/."
    if not tokens.has_content:
        return PathKind.DIRECTORY, None

    if sep_count == 0:
        if tokens.last_dot_index < tokens.first_content_index:
            return PathKind.DIRECTORY, None
        return PathKind.FILE, None

    last_sep = tokens.last_separator_index
    last_dot = tokens.last_dot_index

    if tokens.ends_with_separator:
        return PathKind.DIRECTORY, None

    if last_dot > last_sep and tokens.last_content_index > last_sep:
        return PathKind.FILE, None

    if last_sep > last_dot:
        return PathKind.DIRECTORY, None

    run_start = tokens.final_content_run_start()
    guess_file = run_start > last_sep and run_start > last_dot
    return PathKind.AMBIGUOUS, not guess_file
