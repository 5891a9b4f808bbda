"""Lexical scanning of path strings.

The tokenizer never touches the filesystem. It records where the
separators and dots of a path string are, which leading volume
designator (if any) the string carries, and where the first and last
"content" characters sit. Content characters are everything that is
not a separator, a dot, or one of a fixed set of punctuation marks.
"""

import re
from dataclasses import dataclass

from pathsift.core.errors import PathValidationError

SEPARATOR = "/"

_SEPARATOR_CHARS: frozenset[str] = frozenset({"/", "\\"})

# Characters that never count as path content
FORBIDDEN_CONTENT_CHARS: frozenset[str] = frozenset(
    "/\\.&!%$#@^*()-_+=[{]}|<>,~`:;\"'\n\t\r"
)

_VOLUME_PATTERN = re.compile(r"^[A-Za-z]:")


def normalize_separators(path_str: str) -> str:
    """Replace every backslash with the canonical forward slash."""
    return path_str.replace("\\", SEPARATOR)


def volume_name(path_str: str) -> str:
    """Return the leading drive designator of a path string.

    Only drive-letter prefixes such as ``C:`` are recognized. The match
    is literal; no case folding or trailing separator is included.

    Args:
        path_str: Path string to inspect.

    Returns:
        The volume prefix, or an empty string if there is none.
    """
    match = _VOLUME_PATTERN.match(path_str)
    return match.group(0) if match else ""


def ends_with_separator(path_str: str) -> bool:
    """Check whether the last character of a path string is a separator."""
    return bool(path_str) and path_str[-1] in _SEPARATOR_CHARS


@dataclass(frozen=True, slots=True)
class PathTokens:
    """Result of scanning one path string.

    Attributes:
        path: The separator-normalized string the indices refer to.
        separator_indices: Ascending positions of path separators.
        dot_indices: Ascending positions of '.' characters.
        volume_name: Leading drive designator, empty if none.
        first_content_index: First content character after the volume
            prefix, -1 if there is none.
        last_content_index: Last content character, -1 if there is none.
    """

    path: str
    separator_indices: tuple[int, ...]
    dot_indices: tuple[int, ...]
    volume_name: str
    first_content_index: int
    last_content_index: int

    @property
    def has_content(self) -> bool:
        """True if at least one content character exists."""
        return self.first_content_index != -1

    @property
    def last_separator_index(self) -> int:
        """Position of the last separator, -1 if there is none."""
        return self.separator_indices[-1] if self.separator_indices else -1

    @property
    def last_dot_index(self) -> int:
        """Position of the last dot, -1 if there is none."""
        return self.dot_indices[-1] if self.dot_indices else -1

    @property
    def ends_with_separator(self) -> bool:
        """True if the final character is a separator."""
        return bool(self.separator_indices) and self.separator_indices[-1] == len(self.path) - 1

    def final_content_run_start(self) -> int:
        """Return the index where the trailing run of content characters begins.

        Scans backwards from the last content character until a
        non-content character is hit. Returns -1 if there is no content.
        """
        if not self.has_content:
            return -1
        start = self.last_content_index
        floor = len(self.volume_name)
        while start - 1 >= floor and self.path[start - 1] not in FORBIDDEN_CONTENT_CHARS:
            start -= 1
        return start


def tokenize(path_str: str) -> PathTokens:
    """Scan a path string into separator, dot, and content positions.

    Args:
        path_str: Raw path string. May mix '/' and '\\'.

    Returns:
        PathTokens computed from the separator-normalized string.

    Raises:
        PathValidationError: If the string is empty.
    """
    if not path_str:
        msg = "Path string cannot be empty"
        raise PathValidationError(msg)

    path = normalize_separators(path_str)
    volume = volume_name(path)

    separators: list[int] = []
    dots: list[int] = []
    first = -1
    last = -1

    for idx, char in enumerate(path):
        if char == SEPARATOR:
            separators.append(idx)
        elif char == ".":
            dots.append(idx)

        if idx < len(volume) or char in FORBIDDEN_CONTENT_CHARS:
            continue
        if first == -1:
            first = idx
        last = idx

    return PathTokens(
        path=path,
        separator_indices=tuple(separators),
        dot_indices=tuple(dots),
        volume_name=volume,
        first_content_index=first,
        last_content_index=last,
    )
