"""Splitting path strings into directory, name and extension parts.

All helpers accept strings mixing '/' and '\\' and return the parts in
separator-normalized form. A missing part is returned as an empty
string rather than None.
"""

import os

from pathsift.core.errors import PathValidationError
from pathsift.paths.classifier import PathKind, classify_path
from pathsift.paths.tokenizer import SEPARATOR, ends_with_separator, normalize_separators, tokenize


def _require(path_str: str, name: str = "path") -> str:
    """Strip surrounding whitespace and reject empty or '...' strings."""
    stripped = path_str.strip()
    if not stripped:
        msg = f"Input {name} cannot be empty"
        raise PathValidationError(msg)
    if "..." in stripped:
        msg = f"Invalid {name}, contains '...': {stripped}"
        raise PathValidationError(msg)
    return normalize_separators(stripped)


def add_trailing_separator(path_str: str) -> str:
    """Append a separator unless the string already ends with one.

    Raises:
        PathValidationError: If the string is empty.
    """
    if not path_str:
        msg = "Input path cannot be empty"
        raise PathValidationError(msg)
    if ends_with_separator(path_str):
        return path_str
    return path_str + os.sep


def remove_trailing_separator(path_str: str) -> str:
    """Drop one trailing separator. A lone separator becomes ''."""
    if not ends_with_separator(path_str):
        return path_str
    return path_str[:-1]


def make_absolute_path(path_str: str) -> str:
    """Convert a relative path string into an absolute, OS-native path.

    Raises:
        PathValidationError: If the string is empty.
    """
    if not path_str.strip():
        msg = "Input path cannot be empty"
        raise PathValidationError(msg)
    native = normalize_separators(path_str.strip()).replace(SEPARATOR, os.sep)
    return os.path.abspath(native)


def join_paths(first: str, second: str) -> str:
    """Join two path strings and normalize the result."""
    joined = os.path.join(normalize_separators(first), normalize_separators(second))
    return os.path.normpath(joined)


def get_file_name_ext(path_str: str) -> str:
    """Return the final name component including its extension.

    ``'../dir1/dir2/report.txt'`` gives ``'report.txt'``; a string ending
    in a separator, or one with no content characters after its last
    separator, gives ``''``. A string without separators is treated as a
    bare name.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    path = _require(path_str)
    volume = tokenize(path).volume_name
    remainder = path[len(volume) :]
    if not remainder:
        return ""

    tokens = tokenize(remainder)
    if not tokens.has_content:
        return ""
    if not tokens.separator_indices:
        return remainder
    if tokens.ends_with_separator or tokens.last_content_index < tokens.last_separator_index:
        return ""
    return remainder[tokens.last_separator_index + 1 :]


def split_extension(name: str) -> tuple[str, str]:
    """Split a single name component into base name and extension.

    Names that only start with a dot (``.bashrc``), names ending in a
    dot, and names whose suffix holds no content characters have no
    extension. No validation is applied, so names read from disk are
    always accepted.

    Returns:
        Tuple of (base name, extension with leading dot or '').
    """
    dot = name.rfind(".")
    if dot <= 0 or dot == len(name) - 1:
        return name, ""
    if not tokenize(name[dot:]).has_content:
        return name, ""
    return name[:dot], name[dot:]


def get_file_extension(path_str: str) -> str:
    """Return the extension of the final name component, leading dot included.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    name = get_file_name_ext(path_str)
    return split_extension(name)[1] if name else ""


def get_file_name(path_str: str) -> str:
    """Return the final name component without its extension.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    name = get_file_name_ext(path_str)
    return split_extension(name)[0] if name else ""


def get_directory_part(path_str: str) -> str:
    """Return the directory portion of a path string.

    If the whole string classifies as a directory, it is returned with
    any trailing separator removed. Otherwise everything before the last
    separator is returned, or ``''`` when there is no separator.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    path = _require(path_str)
    result = classify_path(path)

    if result.kind == PathKind.DIRECTORY:
        return remove_trailing_separator(path) or path

    tokens = tokenize(path)
    last_sep = tokens.last_separator_index
    if last_sep == -1:
        return tokens.volume_name
    if last_sep == 0:
        return SEPARATOR
    return path[:last_sep]


def split_path(path_str: str) -> tuple[str, str]:
    """Split a path string into its directory part and its file name.

    Returns:
        Tuple of (directory, file name with extension). The file name is
        empty when the string denotes a directory.

    Raises:
        PathValidationError: If the string is empty or contains '...'.
    """
    path = _require(path_str)
    directory = get_directory_part(path)
    if classify_path(path).kind == PathKind.DIRECTORY:
        return directory, ""
    return directory, get_file_name_ext(path)
