"""Path string analysis.

This package provides the lexical path tokenizer, the directory/file
classifier built on top of it, and helpers that split path strings into
directory, name and extension parts.
"""

from pathsift.paths.classifier import (
    Classification,
    PathKind,
    classify_as_directory,
    classify_as_file,
    classify_path,
)
from pathsift.paths.split import (
    add_trailing_separator,
    get_directory_part,
    get_file_extension,
    get_file_name,
    get_file_name_ext,
    join_paths,
    make_absolute_path,
    remove_trailing_separator,
    split_extension,
    split_path,
)
from pathsift.paths.tokenizer import PathTokens, normalize_separators, tokenize, volume_name

__all__ = [
    "Classification",
    "PathKind",
    "PathTokens",
    "add_trailing_separator",
    "classify_as_directory",
    "classify_as_file",
    "classify_path",
    "get_directory_part",
    "get_file_extension",
    "get_file_name",
    "get_file_name_ext",
    "join_paths",
    "make_absolute_path",
    "normalize_separators",
    "remove_trailing_separator",
    "split_extension",
    "split_path",
    "tokenize",
    "volume_name",
]
