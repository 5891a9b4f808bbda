"""Unit tests for the path tokenizer."""

import pytest
from pathsift.core.errors import PathValidationError
from pathsift.paths.tokenizer import (
    ends_with_separator,
    normalize_separators,
    tokenize,
    volume_name,
)


class TestHelpers:
    """Tests for the small string helpers."""

    def test_normalize_separators(self) -> None:
        """Backslashes become forward slashes."""
        assert normalize_separators("..\\a\\b/c") == "../a/b/c"

    def test_volume_name_drive_letter(self) -> None:
        """A leading drive letter is returned as the volume."""
        assert volume_name("C:/Users") == "C:"
        assert volume_name("d:") == "d:"

    def test_volume_name_absent(self) -> None:
        """POSIX paths have no volume."""
        assert volume_name("/usr/local") == ""
        assert volume_name("1:/x") == ""

    def test_ends_with_separator(self) -> None:
        """Both separator characters are recognized at the end."""
        assert ends_with_separator("a/") is True
        assert ends_with_separator("a\\") is True
        assert ends_with_separator("a") is False
        assert ends_with_separator("") is False


class TestTokenize:
    """Tests for tokenize."""

    def test_empty_string_raises(self) -> None:
        """Tokenizing an empty string is a validation error."""
        with pytest.raises(PathValidationError):
            tokenize("")

    def test_positions(self) -> None:
        """Separator, dot and content positions are recorded."""
        tokens = tokenize("../dir/file.txt")

        assert tokens.separator_indices == (2, 6)
        assert tokens.dot_indices == (0, 1, 11)
        assert tokens.first_content_index == 3
        assert tokens.last_content_index == 14
        assert tokens.last_separator_index == 6
        assert tokens.last_dot_index == 11
        assert tokens.has_content is True
        assert tokens.ends_with_separator is False

    def test_volume_excluded_from_content(self) -> None:
        """Volume characters never count as content."""
        tokens = tokenize("C:\\x")

        assert tokens.path == "C:/x"
        assert tokens.volume_name == "C:"
        assert tokens.first_content_index == 3

    def test_punctuation_is_not_content(self) -> None:
        """A string of separators, dots and punctuation has no content."""
        tokens = tokenize("./-_/..")

        assert tokens.has_content is False
        assert tokens.first_content_index == -1
        assert tokens.last_content_index == -1
        assert tokens.final_content_run_start() == -1

    def test_final_content_run_start(self) -> None:
        """The trailing content run starts after the last punctuation mark."""
        tokens = tokenize("dir/my-report")

        assert tokens.final_content_run_start() == 7

    def test_ends_with_separator_property(self) -> None:
        """A trailing separator is detected on the normalized string."""
        assert tokenize("a\\b\\").ends_with_separator is True
