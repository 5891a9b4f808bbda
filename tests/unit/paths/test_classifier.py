"""Unit tests for the path classifier.

Strings used for lexical checks do not exist on disk, so the filesystem
lookup falls through to the lexical rules.
"""

from pathlib import Path

import pytest
from pathsift.core.errors import PathValidationError
from pathsift.paths.classifier import (
    Classification,
    PathKind,
    classify_as_directory,
    classify_as_file,
    classify_path,
)


def _kind(path: str) -> PathKind:
    return classify_path(path, probe_filesystem=False).kind


class TestLexicalRules:
    """Tests for the lexical decision rules."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("C:", PathKind.DIRECTORY),
            (".", PathKind.DIRECTORY),
            (".foo", PathKind.DIRECTORY),
            ("..", PathKind.DIRECTORY),
            ("../a/b", PathKind.DIRECTORY),
            ("..\\a\\b\\", PathKind.DIRECTORY),
            ("readme", PathKind.NOT_A_PATH),
            ("dir/sub", PathKind.DIRECTORY),
            ("./..", PathKind.DIRECTORY),
            ("report.txt", PathKind.FILE),
            ("dir/sub/", PathKind.DIRECTORY),
            ("dir/report.txt", PathKind.FILE),
            ("dir.d/sub", PathKind.DIRECTORY),
            ("C:\\Users\\me\\notes.md", PathKind.FILE),
        ],
    )
    def test_kinds(self, path: str, expected: PathKind) -> None:
        """Each representative string classifies as expected."""
        assert _kind(path) == expected

    def test_ambiguous_carries_guess(self) -> None:
        """A trailing dot without content after it is ambiguous."""
        result = classify_path("a/-.", probe_filesystem=False)

        assert result.kind == PathKind.AMBIGUOUS
        assert result.is_ambiguous is True
        assert result.best_guess_is_directory is True
        assert result.matched is None

    def test_trailing_separator_never_ambiguous(self) -> None:
        """Strings ending in a separator are directories, never ambiguous."""
        for path in ("..\\a\\b\\", "a.b/c.d/", "x/-./"):
            assert _kind(path) == PathKind.DIRECTORY

    def test_triple_dot_raises(self) -> None:
        """Any string containing '...' is rejected."""
        for path in ("...", "a/.../b", "file...txt"):
            with pytest.raises(PathValidationError, match="\\.\\.\\."):
                classify_path(path)

    def test_empty_raises(self) -> None:
        """An empty string is rejected."""
        with pytest.raises(PathValidationError):
            classify_as_directory("")

    def test_idempotent(self) -> None:
        """Classifying the same string twice gives equal results."""
        for path in ("dir/report.txt", "a/-.", "readme", "C:"):
            assert classify_path(path) == classify_path(path)


class TestFilesystemProbe:
    """Tests for classification of existing paths."""

    def test_existing_file_without_extension(self, tmp_path: Path) -> None:
        """An existing file is a file even if it looks like a directory."""
        target = tmp_path / "noext"
        target.write_text("x")

        result = classify_as_file(str(target))

        assert result.kind == PathKind.FILE
        assert result.exists is True
        assert result.matched is True

    def test_existing_directory_with_dot(self, tmp_path: Path) -> None:
        """An existing directory is a directory even if it looks like a file."""
        target = tmp_path / "archive.d"
        target.mkdir()

        result = classify_as_directory(str(target))

        assert result.kind == PathKind.DIRECTORY
        assert result.exists is True
        assert result.matched is True

    def test_lexical_only_skips_probe(self, tmp_path: Path) -> None:
        """probe_filesystem=False ignores what is on disk."""
        target = tmp_path / "archive.d"
        target.mkdir()

        result = classify_path(str(target), probe_filesystem=False)

        assert result.exists is False
        assert result.kind == PathKind.FILE


class TestClassification:
    """Tests for the Classification value type."""

    def test_entry_points_set_expected(self) -> None:
        """Each entry point answers its own question."""
        as_dir = classify_as_directory("dir/report.txt")
        as_file = classify_as_file("dir/report.txt")

        assert as_dir.expected == PathKind.DIRECTORY
        assert as_dir.matched is False
        assert as_file.expected == PathKind.FILE
        assert as_file.matched is True

    def test_resolve_requires_explicit_choice(self) -> None:
        """An ambiguous result stays ambiguous unless the guess is trusted."""
        result = classify_path("a/-.", probe_filesystem=False)

        assert result.resolve(trust_guess=False) == PathKind.AMBIGUOUS
        assert result.resolve(trust_guess=True) == PathKind.DIRECTORY

    def test_resolve_passes_through_decided_kinds(self) -> None:
        """Decided kinds are returned unchanged."""
        result = classify_path("dir/report.txt", probe_filesystem=False)

        assert result.resolve(trust_guess=True) == PathKind.FILE

    def test_ambiguous_without_guess_rejected(self) -> None:
        """An ambiguous result must carry a guess."""
        with pytest.raises(ValueError, match="best guess"):
            Classification(kind=PathKind.AMBIGUOUS, tested_path="x")

    def test_guess_on_decided_kind_rejected(self) -> None:
        """A decided result cannot carry a guess."""
        with pytest.raises(ValueError, match="Best guess"):
            Classification(kind=PathKind.FILE, tested_path="x", best_guess_is_directory=False)

    def test_existing_not_a_path_rejected(self) -> None:
        """An existing entry is always a directory or a file."""
        with pytest.raises(ValueError, match="existing"):
            Classification(kind=PathKind.NOT_A_PATH, tested_path="x", exists=True)

    def test_expected_must_be_directory_or_file(self) -> None:
        """Only directory and file can be asked about."""
        with pytest.raises(ValueError, match="Expected kind"):
            Classification(kind=PathKind.FILE, tested_path="x", expected=PathKind.AMBIGUOUS)
