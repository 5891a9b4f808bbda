"""Unit tests for copying walk results into another tree.

Copy failures are simulated by patching shutil.copy2 for one entry only.
"""

import os
import shutil
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from pathsift.core.errors import PathValidationError
from pathsift.selection.criteria import FileSelectionCriteria
from pathsift.walker.copy import copy_tree
from pathsift.walker.tree import delete_files, find_files

FileFactory = Callable[..., Path]


@pytest.fixture
def tree(tmp_path: Path, make_file: FileFactory) -> Path:
    """root/a.log, root/b.txt, root/sub/c.log, root/empty/"""
    root = tmp_path / "root"
    make_file(root / "a.log", content="alpha", age_days=10)
    make_file(root / "b.txt")
    make_file(root / "sub" / "c.log", content="gamma")
    (root / "empty").mkdir()
    return root


class TestCopyTree:
    """Tests for copy_tree."""

    def test_copies_found_files_keeping_layout(self, tree: Path, tmp_path: Path) -> None:
        """Found files land at the same relative place below the new base."""
        found = find_files(str(tree), FileSelectionCriteria(name_patterns=("*.log",)))
        target = tmp_path / "backup"

        result = copy_tree(found, str(target))

        assert result.errors == []
        assert result.base_dir == str(tree)
        assert result.new_base_dir == str(target)
        assert (target / "a.log").read_text() == "alpha"
        assert (target / "sub" / "c.log").read_text() == "gamma"
        assert not (target / "b.txt").exists()
        assert [f.absolute_path for f in result.copied_files] == [
            str(target / "a.log"),
            str(target / "sub" / "c.log"),
        ]

    def test_recreates_every_visited_directory(self, tree: Path, tmp_path: Path) -> None:
        """Directories without matches are created too."""
        found = find_files(str(tree), FileSelectionCriteria(name_patterns=("*.log",)))
        target = tmp_path / "backup"

        result = copy_tree(found, str(target))

        assert [d.path for d in result.directories] == [
            str(target),
            str(target / "empty"),
            str(target / "sub"),
        ]
        assert (target / "empty").is_dir()

    def test_metadata_is_preserved(self, tree: Path, tmp_path: Path) -> None:
        """Copies keep the modification time of the source."""
        found = find_files(str(tree), FileSelectionCriteria(name_patterns=("a.log",)))

        result = copy_tree(found, str(tmp_path / "backup"))

        [copy] = result.copied_files
        [source] = found.found_files
        assert copy.info is not None
        assert source.info is not None
        assert int(copy.info.mod_time.timestamp()) == int(source.info.mod_time.timestamp())

    def test_explicit_base_dir(self, tree: Path, tmp_path: Path) -> None:
        """Paths are made relative to the given base directory."""
        found = find_files(str(tree / "sub"))
        target = tmp_path / "backup"

        result = copy_tree(found, str(target), base_dir=str(tree))

        assert result.errors == []
        assert (target / "sub" / "c.log").exists()

    def test_file_outside_base_is_an_error(self, tree: Path, tmp_path: Path) -> None:
        """Entries not below the base directory are reported and skipped."""
        found = find_files(str(tree), FileSelectionCriteria(name_patterns=("a.log",)))

        result = copy_tree(found, str(tmp_path / "backup"), base_dir=str(tree / "sub"))

        assert result.copied_files == []
        assert any("is not below" in error for error in result.errors)

    def test_start_path_is_file(self, tree: Path, tmp_path: Path) -> None:
        """A single-file walk is copied relative to the file's directory."""
        found = find_files(str(tree / "a.log"))
        target = tmp_path / "backup"

        result = copy_tree(found, str(target))

        assert result.errors == []
        assert (target / "a.log").read_text() == "alpha"

    def test_one_failed_copy_is_collected(self, tmp_path: Path, make_file: FileFactory) -> None:
        """A copy failure is an error; the other files are still copied."""
        root = tmp_path / "root"
        for name in ("f1.log", "f2.log", "f3.log"):
            make_file(root / name)
        failing = str(root / "f2.log")
        original_copy2 = shutil.copy2

        def flaky_copy2(src, dst, *args, **kwargs):  # type: ignore[no-untyped-def]
            if os.fspath(src) == failing:
                raise PermissionError(13, "Permission denied", failing)
            return original_copy2(src, dst, *args, **kwargs)

        found = find_files(str(root))
        target = tmp_path / "backup"
        with patch("pathsift.walker.copy.shutil.copy2", side_effect=flaky_copy2):
            result = copy_tree(found, str(target))

        assert [f.name_ext for f in result.copied_files] == ["f1.log", "f3.log"]
        assert len(result.errors) == 1
        assert failing in result.errors[0]
        assert result.has_errors is True
        assert not (target / "f2.log").exists()

    def test_unwritable_target_is_an_error(self, tree: Path, tmp_path: Path) -> None:
        """A target that cannot be created stops the copy with one error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        found = find_files(str(tree))

        result = copy_tree(found, str(blocker / "backup"))

        assert result.copied_files == []
        assert len(result.errors) == 1
        assert "Cannot create directory" in result.errors[0]

    def test_symlinks_copied_as_links(self, tmp_path: Path, make_file: FileFactory) -> None:
        """A symlink found by the walk is copied as a link."""
        make_file(tmp_path / "real.txt")
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(tmp_path / "real.txt")
        target = tmp_path / "backup"

        result = copy_tree(find_files(str(root)), str(target))

        assert result.errors == []
        assert (target / "link").is_symlink()

    def test_delete_result_rejected(self, tree: Path, tmp_path: Path) -> None:
        """Only find results can be copied."""
        deleted = delete_files(str(tree), FileSelectionCriteria(name_patterns=("b.txt",)))

        with pytest.raises(PathValidationError, match="find walk"):
            copy_tree(deleted, str(tmp_path / "backup"))

    def test_empty_target_rejected(self, tree: Path) -> None:
        """A blank target directory is a validation error."""
        with pytest.raises(PathValidationError):
            copy_tree(find_files(str(tree)), "  ")
