"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
from pathsift.records.models import AugmentedFileInfo

DAY = 24 * 60 * 60


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file with a given age in days and optional mode."""

    def _make(path: Path, age_days: float = 0, content: str = "x", mode: int | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if age_days:
            mtime = time.time() - age_days * DAY
            os.utime(path, (mtime, mtime))
        if mode is not None:
            path.chmod(mode)
        return path

    return _make


@pytest.fixture
def make_info() -> Callable[..., AugmentedFileInfo]:
    """Factory creating an AugmentedFileInfo without touching the filesystem."""

    def _make(
        name: str = "a.log",
        mode: int = 0o100644,
        mod_time: datetime | None = None,
        size: int = 10,
    ) -> AugmentedFileInfo:
        return AugmentedFileInfo(
            name=name,
            size=size,
            mode=mode,
            mod_time=mod_time or datetime(2024, 1, 15, 10, 0, tzinfo=UTC),
            is_dir=False,
            dir_path="/data",
        )

    return _make


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "pathsift"
