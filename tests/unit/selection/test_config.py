"""Unit tests for walk job configuration.

Tests for the pydantic job models and TOML load/save.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from pathsift.selection.config import (
    CriteriaConfig,
    JobConfigError,
    JobConfigNotFoundError,
    JobConfigParseError,
    JobFile,
    WalkJob,
    get_sample_job_file,
    load_job_file,
    save_job_file,
)
from pathsift.selection.criteria import CombineMode
from pathsift.walker.tree import find_files
from pydantic import ValidationError

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


class TestCriteriaConfig:
    """Tests for CriteriaConfig."""

    def test_defaults_build_empty_criteria(self) -> None:
        """A default section selects every file."""
        criteria = CriteriaConfig().to_criteria(now=NOW)

        assert criteria.has_active_criteria is False
        assert criteria.combine_mode == CombineMode.AND

    def test_days_become_absolute_bounds(self) -> None:
        """Day-based ages are measured back from now."""
        criteria = CriteriaConfig(older_than_days=5, newer_than_days=30).to_criteria(now=NOW)

        assert criteria.older_than == NOW - timedelta(days=5)
        assert criteria.newer_than == NOW - timedelta(days=30)

    def test_zero_days_leave_bounds_inactive(self) -> None:
        """A day count of 0 does not become a bound at 'now'."""
        criteria = CriteriaConfig(older_than_days=0, newer_than_days=0).to_criteria(now=NOW)

        assert criteria.older_than is None
        assert criteria.newer_than is None
        assert criteria.has_active_criteria is False

    def test_zero_newer_than_days_keeps_other_criteria(
        self, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        """newer_than_days = 0 combined with AND still finds old logs."""
        make_file(tmp_path / "a.log", age_days=10)
        make_file(tmp_path / "b.txt", age_days=1)
        config = CriteriaConfig(patterns=["*.log"], older_than_days=5, newer_than_days=0)

        result = find_files(str(tmp_path), config.to_criteria())

        assert [f.name_ext for f in result.found_files] == ["a.log"]
        assert "modified after" not in result.criteria.describe()

    def test_malformed_pattern_rejected(self) -> None:
        """An unterminated character class is a validation error."""
        with pytest.raises(ValidationError, match="Malformed pattern"):
            CriteriaConfig(patterns=["*.log", "["])

    def test_file_mode_parsed_as_octal(self) -> None:
        """file_mode accepts plain and 0o-prefixed octal strings."""
        assert CriteriaConfig(file_mode="0644").to_criteria().required_mode == 0o644
        assert CriteriaConfig(file_mode="0o755").to_criteria().required_mode == 0o755

    def test_invalid_file_mode(self) -> None:
        """Non-octal modes are rejected."""
        with pytest.raises(ValidationError, match="octal"):
            CriteriaConfig(file_mode="0689")

    def test_combine_or(self) -> None:
        """combine = 'or' maps to CombineMode.OR."""
        criteria = CriteriaConfig(patterns=["*.log"], combine="or").to_criteria()

        assert criteria.combine_mode == CombineMode.OR
        assert criteria.name_patterns == ("*.log",)

    def test_duplicate_age_bound_rejected(self) -> None:
        """An age bound may be given once."""
        with pytest.raises(ValidationError, match="older_than"):
            CriteriaConfig(older_than=NOW, older_than_days=1)

    def test_negative_days_rejected(self) -> None:
        """Ages cannot be negative."""
        with pytest.raises(ValidationError):
            CriteriaConfig(older_than_days=-1)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            CriteriaConfig(pattern=["*.log"])  # type: ignore[call-arg]


class TestJobFile:
    """Tests for JobFile validation."""

    def test_duplicate_names_rejected(self) -> None:
        """Job names must be unique."""
        with pytest.raises(ValidationError, match="Duplicate job names"):
            JobFile(
                jobs=[
                    WalkJob(name="a", start_path="/tmp"),
                    WalkJob(name="a", start_path="/var"),
                ]
            )

    def test_invalid_mode_rejected(self) -> None:
        """Only find and delete are valid modes."""
        with pytest.raises(ValidationError):
            WalkJob(name="a", start_path="/tmp", mode="move")  # type: ignore[arg-type]

    def test_sample_job_file(self) -> None:
        """The sample job file holds one find job."""
        sample = get_sample_job_file()

        assert len(sample.jobs) == 1
        assert sample.jobs[0].mode == "find"


class TestLoadSave:
    """Tests for load_job_file and save_job_file."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """A saved job file loads back unchanged."""
        job_file = JobFile(
            jobs=[
                WalkJob(
                    name="old logs",
                    start_path="/var/tmp/app",
                    mode="delete",
                    criteria=CriteriaConfig(patterns=["*.log"], older_than_days=5, file_mode="0644"),
                ),
                WalkJob(
                    name="recent",
                    start_path="/srv",
                    criteria=CriteriaConfig(newer_than=NOW, combine="or"),
                ),
            ]
        )
        path = tmp_path / "jobs.toml"

        saved = save_job_file(job_file, path)
        loaded = load_job_file(path)

        assert saved == path
        assert loaded == job_file
        assert not list(tmp_path.glob("*.tmp"))

    def test_load_toml_document(self, tmp_path: Path) -> None:
        """A hand-written job file is parsed."""
        path = tmp_path / "jobs.toml"
        path.write_text(
            "[[jobs]]\n"
            'name = "old logs"\n'
            'start_path = "/var/tmp/app"\n'
            'mode = "delete"\n'
            "[jobs.criteria]\n"
            'patterns = ["*.log"]\n'
            "older_than_days = 5\n"
        )

        job_file = load_job_file(path)

        assert job_file.jobs[0].mode == "delete"
        assert job_file.jobs[0].criteria.older_than_days == 5

    def test_default_path(self, isolated_config: Path) -> None:
        """Without a path the XDG job file is used."""
        save_job_file(get_sample_job_file())

        assert (isolated_config / "jobs.toml").exists()
        assert load_job_file() == get_sample_job_file()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises JobConfigNotFoundError."""
        with pytest.raises(JobConfigNotFoundError, match="not found"):
            load_job_file(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises JobConfigParseError."""
        path = tmp_path / "jobs.toml"
        path.write_text("[[jobs]\nname = ")

        with pytest.raises(JobConfigParseError, match="Invalid TOML"):
            load_job_file(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise JobConfigError."""
        path = tmp_path / "jobs.toml"
        path.write_text('[[jobs]]\nname = "x"\n')

        with pytest.raises(JobConfigError, match="Invalid job file content"):
            load_job_file(path)
