"""Walk job configuration.

A job file is a TOML document holding a list of walk jobs. Each job
names a start path, a walk mode, and the selection criteria to apply:

    [[jobs]]
    name = "old logs"
    start_path = "/var/tmp/app"
    mode = "delete"

    [jobs.criteria]
    patterns = ["*.log"]
    older_than_days = 5
    combine = "and"

Configuration is stored in ~/.config/pathsift/jobs.toml by default.
"""

import os
import tomllib
from datetime import UTC, datetime, timedelta
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from pathsift.core.errors import PathsiftError
from pathsift.core.paths import get_job_file_path
from pathsift.selection.criteria import CombineMode, FileSelectionCriteria, validate_pattern

# Type alias for criteria combination in job files
CombineType = Literal["and", "or"]

# Type alias for walk mode in job files
WalkModeType = Literal["find", "delete"]


class CriteriaConfig(BaseModel):
    """Selection criteria section of a walk job.

    Ages given in days are converted to absolute bounds relative to the
    moment the criteria are built. A day count of 0 leaves that bound
    inactive, like leaving it out.

    Attributes:
        patterns: Glob patterns matched against file base names.
        older_than: Absolute upper bound on modification time.
        newer_than: Absolute lower bound on modification time.
        older_than_days: Select files older than this many days.
        newer_than_days: Select files newer than this many days.
        file_mode: Exact mode as an octal string (e.g. "0644").
        combine: How active criteria are combined ("and" or "or").
    """

    model_config = ConfigDict(extra="forbid")

    patterns: Annotated[list[str], Field(default_factory=list, description="Glob patterns")]
    older_than: Annotated[datetime | None, Field(description="Modified before")] = None
    newer_than: Annotated[datetime | None, Field(description="Modified after")] = None
    older_than_days: Annotated[float | None, Field(ge=0, description="Age lower bound in days")] = None
    newer_than_days: Annotated[float | None, Field(ge=0, description="Age upper bound in days")] = None
    file_mode: Annotated[str | None, Field(description="Exact mode, octal string")] = None
    combine: Annotated[CombineType, Field(description="Criteria combination")] = "and"

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Validate that every glob pattern is well formed."""
        return [validate_pattern(p) for p in v]

    @field_validator("file_mode")
    @classmethod
    def validate_file_mode(cls, v: str | None) -> str | None:
        """Validate that file_mode is a non-negative octal number."""
        if v is None:
            return None
        text = v.strip().lower().removeprefix("0o")
        try:
            int(text, 8)
        except ValueError:
            msg = f"file_mode must be an octal string, got {v!r}"
            raise ValueError(msg) from None
        return v.strip()

    @model_validator(mode="after")
    def validate_age_bounds(self) -> "CriteriaConfig":
        """Validate that each age bound is given at most once."""
        if self.older_than is not None and self.older_than_days is not None:
            msg = "Use either older_than or older_than_days, not both"
            raise ValueError(msg)
        if self.newer_than is not None and self.newer_than_days is not None:
            msg = "Use either newer_than or newer_than_days, not both"
            raise ValueError(msg)
        return self

    def to_criteria(self, now: datetime | None = None) -> FileSelectionCriteria:
        """Build a FileSelectionCriteria value from this section.

        Args:
            now: Reference moment for day-based ages. Defaults to the
                current UTC time.

        Returns:
            Criteria ready to be passed to the walker.
        """
        moment = now or datetime.now(UTC)

        older_than = self.older_than
        if self.older_than_days:
            older_than = moment - timedelta(days=self.older_than_days)

        newer_than = self.newer_than
        if self.newer_than_days:
            newer_than = moment - timedelta(days=self.newer_than_days)

        mode = 0
        if self.file_mode is not None:
            mode = int(self.file_mode.lower().removeprefix("0o"), 8)

        return FileSelectionCriteria(
            name_patterns=tuple(self.patterns),
            older_than=older_than,
            newer_than=newer_than,
            required_mode=mode,
            combine_mode=CombineMode(self.combine),
        )


class WalkJob(BaseModel):
    """A single walk job: where to start, what to do, what to select.

    Attributes:
        name: Human-readable job name.
        start_path: Directory the walk starts from.
        mode: "find" to list matches, "delete" to remove them.
        criteria: Selection criteria for files.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="Job name")]
    start_path: Annotated[str, Field(min_length=1, description="Walk start directory")]
    mode: Annotated[WalkModeType, Field(description="Walk mode")] = "find"
    criteria: Annotated[
        CriteriaConfig,
        Field(default_factory=CriteriaConfig, description="File selection criteria"),
    ]


class JobFile(BaseModel):
    """Complete job file.

    Attributes:
        jobs: Walk jobs in execution order.
    """

    model_config = ConfigDict(extra="forbid")

    jobs: Annotated[list[WalkJob], Field(default_factory=list, description="Walk jobs")]

    @model_validator(mode="after")
    def validate_unique_names(self) -> "JobFile":
        """Validate that job names are unique."""
        names = [job.name for job in self.jobs]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            msg = f"Duplicate job names: {sorted(duplicates)}"
            raise ValueError(msg)
        return self


class JobConfigError(PathsiftError):
    """Base exception for job file errors."""


class JobConfigNotFoundError(JobConfigError):
    """Raised when the job file is not found."""


class JobConfigParseError(JobConfigError):
    """Raised when the job file cannot be parsed."""


def load_job_file(path: Path | None = None) -> JobFile:
    """Load walk jobs from a TOML file.

    Args:
        path: Path to the job file. If None, uses the default job file path.

    Returns:
        Validated JobFile object.

    Raises:
        JobConfigNotFoundError: If the file doesn't exist.
        JobConfigParseError: If the TOML syntax is invalid.
        JobConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_job_file_path()

    if not config_path.exists():
        raise JobConfigNotFoundError(f"Job file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise JobConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise JobConfigError(f"Failed to read job file: {e}") from e

    try:
        return JobFile.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise JobConfigError(f"Invalid job file content: {e}") from e


def save_job_file(job_file: JobFile, path: Path | None = None) -> Path:
    """Save walk jobs to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        job_file: The JobFile object to save.
        path: Path to save to. If None, uses the default job file path.

    Returns:
        Path where the job file was saved.

    Raises:
        JobConfigError: If the file cannot be written.
    """
    config_path = path or get_job_file_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # None values have no TOML representation
    data = job_file.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise JobConfigError(f"Failed to write job file: {e}") from e

    return config_path


def get_sample_job_file() -> JobFile:
    """Create a sample job file that finds week-old log files under /tmp."""
    return JobFile(
        jobs=[
            WalkJob(
                name="old-logs",
                start_path="/tmp",
                mode="find",
                criteria=CriteriaConfig(patterns=["*.log"], older_than_days=7),
            )
        ]
    )
