"""File selection.

This module provides the composable file selection predicate and the
TOML job file models that build it from configuration.
"""

from pathsift.selection.config import (
    CriteriaConfig,
    JobConfigError,
    JobConfigNotFoundError,
    JobConfigParseError,
    JobFile,
    WalkJob,
    load_job_file,
    save_job_file,
)
from pathsift.selection.criteria import CombineMode, CriterionCheck, FileSelectionCriteria

__all__ = [
    "CombineMode",
    "CriteriaConfig",
    "CriterionCheck",
    "FileSelectionCriteria",
    "JobConfigError",
    "JobConfigNotFoundError",
    "JobConfigParseError",
    "JobFile",
    "WalkJob",
    "load_job_file",
    "save_job_file",
]
