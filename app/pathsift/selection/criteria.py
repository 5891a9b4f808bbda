"""File selection criteria.

A criteria value combines up to four sub-criteria: name patterns, an
older-than bound, a newer-than bound, and an exact mode. A sub-criterion
only takes part in the decision when it is *active*, meaning it was set
to something other than its empty default. When nothing is active every
file is selected.
"""

import fnmatch
import stat
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from pathsift.records.models import AugmentedFileInfo


class CombineMode(str, Enum):
    """How active sub-criteria are combined.

    Attributes:
        AND: Every active sub-criterion must match.
        OR: At least one active sub-criterion must match.
    """

    AND = "and"
    OR = "or"


@dataclass(frozen=True, slots=True)
class CriterionCheck:
    """Outcome of evaluating one sub-criterion against one entry.

    Attributes:
        active: Whether the sub-criterion participates at all.
        matched: Whether the entry satisfied it (always False when inactive).
    """

    active: bool
    matched: bool


_INACTIVE = CriterionCheck(active=False, matched=False)


def _as_aware(moment: datetime) -> datetime:
    """Interpret naive datetimes as local time and return an aware datetime."""
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


def validate_pattern(pattern: str) -> str:
    """Check that every character class in a glob pattern is terminated.

    ``fnmatch`` silently treats an unterminated ``[`` as a literal, which
    hides typos such as ``"[abc"``.

    Returns:
        The pattern unchanged.

    Raises:
        ValueError: If a character class is not closed.
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            msg = f"Malformed pattern {pattern!r}: unterminated character class"
            raise ValueError(msg)
        i = j + 1
    return pattern


@dataclass(frozen=True, slots=True)
class FileSelectionCriteria:
    """Composite predicate used to select files during a tree walk.

    Attributes:
        name_patterns: Glob patterns matched against the entry base name.
            Any single pattern matching is enough.
        older_than: Select files modified strictly before this moment.
        newer_than: Select files modified strictly after this moment.
        required_mode: Select files whose mode equals these bits. Without
            file-type bits only the permission bits are compared.
        combine_mode: How active sub-criteria are combined.
    """

    name_patterns: tuple[str, ...] = ()
    older_than: datetime | None = None
    newer_than: datetime | None = None
    required_mode: int = 0
    combine_mode: CombineMode = CombineMode.AND

    def __post_init__(self) -> None:
        """Validate criteria values after initialization."""
        if self.required_mode < 0:
            msg = f"Required mode cannot be negative, got {self.required_mode:o}"
            raise ValueError(msg)
        for pattern in self.name_patterns:
            validate_pattern(pattern)

    @property
    def active_patterns(self) -> tuple[str, ...]:
        """Non-blank patterns, trimmed of surrounding whitespace."""
        return tuple(p.strip() for p in self.name_patterns if p.strip())

    @property
    def has_active_criteria(self) -> bool:
        """True if at least one sub-criterion is active."""
        return bool(
            self.active_patterns
            or self.older_than is not None
            or self.newer_than is not None
            or self.required_mode
        )

    def pattern_check(self, info: AugmentedFileInfo) -> CriterionCheck:
        """Evaluate the name-pattern sub-criterion."""
        patterns = self.active_patterns
        if not patterns:
            return _INACTIVE
        matched = any(fnmatch.fnmatchcase(info.name, pattern) for pattern in patterns)
        return CriterionCheck(active=True, matched=matched)

    def older_than_check(self, info: AugmentedFileInfo) -> CriterionCheck:
        """Evaluate the older-than sub-criterion."""
        if self.older_than is None:
            return _INACTIVE
        matched = _as_aware(info.mod_time) < _as_aware(self.older_than)
        return CriterionCheck(active=True, matched=matched)

    def newer_than_check(self, info: AugmentedFileInfo) -> CriterionCheck:
        """Evaluate the newer-than sub-criterion."""
        if self.newer_than is None:
            return _INACTIVE
        matched = _as_aware(info.mod_time) > _as_aware(self.newer_than)
        return CriterionCheck(active=True, matched=matched)

    def mode_check(self, info: AugmentedFileInfo) -> CriterionCheck:
        """Evaluate the mode sub-criterion."""
        if not self.required_mode:
            return _INACTIVE
        if stat.S_IFMT(self.required_mode):
            actual = info.mode
        else:
            actual = stat.S_IMODE(info.mode)
        return CriterionCheck(active=True, matched=actual == self.required_mode)

    def checks(self, info: AugmentedFileInfo) -> tuple[CriterionCheck, ...]:
        """Evaluate all four sub-criteria in a fixed order."""
        return (
            self.pattern_check(info),
            self.older_than_check(info),
            self.newer_than_check(info),
            self.mode_check(info),
        )

    def matches(self, info: AugmentedFileInfo) -> bool:
        """Decide whether an entry is selected.

        Args:
            info: Metadata of the entry to test.

        Returns:
            True if no sub-criterion is active, or if the active ones are
            satisfied according to ``combine_mode``.
        """
        active = [check for check in self.checks(info) if check.active]
        if not active:
            return True
        if self.combine_mode == CombineMode.AND:
            return all(check.matched for check in active)
        return any(check.matched for check in active)

    def describe(self) -> str:
        """Return a short human-readable summary of the active sub-criteria."""
        parts: list[str] = []
        if self.active_patterns:
            parts.append("name in " + ", ".join(self.active_patterns))
        if self.older_than is not None:
            parts.append(f"modified before {_as_aware(self.older_than).astimezone(UTC).isoformat()}")
        if self.newer_than is not None:
            parts.append(f"modified after {_as_aware(self.newer_than).astimezone(UTC).isoformat()}")
        if self.required_mode:
            parts.append(f"mode {self.required_mode:04o}")
        if not parts:
            return "all files"
        return f" {self.combine_mode.value.upper()} ".join(parts)
