"""Result models for cleanup walks.

This module defines the outcome of a single deletion decision, the
reasons a subtree can be skipped, and the counters collected over a
whole walk.
"""

from dataclasses import dataclass, field
from enum import Enum


class Outcome(str, Enum):
    """Result of considering one non-directory entry.

    Attributes:
        NO_MATCH: Entry name does not match the target predicate.
        DECLINED: Entry matched but the user declined the deletion.
        DELETED: Entry was removed.
        WOULD_DELETE: Entry matched in dry-run mode and was left in place.
        FAILED: Removal was attempted and raised an error.
    """

    NO_MATCH = "no_match"
    DECLINED = "declined"
    DELETED = "deleted"
    WOULD_DELETE = "would_delete"
    FAILED = "failed"


class SkipReason(str, Enum):
    """Reason a directory was not descended into.

    Attributes:
        EXCLUDED: Base name is in the excluded names.
        OTHER_FILESYSTEM: Directory lives on a different device than the root.
        PERMISSION_DENIED: Directory could not be opened for lack of access.
    """

    EXCLUDED = "excluded"
    OTHER_FILESYSTEM = "other_filesystem"
    PERMISSION_DENIED = "permission_denied"

    @property
    def label(self) -> str:
        """Short label used in skip notices."""
        return _SKIP_LABELS[self]


_SKIP_LABELS: dict[SkipReason, str] = {
    SkipReason.EXCLUDED: "excluded",
    SkipReason.OTHER_FILESYSTEM: "different filesystem",
    SkipReason.PERMISSION_DENIED: "permission denied",
}


@dataclass(slots=True)
class WalkSummary:
    """Counters collected while walking one or more trees.

    Attributes:
        directories: Directories opened and enumerated.
        matched: Entries that matched the target predicate.
        declined: Matches the user chose to keep.
        failed: Matches whose removal raised an error.
        errors: Directory or metadata errors (not counting failed deletions).
        skipped: Directories not descended into (see SkipReason).
        deleted: Paths that were removed.
        would_delete: Paths that would have been removed in a real run.
    """

    directories: int = 0
    matched: int = 0
    declined: int = 0
    failed: int = 0
    errors: int = 0
    skipped: int = 0
    deleted: list[str] = field(default_factory=list)
    would_delete: list[str] = field(default_factory=list)

    def record(self, outcome: Outcome, path: str) -> None:
        """Account for the outcome of one deletion decision."""
        if outcome == Outcome.NO_MATCH:
            return
        self.matched += 1
        if outcome == Outcome.DELETED:
            self.deleted.append(path)
        elif outcome == Outcome.WOULD_DELETE:
            self.would_delete.append(path)
        elif outcome == Outcome.DECLINED:
            self.declined += 1
        else:
            self.failed += 1

    def merge(self, other: "WalkSummary") -> None:
        """Add the counters of another summary to this one."""
        self.directories += other.directories
        self.matched += other.matched
        self.declined += other.declined
        self.failed += other.failed
        self.errors += other.errors
        self.skipped += other.skipped
        self.deleted.extend(other.deleted)
        self.would_delete.extend(other.would_delete)
