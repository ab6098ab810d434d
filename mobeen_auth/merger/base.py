"""
Outcome types shared by the copier and the tree merger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CopyOutcome(str, Enum):
    """Result of copying a single template file."""

    CREATED = "created"  # Destination was absent and has been written
    SKIPPED = "skipped"  # Destination already existed, left untouched


@dataclass
class MergeReport:
    """Tally of a merge, by destination path.

    Attributes:
        created: Destination files written by the merge
        skipped: Destination paths that already existed
    """

    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def record(self, outcome: CopyOutcome, destination: Path) -> None:
        """Add a single copy outcome to the tally."""
        if outcome is CopyOutcome.CREATED:
            self.created.append(destination)
        else:
            self.skipped.append(destination)

    def summary(self) -> str:
        return f"{self.created_count} created, {self.skipped_count} skipped"
