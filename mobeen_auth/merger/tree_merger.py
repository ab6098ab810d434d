"""
Non-destructive merge of a template directory onto a project directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..utils import display_path
from .base import MergeReport
from .copier import ConflictAwareCopier

logger = logging.getLogger(__name__)


class TreeMerger:
    """Mirrors every file of a source tree under a destination tree.

    Files already present in the destination are left alone; everything
    else is copied through a ConflictAwareCopier. The walk uses an explicit
    worklist of (source, destination) directory pairs instead of recursion.

    The merge is not transactional: if a copy raises, files copied before
    the failure stay where they are.
    """

    def __init__(self, copier: ConflictAwareCopier | None = None, display_root: Path | None = None):
        self._copier = copier or ConflictAwareCopier(display_root=display_root)
        self._display_root = display_root

    def merge(self, source_dir: Path, dest_dir: Path) -> MergeReport:
        """Merge ``source_dir`` into ``dest_dir``.

        Args:
            source_dir: Template directory; if absent nothing happens
            dest_dir: Project directory to merge into; created if missing

        Returns:
            MergeReport listing created and skipped destination files

        Raises:
            OSError: From directory creation or from the copier
        """
        report = MergeReport()

        if not source_dir.is_dir():
            logger.debug("Nothing to merge, %s is not a directory", source_dir)
            return report

        pending: list[tuple[Path, Path]] = [(source_dir, dest_dir)]
        while pending:
            src, dest = pending.pop()
            dest.mkdir(parents=True, exist_ok=True)

            with os.scandir(src) as it:
                entries = sorted(it, key=lambda e: e.name)

            subdirs = []
            for entry in entries:
                target = dest / entry.name
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append((Path(entry.path), target))
                else:
                    report.record(self._copier.copy(Path(entry.path), target), target)

            # Reversed so the stack pops subdirectories in name order
            pending.extend(reversed(subdirs))

        logger.debug("Merged %s: %s", display_path(dest_dir, self._display_root), report.summary())
        return report
