"""
Single-file copy that never overwrites.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..utils import display_path
from .base import CopyOutcome

logger = logging.getLogger(__name__)


class ConflictAwareCopier:
    """Copies one template file to one destination, refusing to overwrite.

    Whether the destination "exists" is a purely structural check: any
    entry at that path (regular file, directory, or dangling symlink) counts,
    and file contents are never compared.
    """

    def __init__(self, display_root: Path | None = None):
        """Initialize the copier.

        Args:
            display_root: Directory that log lines are shown relative to
        """
        self._display_root = display_root

    def copy(self, source: Path, destination: Path) -> CopyOutcome:
        """Copy ``source`` to ``destination`` unless the destination exists.

        Args:
            source: Existing regular file to copy
            destination: Target path; missing ancestor directories are created

        Returns:
            CopyOutcome.CREATED or CopyOutcome.SKIPPED

        Raises:
            OSError: If the source cannot be read or the destination written
        """
        shown = display_path(destination, self._display_root)

        if os.path.lexists(destination):
            logger.warning("Skipped (already exists): %s", shown)
            return CopyOutcome.SKIPPED

        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        logger.info("Created: %s", shown)
        return CopyOutcome.CREATED
