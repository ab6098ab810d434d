"""
Creation of the generated project config when it is missing.
"""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

from .merger import AtomicWriter
from .utils import display_path

logger = logging.getLogger(__name__)


class SynthesisOutcome(str, Enum):
    """Result of ensuring a generated config file."""

    CREATED = "created"
    ALREADY_PRESENT = "already_present"


class ConfigSynthesizer:
    """Writes a fixed default document to a path, at most once.

    An existing file is never read, validated or rewritten, whatever it
    contains.
    """

    def __init__(self, writer: AtomicWriter | None = None, display_root: Path | None = None):
        self._writer = writer or AtomicWriter()
        self._display_root = display_root

    def ensure(self, path: Path, default_content: dict[str, Any]) -> SynthesisOutcome:
        """Write ``default_content`` as JSON to ``path`` unless it exists.

        Args:
            path: Location of the generated config
            default_content: JSON-serialisable document

        Returns:
            SynthesisOutcome.CREATED or SynthesisOutcome.ALREADY_PRESENT

        Raises:
            OSError: If the file cannot be written
        """
        shown = display_path(path, self._display_root)

        if os.path.lexists(path):
            logger.warning("%s already exists, skipping", shown)
            return SynthesisOutcome.ALREADY_PRESENT

        content = json.dumps(default_content, indent=2) + "\n"
        self._writer.write(path, content)
        logger.info("Created %s", shown)
        return SynthesisOutcome.CREATED
