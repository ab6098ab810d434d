"""
Atomic file writer for generated project files.

Ensures that file writes are atomic so an interrupted run never leaves
a half-written config file behind, which a later run would then
treat as "already present".
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class AtomicWriteError(Exception):
    """Raised when content fails validation before being written."""

    pass


def _default_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class AtomicWriter:
    """Handles atomic JSON file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    The temporary file is created owner-only, so it is given the regular
    umask-derived mode before the rename.
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: JSON document to write

        Raises:
            AtomicWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            self._validate_json(content)

            os.chmod(temp_path, _default_file_mode())
            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _validate_json(self, content: str) -> None:
        """Check that the content is a JSON object.

        Raises:
            AtomicWriteError: If the content is not a JSON object
        """
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise AtomicWriteError(f"Generated JSON is not valid: {e}") from e

        if not isinstance(document, dict):
            raise AtomicWriteError("Generated JSON document must be an object")
