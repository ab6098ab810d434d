"""
Utility functions for the mobeen_auth installer.
"""

from __future__ import annotations

from pathlib import Path


def display_path(path: Path, root: Path | None = None) -> str:
    """Format a path for log output, relative to ``root`` when below it.

    Examples:
        display_path(Path("/app/src/auth.ts"), Path("/app")) -> "src/auth.ts"
        display_path(Path("/tmp/x"), Path("/app")) -> "/tmp/x"
        display_path(Path("/app"), Path("/app")) -> "."

    Args:
        path: The path to display
        root: Optional directory to shorten against

    Returns:
        Printable path string
    """
    if root is None:
        return str(path)
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
