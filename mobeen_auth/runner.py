"""
Blocking invocation of external tools (package manager, code generator).
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one external command.

    Attributes:
        args: The argument list that was run
        returncode: Exit status, or None if the process never started
        error: Why the process could not be started, if it could not
    """

    args: list[str]
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def describe_failure(self) -> str:
        if self.error is not None:
            return self.error
        return f"Command failed: {' '.join(self.args)} (exit status {self.returncode})"


class CommandRunner(ABC):
    """Abstract interface for running an external command to completion."""

    @abstractmethod
    def run(self, args: list[str], cwd: Path) -> CommandResult:
        """
        Run ``args`` in ``cwd`` and wait for it to exit.

        Implementations report failures in the returned result and do not
        raise for them.
        """


class SubprocessRunner(CommandRunner):
    """Runs commands with subprocess, inheriting the parent's standard streams."""

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        logger.debug("Running %s in %s", " ".join(args), cwd)
        try:
            completed = subprocess.run(args, cwd=cwd, check=False)
        except (subprocess.SubprocessError, OSError, ValueError) as e:
            return CommandResult(args=list(args), returncode=None, error=f"Could not run {args[0]}: {e}")
        return CommandResult(args=list(args), returncode=completed.returncode)
