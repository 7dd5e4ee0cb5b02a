"""Command runner capability used by the orchestrator.

Production code runs the real ``git`` binary with the parent's standard
streams so that prompts from git or git-lfs stay interactive. Tests swap
in :class:`git_lfs_scripts.core.testing.RecordingRunner`.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

__all__ = ["CommandRunner", "RunOutcome", "SubprocessRunner"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    """Exit outcome of one external command."""

    returncode: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None

    def describe(self) -> str:
        if self.error:
            return self.error
        return f"exit status {self.returncode}"


class CommandRunner(Protocol):
    """Run a command to completion and report how it exited."""

    def run(self, argv: Sequence[str]) -> RunOutcome:
        ...


class SubprocessRunner:
    """Blocking runner with inherited stdin, stdout and stderr."""

    def run(self, argv: Sequence[str]) -> RunOutcome:
        args = list(argv)
        logger.debug("Running %s", " ".join(args))
        try:
            completed = subprocess.run(args, check=False)
        except FileNotFoundError:
            return RunOutcome(returncode=127, error=f"{args[0]} executable not found on PATH")
        except OSError as exc:
            return RunOutcome(returncode=126, error=f"could not start {args[0]}: {exc}")
        return RunOutcome(returncode=completed.returncode)
