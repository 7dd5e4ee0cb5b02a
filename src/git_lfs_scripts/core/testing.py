"""Recording command runner for tests.

Records every argument vector it is asked to run and answers with scripted
exit codes, so ordering and abort-on-first-failure can be checked without
spawning git.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .runner import RunOutcome

__all__ = ["RecordingRunner"]


@dataclass
class RecordingRunner:
    """Fake :class:`~git_lfs_scripts.core.runner.CommandRunner`.

    ``failures`` maps a trigger to an exit code. A trigger is either a
    single argument (matched against any element of the argv) or a full
    command string (matched against the space-joined argv prefix).
    """

    failures: dict[str, int] = field(default_factory=dict)
    calls: list[list[str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.calls)

    def fail_on(self, trigger: str, returncode: int = 1) -> "RecordingRunner":
        self.failures[trigger] = returncode
        return self

    def run(self, argv: Sequence[str]) -> RunOutcome:
        args = list(argv)
        self.calls.append(args)
        joined = " ".join(args)
        for trigger, returncode in self.failures.items():
            if trigger in args or joined.startswith(trigger):
                return RunOutcome(returncode=returncode)
        return RunOutcome(returncode=0)
