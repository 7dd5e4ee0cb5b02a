"""The unmigrate workflow: move matching files from Git LFS back to Git.

Untracks every token first, then renormalizes, commits and pushes. This
does not rewrite history, so collaborators do not need to re-clone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence

import typer

from .commands import LFS_UNTRACK
from .dry_run import format_dry_run_step
from .exceptions import InvocationError
from .orchestrator import Echo, run_patterns
from .patterns import ExpansionOptions
from .runner import CommandRunner, SubprocessRunner

__all__ = ["COMMIT_MESSAGE", "FOLLOW_UP_STEPS", "FollowUpStep", "run_unmigrate"]

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "Restore patterns to Git from Git LFS"


@dataclass(frozen=True)
class FollowUpStep:
    """A fixed git command run once after the untrack pass."""

    key: str
    argv: tuple[str, ...]
    display: str
    progress: str
    failure: str
    fatal: bool = True


FOLLOW_UP_STEPS: tuple[FollowUpStep, ...] = (
    FollowUpStep(
        key="renormalize",
        argv=("git", "add", "--renormalize", "."),
        display="git add --renormalize .",
        progress="Renormalizing files...",
        failure="Failed to renormalize",
    ),
    FollowUpStep(
        key="commit",
        argv=("git", "commit", "-m", COMMIT_MESSAGE),
        display=f'git commit -m "{COMMIT_MESSAGE}"',
        progress="Committing changes...",
        failure="No changes to commit",
        fatal=False,
    ),
    FollowUpStep(
        key="push",
        argv=("git", "push"),
        display="git push",
        progress="Pushing changes...",
        failure="Failed to push",
    ),
)


def run_unmigrate(
    tokens: Sequence[str],
    options: ExpansionOptions,
    *,
    runner: CommandRunner | None = None,
    echo: Echo | None = None,
) -> None:
    """Untrack ``tokens`` from Git LFS and restore the files to Git.

    In dry-run mode the untrack lines are followed by the three follow-up
    lines regardless of how many tokens were given. In live mode a failed
    untrack skips every follow-up step; a failed commit is reported and
    the push still runs.

    Raises:
        InvocationError: From the untrack pass, or from a fatal follow-up
            step (renormalize or push).
    """
    emit = echo or typer.echo
    runner = runner or SubprocessRunner()
    untrack_options = replace(options, command_label=LFS_UNTRACK.label)

    run_patterns(tokens, untrack_options, runner=runner, echo=emit)

    if options.dry_run:
        for step in FOLLOW_UP_STEPS:
            emit(format_dry_run_step(step.display))
        return

    for step in FOLLOW_UP_STEPS:
        emit(step.progress)
        outcome = runner.run(step.argv)
        if outcome.ok:
            continue
        if step.fatal:
            raise InvocationError(
                step.display,
                step.argv,
                outcome,
                message=f"{step.failure}: {outcome.describe()}",
            )
        logger.warning("%s exited with %s; continuing", step.display, outcome.describe())
        emit(step.failure)

    emit("Unmigration complete!")
