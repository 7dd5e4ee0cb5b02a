"""``git unmigrate`` - move matching files from Git LFS back to Git.

Reverses ``git lfs migrate import`` without rewriting history, so other
users do not need to re-clone. Requires a git repository with Git LFS
installed and at least one LFS pattern in ``.gitattributes``.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from git_lfs_scripts.cli.helpers import (
    build_options,
    ensure_preflight,
    exit_with_error,
    resolve_state,
    tokens_from,
)
from git_lfs_scripts.core.commands import UNMIGRATE
from git_lfs_scripts.core.dry_run import format_dry_run_step
from git_lfs_scripts.core.exceptions import OrchestrationError, PreconditionError
from git_lfs_scripts.core.orchestrator import require_tokens
from git_lfs_scripts.core.unmigrate import FOLLOW_UP_STEPS, run_unmigrate

UNMIGRATE_FOOTER = (
    "Every unmigrate dry run ends with:",
    *(f"  {format_dry_run_step(step.display)}" for step in FOLLOW_UP_STEPS),
)


def unmigrate(
    ctx: typer.Context,
    patterns: Optional[List[str]] = typer.Argument(
        None,
        metavar="PATTERN ...",
        help="Bare file extensions, e.g. mp3 pdf zip",
        show_default=False,
    ),
    both_cases: bool = typer.Option(
        False, "--bothcases", "--case", "-c", help="Expand pattern to upper and lower case, helpful for media files"
    ),
    dry_run: bool = typer.Option(
        False, "--dryrun", "--dry-run", "-d", help="Dry run (display filename patterns that would be affected)"
    ),
    everywhere: bool = typer.Option(
        False, "--everywhere", "-e", help="Apply the pattern everywhere (all directories in the Git repository)"
    ),
) -> None:
    """Move matching files from Git LFS back to Git.

    Untracks the expanded patterns, then runs git add --renormalize ., commits
    and pushes. Git history is not rewritten. This might take a long time if
    many large files are moved back to Git.
    """
    state = resolve_state(ctx)
    tokens = tokens_from(patterns)

    try:
        require_tokens(tokens, UNMIGRATE)
    except PreconditionError as exc:
        exit_with_error(exc, ctx)

    options = build_options(UNMIGRATE, both_cases=both_cases, everywhere=everywhere, dry_run=dry_run)
    try:
        ensure_preflight(require_lfs=True)
        run_unmigrate(tokens, options, runner=state.runner)
    except OrchestrationError as exc:
        exit_with_error(exc)


__all__ = ["UNMIGRATE_FOOTER", "unmigrate"]
