"""Pattern permutation front ends for ls-files, lfs ls-files, track and untrack."""

from __future__ import annotations

from typing import Callable, List, Optional

import typer

from git_lfs_scripts.cli.helpers import (
    build_options,
    ensure_preflight,
    exit_with_error,
    resolve_state,
    tokens_from,
)
from git_lfs_scripts.core.commands import LFS_LS_FILES, LFS_TRACK, LFS_UNTRACK, LS_FILES, CommandSpec
from git_lfs_scripts.core.exceptions import OrchestrationError, PreconditionError
from git_lfs_scripts.core.orchestrator import require_tokens, run_patterns


def build_pattern_command(command: CommandSpec) -> Callable[..., None]:
    """Create the typer callback for one pattern front end."""

    def pattern_command(
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
        state = resolve_state(ctx)
        tokens = tokens_from(patterns)

        try:
            require_tokens(tokens, command)
        except PreconditionError as exc:
            exit_with_error(exc, ctx)

        options = build_options(command, both_cases=both_cases, everywhere=everywhere, dry_run=dry_run)
        try:
            if not dry_run and not command.allows_empty:
                ensure_preflight(require_lfs=False)
            run_patterns(tokens, options, runner=state.runner)
        except OrchestrationError as exc:
            exit_with_error(exc)

    pattern_command.__name__ = command.name.replace("-", "_")
    pattern_command.__doc__ = command.title
    return pattern_command


ls_files = build_pattern_command(LS_FILES)
lfs_files = build_pattern_command(LFS_LS_FILES)
lfs_track = build_pattern_command(LFS_TRACK)
lfs_untrack = build_pattern_command(LFS_UNTRACK)

PATTERN_COMMANDS: tuple[tuple[CommandSpec, Callable[..., None]], ...] = (
    (LS_FILES, ls_files),
    (LFS_LS_FILES, lfs_files),
    (LFS_TRACK, lfs_track),
    (LFS_UNTRACK, lfs_untrack),
)

__all__ = ["PATTERN_COMMANDS", "build_pattern_command", "lfs_files", "lfs_track", "lfs_untrack", "ls_files"]
