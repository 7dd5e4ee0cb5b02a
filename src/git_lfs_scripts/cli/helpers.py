"""Shared helpers for the git-lfs-scripts command line front ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import typer
from rich.console import Console
from rich.markup import escape

from git_lfs_scripts.core.commands import DOCUMENTATION_URL, CommandSpec
from git_lfs_scripts.core.config import configure_logging, is_preflight_skipped
from git_lfs_scripts.core.dry_run import format_dry_run_line
from git_lfs_scripts.core.exceptions import OrchestrationError, PreconditionError
from git_lfs_scripts.core.git_preflight import run_git_preflight
from git_lfs_scripts.core.patterns import ExpansionOptions, expand_pattern
from git_lfs_scripts.core.runner import CommandRunner, SubprocessRunner

__all__ = [
    "CONTEXT_SETTINGS",
    "CliState",
    "build_epilog",
    "build_options",
    "console",
    "ensure_preflight",
    "err_console",
    "exit_with_error",
    "resolve_state",
    "tokens_from",
]

console = Console()
err_console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

RELATED_COMMANDS = "git-lfs-files, git-ls-files, git-lfs-track, git-unmigrate, git-lfs-untrack"

# (short flags, tokens) pairs shown in every help epilog.
_EXAMPLES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("d", ("zip",)),
    ("d", ("pdf", "zip")),
    ("dc", ("mp3",)),
    ("dc", ("mp3", "mp4")),
    ("de", ("zip",)),
    ("dce", ("mp3",)),
    ("dce", ("mp3", "mp4")),
)


@dataclass
class CliState:
    """Per-invocation state shared through ``ctx.obj``."""

    runner: CommandRunner = field(default_factory=SubprocessRunner)
    verbose: bool = False


def resolve_state(ctx: typer.Context) -> CliState:
    """Return the :class:`CliState` for this invocation, creating it if needed."""
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    configure_logging(ctx.obj.verbose)
    return ctx.obj


def build_options(
    command: CommandSpec,
    *,
    both_cases: bool,
    everywhere: bool,
    dry_run: bool,
) -> ExpansionOptions:
    return ExpansionOptions(
        both_cases=both_cases,
        everywhere=everywhere,
        dry_run=dry_run,
        command_label=command.label,
    )


def build_epilog(
    command: CommandSpec,
    invocation: str | None = None,
    footer: Sequence[str] = (),
) -> str:
    """Render usage examples with the exact dry-run output they produce."""
    invocation = invocation or command.program
    lines: list[str] = ["EXAMPLES:"]
    for flags, tokens in _EXAMPLES:
        options = ExpansionOptions(
            both_cases="c" in flags,
            everywhere="e" in flags,
            dry_run=True,
        )
        lines.append(f"  {invocation} -{flags} {' '.join(tokens)}")
        for index, token in enumerate(tokens):
            prefix = "# Output:" if index == 0 else "#        "
            lines.append(f"  {prefix} {format_dry_run_line(command.label, expand_pattern(token, options))}")
    lines.extend(footer)
    lines.append(f"SEE ALSO: {RELATED_COMMANDS}")
    lines.append(f"Documentation: {DOCUMENTATION_URL}")
    return "\n\n".join(lines)


def ensure_preflight(*, require_lfs: bool, repo_root: Path | None = None) -> None:
    """Run repository preflight checks unless disabled by the environment.

    Raises:
        PreconditionError: If any check fails.
    """
    if is_preflight_skipped():
        return
    result = run_git_preflight(repo_root or Path.cwd(), require_lfs=require_lfs)
    issue = result.first_error
    if issue is None:
        return
    message = f"{issue.message}\n{issue.remediation}"
    if issue.command:
        message += f"\n  {issue.command}"
    raise PreconditionError(message)


def exit_with_error(exc: OrchestrationError, ctx: typer.Context | None = None) -> None:
    """Report ``exc`` once on stderr and exit with status 1.

    When ``ctx`` is given the command help is printed first.
    """
    if ctx is not None:
        typer.echo(ctx.get_help())
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(1)


def tokens_from(patterns: Sequence[str] | None) -> list[str]:
    return list(patterns or [])
