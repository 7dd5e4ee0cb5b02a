"""CLI command modules for git-lfs-scripts."""

from __future__ import annotations

import typer

from git_lfs_scripts.cli.helpers import CONTEXT_SETTINGS, build_epilog
from git_lfs_scripts.core.commands import UNMIGRATE

from .patterns import PATTERN_COMMANDS
from .unmigrate import UNMIGRATE_FOOTER, unmigrate


def register_commands(app: typer.Typer) -> None:
    """Attach every front end to ``app`` as a subcommand."""
    for command, callback in PATTERN_COMMANDS:
        app.command(
            name=command.name,
            epilog=build_epilog(command),
            context_settings=CONTEXT_SETTINGS,
        )(callback)
    app.command(
        name=UNMIGRATE.name,
        epilog=build_epilog(UNMIGRATE, invocation="git unmigrate", footer=UNMIGRATE_FOOTER),
        context_settings=CONTEXT_SETTINGS,
    )(unmigrate)


__all__ = ["register_commands"]
