"""Entry points: the umbrella ``git-lfs-scripts`` app and one app per git subcommand."""

from __future__ import annotations

from typing import Callable

import typer

from git_lfs_scripts import __version__
from git_lfs_scripts.cli.commands import register_commands
from git_lfs_scripts.cli.commands.patterns import lfs_files, lfs_track, lfs_untrack, ls_files
from git_lfs_scripts.cli.commands.unmigrate import UNMIGRATE_FOOTER, unmigrate
from git_lfs_scripts.cli.helpers import CONTEXT_SETTINGS, CliState, build_epilog, console
from git_lfs_scripts.core.commands import LFS_LS_FILES, LFS_TRACK, LFS_UNTRACK, LS_FILES, UNMIGRATE, CommandSpec

app = typer.Typer(
    name="git-lfs-scripts",
    help="Wildcard extension front ends for git ls-files, git lfs ls-files/track/untrack and git unmigrate.",
    add_completion=False,
    no_args_is_help=True,
    context_settings=CONTEXT_SETTINGS,
    rich_markup_mode="rich",
)


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each underlying command to stderr"),
) -> None:
    """Wildcard extension front ends for git and git-lfs."""
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    ctx.obj.verbose = verbose


register_commands(app)


@app.command()
def version() -> None:
    """Show the git-lfs-scripts version."""
    console.print(f"git-lfs-scripts {__version__}", highlight=False)


def build_standalone_app(
    command: CommandSpec,
    func: Callable[..., None],
    *,
    invocation: str | None = None,
    footer: tuple[str, ...] = (),
) -> typer.Typer:
    """Wrap one front end in its own single-command Typer app."""
    standalone = typer.Typer(
        name=command.program,
        add_completion=False,
        context_settings=CONTEXT_SETTINGS,
        rich_markup_mode="rich",
    )
    standalone.command(
        name=command.program,
        epilog=build_epilog(command, invocation=invocation, footer=footer),
        context_settings=CONTEXT_SETTINGS,
    )(func)
    return standalone


ls_files_app = build_standalone_app(LS_FILES, ls_files)
lfs_files_app = build_standalone_app(LFS_LS_FILES, lfs_files)
lfs_track_app = build_standalone_app(LFS_TRACK, lfs_track)
lfs_untrack_app = build_standalone_app(LFS_UNTRACK, lfs_untrack)
unmigrate_app = build_standalone_app(UNMIGRATE, unmigrate, invocation="git unmigrate", footer=UNMIGRATE_FOOTER)


def main() -> None:
    app()


def ls_files_main() -> None:
    ls_files_app(prog_name=LS_FILES.program)


def lfs_files_main() -> None:
    lfs_files_app(prog_name=LFS_LS_FILES.program)


def lfs_track_main() -> None:
    lfs_track_app(prog_name=LFS_TRACK.program)


def lfs_untrack_main() -> None:
    lfs_untrack_app(prog_name=LFS_UNTRACK.program)


def unmigrate_main() -> None:
    unmigrate_app(prog_name=UNMIGRATE.program)


if __name__ == "__main__":
    main()
