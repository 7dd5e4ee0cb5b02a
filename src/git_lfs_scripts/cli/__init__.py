"""Command line front ends for git and git-lfs pattern commands."""

from .helpers import CliState, console, err_console

__all__ = ["CliState", "console", "err_console"]
