"""Tests for the umbrella git-lfs-scripts app."""

from __future__ import annotations

from typer.testing import CliRunner

from git_lfs_scripts import __version__
from git_lfs_scripts.cli.helpers import CliState
from git_lfs_scripts.cli.main import app
from git_lfs_scripts.core.testing import RecordingRunner

runner = CliRunner()


def test_help_lists_every_front_end() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("ls-files", "lfs-files", "lfs-track", "lfs-untrack", "unmigrate", "version"):
        assert name in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"git-lfs-scripts {__version__}"


def test_verbose_flag_is_recorded_on_state() -> None:
    state = CliState(runner=RecordingRunner())

    result = runner.invoke(app, ["-v", "ls-files", "-d", "zip"], obj=state)

    assert result.exit_code == 0, result.output
    assert state.verbose is True
    assert "DRY RUN: git ls-files *.zip" in result.output
