"""Tests for dry-run advisory lines."""

from __future__ import annotations

from git_lfs_scripts.core.dry_run import DRY_RUN_PREFIX, format_dry_run_line, format_dry_run_step


def test_format_dry_run_line_single_pattern() -> None:
    assert format_dry_run_line("git lfs track", ["*.zip"]) == "DRY RUN: git lfs track *.zip"


def test_format_dry_run_line_keeps_pattern_order() -> None:
    line = format_dry_run_line("git ls-files", ["*.mp3", "*.MP3", "**/*.mp3", "**/*.MP3"])

    assert line == "DRY RUN: git ls-files *.mp3 *.MP3 **/*.mp3 **/*.MP3"


def test_format_dry_run_step_has_no_trailing_space() -> None:
    assert format_dry_run_step("git push") == "DRY RUN: git push"


def test_prefix_is_stable() -> None:
    assert DRY_RUN_PREFIX == "DRY RUN: "
