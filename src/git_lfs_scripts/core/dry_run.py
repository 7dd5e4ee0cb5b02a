"""Advisory lines printed instead of running commands."""

from __future__ import annotations

from typing import Sequence

__all__ = ["DRY_RUN_PREFIX", "format_dry_run_line", "format_dry_run_step"]

DRY_RUN_PREFIX = "DRY RUN: "


def format_dry_run_line(command_label: str, patterns: Sequence[str]) -> str:
    """Return the dry-run line for one token.

    Other tooling parses this text, so spacing and ordering are fixed.
    """
    return f"{DRY_RUN_PREFIX}{command_label} {' '.join(patterns)}"


def format_dry_run_step(command_text: str) -> str:
    """Return the dry-run line for a fixed command with no patterns."""
    return f"{DRY_RUN_PREFIX}{command_text}"
