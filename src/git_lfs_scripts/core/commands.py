"""Descriptors for the underlying git commands each front end targets."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CommandSpec",
    "LS_FILES",
    "LFS_LS_FILES",
    "LFS_TRACK",
    "LFS_UNTRACK",
    "UNMIGRATE",
    "COMMANDS",
    "DOCUMENTATION_URL",
    "command_for_label",
    "get_command_string",
]

DOCUMENTATION_URL = "https://mslinn.com/git/5300-git-lfs-patterns-tracking.html"


@dataclass(frozen=True)
class CommandSpec:
    """A front end and the underlying command it wraps."""

    name: str
    program: str
    label: str
    title: str
    allows_empty: bool = False


LS_FILES = CommandSpec(
    name="ls-files",
    program="git-ls-files",
    label="git ls-files",
    title="Frontend for git ls-files with pattern permutation",
    allows_empty=True,
)

LFS_LS_FILES = CommandSpec(
    name="lfs-files",
    program="git-lfs-files",
    label="git lfs ls-files",
    title="Frontend for git lfs ls-files with pattern permutation",
    allows_empty=True,
)

LFS_TRACK = CommandSpec(
    name="lfs-track",
    program="git-lfs-track",
    label="git lfs track",
    title="Frontend for git lfs track with pattern permutation",
)

LFS_UNTRACK = CommandSpec(
    name="lfs-untrack",
    program="git-lfs-untrack",
    label="git lfs untrack",
    title="Frontend for git lfs untrack with pattern permutation",
)

# The compound workflow untracks first, so it shares the untrack label.
UNMIGRATE = CommandSpec(
    name="unmigrate",
    program="git-unmigrate",
    label=LFS_UNTRACK.label,
    title="Move matching files from Git LFS back to Git",
)

COMMANDS: dict[str, CommandSpec] = {
    spec.name: spec for spec in (LS_FILES, LFS_LS_FILES, LFS_TRACK, LFS_UNTRACK, UNMIGRATE)
}


def get_command_string(name: str) -> str:
    """Return the underlying command string for a front end name."""
    return COMMANDS[name].label


def command_for_label(label: str) -> CommandSpec | None:
    """Return the pattern front end whose underlying command is ``label``."""
    for spec in (LS_FILES, LFS_LS_FILES, LFS_TRACK, LFS_UNTRACK):
        if spec.label == label:
            return spec
    return None
