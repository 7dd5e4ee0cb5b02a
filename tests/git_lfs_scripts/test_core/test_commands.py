"""Tests for command descriptors."""

from __future__ import annotations

import pytest

from git_lfs_scripts.core.commands import (
    COMMANDS,
    LFS_LS_FILES,
    LFS_TRACK,
    LFS_UNTRACK,
    LS_FILES,
    command_for_label,
    get_command_string,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ls-files", "git ls-files"),
        ("lfs-files", "git lfs ls-files"),
        ("lfs-track", "git lfs track"),
        ("lfs-untrack", "git lfs untrack"),
        ("unmigrate", "git lfs untrack"),
    ],
)
def test_get_command_string(name: str, expected: str) -> None:
    assert get_command_string(name) == expected


def test_get_command_string_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_command_string("lfs-migrate")


def test_only_list_commands_allow_empty_patterns() -> None:
    allows_empty = {name for name, spec in COMMANDS.items() if spec.allows_empty}

    assert allows_empty == {"ls-files", "lfs-files"}


def test_command_for_label() -> None:
    assert command_for_label("git lfs ls-files") is LFS_LS_FILES
    assert command_for_label("git lfs untrack") is LFS_UNTRACK
    assert command_for_label("git status") is None
    assert command_for_label("git lfs track") is LFS_TRACK
    assert command_for_label("git ls-files") is LS_FILES
