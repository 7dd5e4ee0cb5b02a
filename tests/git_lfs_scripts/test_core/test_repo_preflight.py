"""Tests for repository and Git LFS preflight checks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import subprocess
from unittest.mock import patch

from git_lfs_scripts.core.git_preflight import _run_git, run_git_preflight

_RUN_GIT = "git_lfs_scripts.core.git_preflight._run_git"


@dataclass
class _FakeCmdResult:
    returncode: int
    stderr: str = ""


def _responses(*results: _FakeCmdResult):
    remaining = iter(results)
    return lambda *_args, **_kwargs: next(remaining)


def test_real_non_repo_is_rejected(tmp_path: Path) -> None:
    result = run_git_preflight(tmp_path)

    assert not result.passed
    assert result.first_error is not None
    assert result.first_error.code == "NOT_A_GIT_REPOSITORY"


def test_real_repo_passes_without_lfs_requirement(tmp_path: Path) -> None:
    subprocess.run(["git", "init"], cwd=tmp_path, check=True, capture_output=True)

    result = run_git_preflight(tmp_path)

    assert result.passed
    assert result.first_error is None


def test_non_repo_stops_before_lfs_checks(tmp_path: Path) -> None:
    with patch(_RUN_GIT, return_value=_FakeCmdResult(returncode=128, stderr="fatal: not a git repository")) as run_git:
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.first_error is not None
    assert result.first_error.code == "NOT_A_GIT_REPOSITORY"
    assert run_git.call_count == 1


def test_lfs_not_installed(tmp_path: Path) -> None:
    with patch(_RUN_GIT, side_effect=_responses(_FakeCmdResult(0), _FakeCmdResult(1))):
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.first_error is not None
    assert result.first_error.code == "LFS_NOT_INSTALLED"
    assert "https://git-lfs.com/" in result.first_error.remediation


def test_missing_gitattributes(tmp_path: Path) -> None:
    with patch(_RUN_GIT, side_effect=_responses(_FakeCmdResult(0), _FakeCmdResult(0))):
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.first_error is not None
    assert result.first_error.code == "LFS_NOT_CONFIGURED"
    assert "No .gitattributes file found." in result.first_error.message


def test_gitattributes_without_lfs_patterns(tmp_path: Path) -> None:
    (tmp_path / ".gitattributes").write_text("*.txt text eol=lf\n", encoding="utf-8")

    with patch(_RUN_GIT, side_effect=_responses(_FakeCmdResult(0), _FakeCmdResult(0))):
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.first_error is not None
    assert result.first_error.code == "LFS_NOT_CONFIGURED"
    assert "No LFS tracked patterns" in result.first_error.message
    assert result.first_error.command == 'git lfs track "*.extension"'


def test_gitattributes_with_lfs_patterns_passes(tmp_path: Path) -> None:
    (tmp_path / ".gitattributes").write_text(
        "*.txt text\n*.mp3 filter=lfs diff=lfs merge=lfs -text\n",
        encoding="utf-8",
    )

    with patch(_RUN_GIT, side_effect=_responses(_FakeCmdResult(0), _FakeCmdResult(0))):
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.passed
    assert result.repo_root == tmp_path.resolve()


def test_missing_git_executable_is_reported(tmp_path: Path) -> None:
    with patch(_RUN_GIT, return_value=_FakeCmdResult(returncode=127, stderr="git executable not found on PATH")):
        result = run_git_preflight(tmp_path)

    issue = result.first_error
    assert issue is not None
    assert issue.code == "NOT_A_GIT_REPOSITORY"
    assert issue.message.endswith(": git executable not found on PATH")
    assert issue.command == "git status"


def test_plain_not_a_repository_message_is_not_repeated(tmp_path: Path) -> None:
    stderr = "fatal: not a git repository (or any of the parent directories): .git"
    with patch(_RUN_GIT, return_value=_FakeCmdResult(returncode=128, stderr=stderr)):
        result = run_git_preflight(tmp_path)

    assert result.first_error is not None
    assert result.first_error.message == "not a git repository (or any of the parent directories)"


def test_lfs_failure_carries_git_diagnostic(tmp_path: Path) -> None:
    lfs_missing = _FakeCmdResult(1, "git: 'lfs' is not a git command. See 'git --help'.")
    with patch(_RUN_GIT, side_effect=_responses(_FakeCmdResult(0), lfs_missing)):
        result = run_git_preflight(tmp_path, require_lfs=True)

    assert result.first_error is not None
    assert "'lfs' is not a git command" in result.first_error.message


def test_run_git_discards_stdout(tmp_path: Path) -> None:
    subprocess.run(["git", "init"], cwd=tmp_path, check=True, capture_output=True)

    outcome = _run_git(tmp_path, ["rev-parse", "--git-dir"])

    assert outcome.returncode == 0
    assert outcome.stderr == ""
