"""Repository preflight checks for the git and git-lfs front ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import subprocess

__all__ = [
    "GitPreflightIssue",
    "GitPreflightResult",
    "LFS_INSTALL_URL",
    "run_git_preflight",
]

LFS_INSTALL_URL = "https://git-lfs.com/"
_LFS_TRACK_HINT = 'git lfs track "*.extension"'
_NOT_A_REPOSITORY = "not a git repository (or any of the parent directories)"


@dataclass
class GitPreflightIssue:
    """Single preflight issue with optional remediation command."""

    code: str
    message: str
    remediation: str
    command: str | None = None


@dataclass
class GitPreflightResult:
    repo_root: Path
    errors: list[GitPreflightIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> GitPreflightIssue | None:
        return self.errors[0] if self.errors else None


@dataclass
class _GitCommandResult:
    returncode: int
    stderr: str


def _run_git(repo_root: Path, args: list[str], timeout: int = 15) -> _GitCommandResult:
    """Run a git probe quietly; only the exit status and diagnostics are kept."""
    try:
        completed = subprocess.run(
            ["git", *args],
            cwd=str(repo_root),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
        )
        return _GitCommandResult(completed.returncode, (completed.stderr or "").strip())
    except FileNotFoundError:
        return _GitCommandResult(127, "git executable not found on PATH")
    except subprocess.TimeoutExpired:
        return _GitCommandResult(124, f"git {' '.join(args)} timed out after {timeout}s")


def _first_line(text: str) -> str:
    return text.splitlines()[0] if text else ""


def _has_lfs_patterns(attributes: Path) -> bool:
    with attributes.open(encoding="utf-8", errors="replace") as handle:
        return any("filter=lfs" in line for line in handle)


def run_git_preflight(repo_root: Path, *, require_lfs: bool = False) -> GitPreflightResult:
    """Check that ``repo_root`` is a git repository, optionally one using LFS.

    Stops at the first failing check. Messages carry git's own diagnostic
    when it gave one.
    """
    root = repo_root.resolve()
    result = GitPreflightResult(repo_root=root)

    repo_check = _run_git(root, ["rev-parse", "--git-dir"])
    if repo_check.returncode != 0:
        # Ownership and permission failures are reported with git's wording.
        detail = _first_line(repo_check.stderr)
        message = _NOT_A_REPOSITORY
        if detail and _NOT_A_REPOSITORY not in detail:
            message = f"{message}: {detail}"
        result.errors.append(
            GitPreflightIssue(
                code="NOT_A_GIT_REPOSITORY",
                message=message,
                remediation="Run the command from inside a git working tree.",
                command="git status",
            )
        )
        return result

    if not require_lfs:
        return result

    lfs_check = _run_git(root, ["lfs", "version"])
    if lfs_check.returncode != 0:
        message = "Git LFS is not installed or not available."
        detail = _first_line(lfs_check.stderr)
        if detail:
            message = f"{message} ({detail})"
        result.errors.append(
            GitPreflightIssue(
                code="LFS_NOT_INSTALLED",
                message=message,
                remediation=f"Install from: {LFS_INSTALL_URL}",
                command="git lfs install",
            )
        )
        return result

    attributes = root / ".gitattributes"
    if not attributes.is_file():
        result.errors.append(
            GitPreflightIssue(
                code="LFS_NOT_CONFIGURED",
                message="Git LFS is not configured for this repository. No .gitattributes file found.",
                remediation="Set up Git LFS and track at least one pattern.",
                command=_LFS_TRACK_HINT,
            )
        )
        return result

    try:
        tracked = _has_lfs_patterns(attributes)
    except OSError as exc:
        result.errors.append(
            GitPreflightIssue(
                code="GITATTRIBUTES_UNREADABLE",
                message=f"error reading .gitattributes: {exc}",
                remediation="Check the permissions of .gitattributes.",
            )
        )
        return result

    if not tracked:
        result.errors.append(
            GitPreflightIssue(
                code="LFS_NOT_CONFIGURED",
                message="Git LFS is not configured for this repository. "
                "No LFS tracked patterns found in .gitattributes.",
                remediation="Track files with Git LFS first.",
                command=_LFS_TRACK_HINT,
            )
        )

    return result
