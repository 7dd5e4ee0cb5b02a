"""Core pattern permutation and execution orchestration."""

from __future__ import annotations

from .commands import (
    COMMANDS,
    LFS_LS_FILES,
    LFS_TRACK,
    LFS_UNTRACK,
    LS_FILES,
    UNMIGRATE,
    CommandSpec,
    command_for_label,
    get_command_string,
)
from .dry_run import DRY_RUN_PREFIX, format_dry_run_line, format_dry_run_step
from .exceptions import InvocationError, OrchestrationError, PreconditionError
from .orchestrator import require_tokens, run_patterns
from .patterns import ExpansionOptions, expand_pattern, expected_pattern_count
from .runner import CommandRunner, RunOutcome, SubprocessRunner
from .unmigrate import COMMIT_MESSAGE, FOLLOW_UP_STEPS, run_unmigrate

__all__ = [
    "COMMANDS",
    "COMMIT_MESSAGE",
    "CommandRunner",
    "CommandSpec",
    "DRY_RUN_PREFIX",
    "ExpansionOptions",
    "FOLLOW_UP_STEPS",
    "InvocationError",
    "LFS_LS_FILES",
    "LFS_TRACK",
    "LFS_UNTRACK",
    "LS_FILES",
    "OrchestrationError",
    "PreconditionError",
    "RunOutcome",
    "SubprocessRunner",
    "UNMIGRATE",
    "command_for_label",
    "expand_pattern",
    "expected_pattern_count",
    "format_dry_run_line",
    "format_dry_run_step",
    "get_command_string",
    "require_tokens",
    "run_patterns",
    "run_unmigrate",
]
