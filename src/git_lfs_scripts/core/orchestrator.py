"""Execution orchestration for pattern front ends.

One token always maps to one invocation of the underlying command, with
the token's expanded patterns as trailing arguments. Invocations run
strictly in input order and the first failure aborts the remaining
tokens.
"""

from __future__ import annotations

import logging
import shlex
from typing import Callable, Sequence

import typer

from .commands import CommandSpec, command_for_label
from .dry_run import format_dry_run_line
from .exceptions import InvocationError, PreconditionError
from .patterns import ExpansionOptions, expand_pattern
from .runner import CommandRunner, SubprocessRunner

__all__ = ["Echo", "require_tokens", "run_patterns"]

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def require_tokens(tokens: Sequence[str], command: CommandSpec) -> None:
    """Reject an empty token list for commands that need patterns.

    Raises:
        PreconditionError: If ``tokens`` is empty and ``command`` does not
            accept running without patterns.
    """
    if not tokens and not command.allows_empty:
        raise PreconditionError(f"{command.program} requires at least one PATTERN")


def run_patterns(
    tokens: Sequence[str],
    options: ExpansionOptions,
    command_label: str | None = None,
    *,
    runner: CommandRunner | None = None,
    echo: Echo | None = None,
) -> None:
    """Expand each token and either print or run the underlying command.

    Args:
        tokens: Bare extensions in the order the user supplied them.
        options: Parsed front end flags.
        command_label: Underlying command string, e.g. ``git lfs track``.
            Defaults to ``options.command_label``.
        runner: Command runner for live mode. Defaults to
            :class:`SubprocessRunner`.
        echo: Sink for dry-run lines. Defaults to ``typer.echo``.

    Raises:
        PreconditionError: If no command label is available.
        InvocationError: When a live invocation fails; names the token.
    """
    label = command_label or options.command_label
    if not label:
        raise PreconditionError("No underlying command was given")
    emit = echo or typer.echo

    if options.dry_run:
        for token in tokens:
            emit(format_dry_run_line(label, expand_pattern(token, options)))
        return

    runner = runner or SubprocessRunner()
    base_argv = shlex.split(label)

    if not tokens:
        spec = command_for_label(label)
        if spec is not None and spec.allows_empty:
            logger.debug("No patterns given, running %s", label)
            outcome = runner.run(base_argv)
            if not outcome.ok:
                raise InvocationError(label, base_argv, outcome)
        return

    for token in tokens:
        argv = [*base_argv, *expand_pattern(token, options)]
        logger.debug("Invoking %s for pattern %s", " ".join(argv), token)
        outcome = runner.run(argv)
        if not outcome.ok:
            raise InvocationError(label, argv, outcome, token=token)
