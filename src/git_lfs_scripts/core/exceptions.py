"""Exception hierarchy for pattern orchestration."""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import RunOutcome

__all__ = ["OrchestrationError", "PreconditionError", "InvocationError"]


class OrchestrationError(Exception):
    """Base exception for orchestration errors."""

    pass


class PreconditionError(OrchestrationError):
    """Raised before any command runs, e.g. when patterns are mandatory."""

    pass


class InvocationError(OrchestrationError):
    """An external command failed or could not be started.

    ``token`` names the pattern being processed; it is ``None`` for the
    fixed follow-up steps of the unmigrate workflow.
    """

    def __init__(
        self,
        label: str,
        argv: Sequence[str],
        outcome: "RunOutcome",
        token: str | None = None,
        message: str | None = None,
    ):
        self.label = label
        self.argv = list(argv)
        self.outcome = outcome
        self.token = token
        if message is None:
            if token is not None:
                message = f"{label} failed for pattern {token}: {outcome.describe()}"
            else:
                message = f"{label} failed: {outcome.describe()}"
        super().__init__(message)
