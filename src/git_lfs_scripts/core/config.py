"""Environment configuration and logging setup."""

from __future__ import annotations

import logging
import os

__all__ = [
    "DEBUG_ENV_VAR",
    "SKIP_PREFLIGHT_ENV_VAR",
    "configure_logging",
    "is_debug_enabled",
    "is_preflight_skipped",
]

DEBUG_ENV_VAR = "GIT_LFS_SCRIPTS_DEBUG"
SKIP_PREFLIGHT_ENV_VAR = "GIT_LFS_SCRIPTS_SKIP_PREFLIGHT"
_TRUTHY_VALUES = {"1", "true", "yes", "on"}

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _env_flag(name: str) -> bool:
    raw_value = os.getenv(name, "")
    return raw_value.strip().lower() in _TRUTHY_VALUES


def is_debug_enabled() -> bool:
    """Return True when debug logging is requested through the environment."""
    return _env_flag(DEBUG_ENV_VAR)


def is_preflight_skipped() -> bool:
    """Return True when repository preflight checks should be bypassed."""
    return _env_flag(SKIP_PREFLIGHT_ENV_VAR)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, else WARNING."""
    level = logging.DEBUG if verbose or is_debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("git_lfs_scripts").setLevel(level)
