"""Wildmatch pattern permutation for bare file extensions.

A token such as ``mp3`` becomes an ordered list of git ignore/attributes
patterns. The order is always local-lowercase, local-uppercase,
recursive-lowercase, recursive-uppercase, restricted to the members the
options select.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ExpansionOptions",
    "LOCAL_PREFIX",
    "RECURSIVE_PREFIX",
    "expand_pattern",
    "expected_pattern_count",
]

LOCAL_PREFIX = "*."
RECURSIVE_PREFIX = "**/*."


@dataclass(frozen=True)
class ExpansionOptions:
    """Parsed front end flags, built once and never mutated."""

    both_cases: bool = False
    everywhere: bool = False
    dry_run: bool = False
    command_label: str = ""


def _case_variants(token: str, both_cases: bool) -> list[str]:
    # Without both_cases the token is used as typed.
    # Duplicates are kept: "7z" folds to "7z" twice.
    if both_cases:
        return [token.lower(), token.upper()]
    return [token]


def expand_pattern(token: str, options: ExpansionOptions) -> list[str]:
    """Expand ``token`` into the glob patterns selected by ``options``.

    The token is not validated; callers reject empty input where it matters.
    """
    variants = _case_variants(token, options.both_cases)
    patterns = [LOCAL_PREFIX + variant for variant in variants]
    if options.everywhere:
        patterns.extend(RECURSIVE_PREFIX + variant for variant in variants)
    return patterns


def expected_pattern_count(options: ExpansionOptions) -> int:
    """Number of patterns ``expand_pattern`` yields for any token."""
    return (2 if options.both_cases else 1) * (2 if options.everywhere else 1)
