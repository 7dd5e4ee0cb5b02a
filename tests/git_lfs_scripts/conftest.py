from __future__ import annotations

import pytest

from git_lfs_scripts.core.config import SKIP_PREFLIGHT_ENV_VAR
from git_lfs_scripts.core.testing import RecordingRunner


@pytest.fixture()
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def lines() -> list[str]:
    return []


@pytest.fixture()
def skip_preflight(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SKIP_PREFLIGHT_ENV_VAR, "1")
