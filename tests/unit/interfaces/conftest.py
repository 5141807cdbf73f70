"""Fixtures for interface-layer tests."""

from __future__ import annotations

import pytest

_ENV_VARS = (
    "INPUT_MODE",
    "INPUT_ROOT_DIRECTORY",
    "INPUT_IGNORE_FILE",
    "INPUT_MAX_FILES_PER_DIR",
    "INPUT_GROUP_THRESHOLD",
    "INPUT_UPDATE_COMMENT",
    "INPUT_IGNORED_PATHS",
    "INPUT_OUTPUT_FILE",
    "INPUT_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without any action inputs set."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
