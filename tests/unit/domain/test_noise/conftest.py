"""Fixtures for noise domain tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from prnoise.domain.noise.ignore import reload_ignore_rules


@pytest.fixture
def candidate_files() -> list[str]:
    return [
        "debug.log",
        "tmp/output.txt",
        ".vscode/settings.json",
        "index.js",
        "README.md",
    ]


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run in an empty directory and reset the shared rule cache around it."""
    monkeypatch.chdir(tmp_path)
    reload_ignore_rules()
    yield tmp_path
    (tmp_path / ".pr-noise-ignore").unlink(missing_ok=True)
    reload_ignore_rules()
