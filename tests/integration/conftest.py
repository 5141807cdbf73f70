"""Shared fixtures for integration tests."""

from __future__ import annotations

import json

from pathlib import Path

import pytest


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A checked-out repository containing a mix of source and noise."""
    repo = tmp_path / "repo"
    files = [
        "src/app.py",
        "README.md",
        "debug.log",
        "logs/a.log",
        "logs/b.log",
        "logs/c.log",
        "logs/d.log",
        "node_modules/left-pad/index.js",
        "fixtures/sample.log",
    ]
    for rel in files:
        target = repo / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("x", encoding="utf-8")
    (repo / ".pr-noise-ignore").write_text(
        "# keep fixtures\nfixtures/*\n", encoding="utf-8"
    )
    monkeypatch.chdir(repo)
    return repo


@pytest.fixture
def pr_event(tmp_path: Path) -> Path:
    """Create a GitHub event JSON file for a pull request."""
    event = {"pull_request": {"number": 42, "head": {"sha": "abc123def456"}}}
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps(event))
    return event_path


@pytest.fixture
def push_event(tmp_path: Path) -> Path:
    """Create a GitHub event JSON file for a push."""
    event_path = tmp_path / "push.json"
    event_path.write_text(json.dumps({"ref": "refs/heads/main"}))
    return event_path


@pytest.fixture
def github_output(tmp_path: Path) -> Path:
    path = tmp_path / "github_output"
    path.write_text("")
    return path
