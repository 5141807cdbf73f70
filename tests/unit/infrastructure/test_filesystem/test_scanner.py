"""Tests for the filesystem tree scanner."""

from __future__ import annotations

import os

from pathlib import Path

import pytest

from prnoise.domain.noise.ignore import IgnoreRuleSet
from prnoise.domain.noise.services import NoiseClassifier
from prnoise.infrastructure.filesystem import scanner as scanner_module
from prnoise.infrastructure.filesystem.scanner import FileTreeScanner
from prnoise.shared.exceptions import ScanError

# =============================================================================
# Fixtures
# =============================================================================


def _touch(root: Path, *paths: str) -> None:
    for rel in paths:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("x", encoding="utf-8")


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    _touch(
        tmp_path,
        "debug.log",
        "tmp/output.txt",
        ".vscode/settings.json",
        "index.js",
        "README.md",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _scanner(
    rules: str = "",
    explicit: frozenset[str] = frozenset(),
) -> FileTreeScanner:
    return FileTreeScanner(
        classifier=NoiseClassifier(
            ignore_rules=IgnoreRuleSet.parse(rules),
            explicit_ignores=explicit,
        )
    )


# =============================================================================
# Detection
# =============================================================================


def test_flags_files_and_noise_directories(repo: Path) -> None:
    flagged = _scanner().scan(".")

    assert sorted(flagged) == [".vscode", "debug.log", "tmp"]


def test_flagged_directory_is_not_descended(tmp_path: Path) -> None:
    _touch(tmp_path, "a/node_modules/x.js", "a/node_modules/deep/y.log")

    flagged = _scanner().scan(tmp_path / "a")

    assert flagged == [f"{(tmp_path / 'a').as_posix()}/node_modules"]


def test_paths_are_joined_onto_relative_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _touch(tmp_path, "a/node_modules/x.js")
    monkeypatch.chdir(tmp_path)

    assert _scanner().scan("a") == ["a/node_modules"]


def test_directory_with_noise_files_is_still_traversed(repo: Path) -> None:
    _touch(repo, "src/app.py", "src/notes.bak", "src/lib/trace.log")

    flagged = _scanner().scan(".")

    assert "src/notes.bak" in flagged
    assert "src/lib/trace.log" in flagged
    assert "src" not in flagged


def test_filename_matched_directory_is_flagged_and_descended(repo: Path) -> None:
    _touch(repo, "untitled folder/keep.py", "untitled folder/run.log")

    flagged = _scanner().scan(".")

    assert "untitled folder" in flagged
    assert "untitled folder/run.log" in flagged


def test_pre_order_puts_directory_before_children(repo: Path) -> None:
    _touch(repo, "untitled folder/run.log")

    flagged = _scanner().scan(".")

    assert flagged.index("untitled folder") < flagged.index("untitled folder/run.log")


def test_clean_tree_returns_empty(tmp_path: Path) -> None:
    _touch(tmp_path, "src/main.py", "README.md")

    assert _scanner().scan(tmp_path) == []


# =============================================================================
# Suppression
# =============================================================================


def test_ignore_rules_skip_entries(repo: Path) -> None:
    flagged = _scanner(rules="debug.log\ntmp").scan(".")

    assert flagged == [".vscode"]


def test_ignore_rule_prunes_whole_subtree(repo: Path) -> None:
    _touch(repo, "vendor/debug.log", "vendor/deep/cache.tmp")

    flagged = _scanner(rules="vendor").scan(".")

    assert not any(p.startswith("vendor") for p in flagged)


def test_explicit_ignores_skip_entries(repo: Path) -> None:
    flagged = _scanner(explicit=frozenset({".vscode"})).scan(".")

    assert sorted(flagged) == ["debug.log", "tmp"]


def test_suppression_matches_reported_path_under_nested_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _touch(tmp_path, "src/debug.log", "src/trace.log", "src/notes.bak")
    monkeypatch.chdir(tmp_path)

    flagged = _scanner(
        rules="src/debug.log",
        explicit=frozenset({"src/notes.bak"}),
    ).scan("src")

    assert flagged == ["src/trace.log"]


def test_root_relative_rule_does_not_suppress_under_nested_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _touch(tmp_path, "src/debug.log")
    monkeypatch.chdir(tmp_path)

    assert _scanner(rules="debug.log").scan("src") == ["src/debug.log"]


def test_nested_root_suppresses_directory_by_reported_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _touch(tmp_path, "a/node_modules/x.js", "a/node_modules/deep/y.log")
    monkeypatch.chdir(tmp_path)

    assert _scanner(rules="node_modules").scan("a") == ["a/node_modules"]
    assert _scanner(rules="a/node_modules").scan("a") == []


# =============================================================================
# Errors
# =============================================================================


def test_missing_root_raises_scan_error(tmp_path: Path) -> None:
    with pytest.raises(ScanError, match="absent"):
        _scanner().scan(tmp_path / "absent")


def test_unreadable_subdirectory_aborts_scan(
    repo: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _touch(repo, "locked/file.py")
    real_scandir = os.scandir

    def _scandir(path: str | Path) -> object:
        if Path(path).name == "locked":
            raise PermissionError(13, "Permission denied")
        return real_scandir(path)

    monkeypatch.setattr(scanner_module.os, "scandir", _scandir)

    with pytest.raises(ScanError, match="Permission denied"):
        _scanner().scan(".")
