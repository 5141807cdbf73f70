"""TOML-based configuration loader.

Reads ``[tool.prnoise]`` from ``pyproject.toml`` and produces a typed
``NoiseConfig`` dataclass.  Missing file or missing section → all defaults
apply (supports non-Python repos).
"""

from __future__ import annotations

import logging
import tomllib

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

from prnoise.shared.constants import (
    DEFAULT_GROUP_THRESHOLD,
    DEFAULT_IGNORE_FILE,
    DEFAULT_MAX_FILES_PER_DIR,
    DEFAULT_OUTPUT_FILE,
)
from prnoise.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# ── defaults ────────────────────────────────────────────────────────────
_DEFAULTS: dict[str, Any] = {
    "ignore_file": DEFAULT_IGNORE_FILE,
    "max_files_per_dir": DEFAULT_MAX_FILES_PER_DIR,
    "group_threshold": DEFAULT_GROUP_THRESHOLD,
    "update_comment": False,
    "ignored_paths": [],
    "output_file": DEFAULT_OUTPUT_FILE,
}

_ALL_KNOWN_KEYS = set(_DEFAULTS)


@dataclass(frozen=True)
class NoiseConfig:
    """Typed configuration produced by the TOML loader."""

    ignore_file: str = DEFAULT_IGNORE_FILE
    max_files_per_dir: int = DEFAULT_MAX_FILES_PER_DIR
    group_threshold: int = DEFAULT_GROUP_THRESHOLD
    update_comment: bool = False
    ignored_paths: list[str] = field(default_factory=list[str])
    output_file: str = DEFAULT_OUTPUT_FILE


def load_noise_config(project_root: Path | None = None) -> NoiseConfig:
    """Load prnoise configuration from ``pyproject.toml``.

    Merge order (later wins): built-in defaults → ``[tool.prnoise]``.

    Args:
        project_root: Directory containing ``pyproject.toml``.
            Defaults to ``Path.cwd()``.

    Returns:
        A frozen ``NoiseConfig`` dataclass.

    Raises:
        ConfigurationError: On TOML parse errors or invalid values.
    """
    if project_root is None:
        project_root = Path.cwd()

    merged: dict[str, Any] = dict(_DEFAULTS)

    tool_section = _read_tool_section(project_root / "pyproject.toml")
    if tool_section is not None:
        _warn_unknown_keys(tool_section)
        for key, value in tool_section.items():
            if key in _ALL_KNOWN_KEYS:
                merged[key] = value

    _validate(merged)

    return NoiseConfig(
        ignore_file=str(merged["ignore_file"]),
        max_files_per_dir=int(merged["max_files_per_dir"]),
        group_threshold=int(merged["group_threshold"]),
        update_comment=bool(merged["update_comment"]),
        ignored_paths=[str(p) for p in merged["ignored_paths"]],
        output_file=str(merged["output_file"]),
    )


# ── internal helpers ────────────────────────────────────────────────────


def _read_tool_section(toml_path: Path) -> dict[str, Any] | None:
    """Read ``[tool.prnoise]`` from *toml_path*, or ``None`` if absent."""
    if not toml_path.is_file():
        return None
    try:
        with toml_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {toml_path}: {exc}"
        raise ConfigurationError(msg) from exc
    tool: dict[str, Any] | None = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section: dict[str, Any] | None = tool.get("prnoise")
    if not isinstance(section, dict):
        return None
    return cast(dict[str, Any], section)


def _warn_unknown_keys(section: dict[str, Any]) -> None:
    """Log a warning for any keys not in the known set."""
    for key in section:
        if key not in _ALL_KNOWN_KEYS:
            logger.warning("Unknown key in [tool.prnoise]: %r", key)


def _validate(merged: dict[str, Any]) -> None:
    """Validate types and numeric ranges."""
    for key in ("max_files_per_dir", "group_threshold"):
        value = merged[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            msg = f"{key} must be a positive integer, got {value!r}"
            raise ConfigurationError(msg)

    if not isinstance(merged["update_comment"], bool):
        msg = f"update_comment must be a boolean, got {merged['update_comment']!r}"
        raise ConfigurationError(msg)

    if not isinstance(merged["ignored_paths"], list):
        msg = f"ignored_paths must be a list, got {merged['ignored_paths']!r}"
        raise ConfigurationError(msg)
