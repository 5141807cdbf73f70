"""Built-in taxonomy of noise filename and directory patterns."""

from __future__ import annotations

import re

from prnoise.shared.types import NoiseKind

# =============================================================================
# FILENAME FAMILY
# =============================================================================

_FILE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\.log$"),
    re.compile(r"\.tmp$"),
    re.compile(r"\.bak$"),
    re.compile(r"\.swp$"),
    re.compile(r"debug\.", re.IGNORECASE),
    re.compile(r"test-output", re.IGNORECASE),
    re.compile(r"\.orig$"),
    re.compile(r"scratch\.", re.IGNORECASE),
    re.compile(r"temp\.", re.IGNORECASE),
    re.compile(r"\.draft$"),
    re.compile(r"\.checkpoint$"),
    re.compile(r"\.autosave$"),
    re.compile(r"untitled", re.IGNORECASE),
    re.compile(r"new-file", re.IGNORECASE),
    re.compile(r"\.DS_Store$"),
    re.compile(r"Thumbs\.db$"),
    re.compile(r"\.pyc$"),
    re.compile(r"\.pyo$"),
)

# =============================================================================
# DIRECTORY FAMILY
# =============================================================================

NOISE_DIRECTORIES: tuple[str, ...] = (
    ".vscode",
    ".idea",
    ".pytest_cache",
    "coverage",
    "__pycache__",
    "node_modules",
    "tmp",
    "temp",
    "dist",
    "build",
    "scratch",
    "debug",
    "experiments",
    ".cache",
    ".next",
    ".nuxt",
    "out",
    "output",
)

_DIR_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"^{re.escape(name)}/") for name in NOISE_DIRECTORIES
)


# =============================================================================
# MATCHING
# =============================================================================


def normalize_path(path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return path.replace("\\", "/")


def match(path: str, *, is_dir: bool = False) -> NoiseKind | None:
    """Return which pattern family flags *path*, or ``None``.

    A directory entry is probed with a trailing separator first so that
    ``node_modules`` itself counts as a directory-family match and its
    subtree can be pruned by the caller.
    """
    normalized = normalize_path(path)
    if is_dir and _matches_directory(normalized.rstrip("/") + "/"):
        return NoiseKind.DIRECTORY
    if _matches_directory(normalized):
        return NoiseKind.DIRECTORY
    if any(pattern.search(normalized) for pattern in _FILE_PATTERNS):
        return NoiseKind.FILE
    return None


def classify_by_name(path: str) -> bool:
    """Whether *path* matches either family of the built-in taxonomy."""
    return match(path) is not None


def _matches_directory(normalized: str) -> bool:
    return any(pattern.match(normalized) for pattern in _DIR_PATTERNS)
