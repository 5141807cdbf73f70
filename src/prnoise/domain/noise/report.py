"""Rendering of flagged paths into the human-readable noise report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from prnoise.domain.noise.taxonomy import normalize_path
from prnoise.shared.constants import (
    DEFAULT_GROUP_THRESHOLD,
    DEFAULT_MAX_FILES_PER_DIR,
    NO_NOISE_MESSAGE,
    REPORT_FOOTER,
    REPORT_HEADER_PREFIX,
    REPORT_HEADER_SUFFIX,
    ROOT_DIRECTORY_LABEL,
)
from prnoise.shared.types import FlaggedPath

# Sorts before every real directory name.
_ROOT_KEY = ""

# =============================================================================
# VALUE OBJECTS
# =============================================================================


@dataclass(frozen=True)
class ReportOptions:
    """Grouping limits applied when rendering a report."""

    max_files_per_dir: int = DEFAULT_MAX_FILES_PER_DIR
    group_threshold: int = DEFAULT_GROUP_THRESHOLD

    def __post_init__(self) -> None:
        if self.max_files_per_dir < 1:
            msg = f"max_files_per_dir must be positive, got {self.max_files_per_dir}"
            raise ValueError(msg)
        if self.group_threshold < 1:
            msg = f"group_threshold must be positive, got {self.group_threshold}"
            raise ValueError(msg)


@dataclass(frozen=True)
class DirectoryGroup:
    """Flagged basenames sharing one parent directory."""

    directory: str
    basenames: tuple[str, ...]

    @property
    def is_root(self) -> bool:
        return self.directory == _ROOT_KEY

    @property
    def display_name(self) -> str:
        return ROOT_DIRECTORY_LABEL if self.is_root else f"{self.directory}/"

    def path_of(self, basename: str) -> str:
        return basename if self.is_root else f"{self.directory}/{basename}"

    def __len__(self) -> int:
        return len(self.basenames)


@dataclass(frozen=True)
class NoiseReport:
    """Flagged paths together with their rendered report text."""

    flagged: tuple[FlaggedPath, ...]
    text: str

    @property
    def count(self) -> int:
        return len(self.flagged)

    @property
    def has_noise(self) -> bool:
        return bool(self.flagged)


# =============================================================================
# GROUPING
# =============================================================================


def group_by_directory(paths: Sequence[str]) -> list[DirectoryGroup]:
    """Partition *paths* by parent directory, sorted by key then basename."""
    buckets: dict[str, list[str]] = {}
    for path in paths:
        directory, sep, basename = normalize_path(path).rpartition("/")
        key = directory if sep else _ROOT_KEY
        buckets.setdefault(key, []).append(basename)
    return [
        DirectoryGroup(directory=key, basenames=tuple(sorted(names)))
        for key, names in sorted(buckets.items())
    ]


# =============================================================================
# RENDERING
# =============================================================================


def format_report(
    flagged: Sequence[str],
    options: ReportOptions | None = None,
) -> str:
    """Render *flagged* into the report text.

    Output is fully determined by the set of paths and *options*.
    """
    if not flagged:
        return NO_NOISE_MESSAGE

    opts = options or ReportOptions()
    lines = [f"{REPORT_HEADER_PREFIX}{len(flagged)}{REPORT_HEADER_SUFFIX}"]
    for group in group_by_directory(flagged):
        if len(group) >= opts.group_threshold:
            lines.append(_summary_line(group, opts.max_files_per_dir))
        else:
            lines.extend(f"- {group.path_of(name)}" for name in group.basenames)
    lines.append("")
    lines.append(REPORT_FOOTER)
    return "\n".join(lines)


def build_report(
    flagged: Sequence[str],
    options: ReportOptions | None = None,
) -> NoiseReport:
    """Pair the flagged paths with their rendered text."""
    return NoiseReport(
        flagged=tuple(FlaggedPath(p) for p in flagged),
        text=format_report(flagged, options),
    )


def _summary_line(group: DirectoryGroup, max_files: int) -> str:
    shown = ", ".join(group.basenames[:max_files])
    hidden = len(group) - max_files
    tail = f"... and {hidden} more)" if hidden > 0 else ")"
    return f"- {group.display_name} ({len(group)} files: {shown}{tail}"
