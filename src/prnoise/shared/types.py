"""Domain-specific types that prevent primitive obsession."""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# NEWTYPES
# =============================================================================


class FlaggedPath(str):
    """A path, relative to the scan root, judged to be noise."""


# =============================================================================
# ENUMS
# =============================================================================


class NoiseKind(StrEnum):
    """Which pattern family flagged a path."""

    FILE = "file"
    DIRECTORY = "directory"


class ReconcileOutcome(StrEnum):
    """The single action taken on the review thread."""

    SKIPPED = "skipped"
    NOOP = "noop"
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
