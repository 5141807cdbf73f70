"""Repository protocols for the noise bounded context."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from prnoise.shared.types import FlaggedPath

if TYPE_CHECKING:
    from prnoise.domain.noise.reconciler import ReviewComment

# =============================================================================
# PROTOCOLS
# =============================================================================


class CommentThread(Protocol):
    """Interface to the comments of one pull request."""

    def list(self) -> Sequence[ReviewComment]:
        """Return the current comments in listing order."""
        ...

    def create(self, body: str) -> None:
        """Post a new comment."""
        ...

    def update(self, comment_id: int, body: str) -> None:
        """Replace the body of an existing comment."""
        ...

    def delete(self, comment_id: int) -> None:
        """Remove an existing comment."""
        ...


class TreeScannerPort(Protocol):
    """Interface for walking a source tree and collecting noise."""

    def scan(self, root: str | Path) -> list[FlaggedPath]:
        """Return flagged paths in traversal order."""
        ...
