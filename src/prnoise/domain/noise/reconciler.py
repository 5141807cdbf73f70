"""Lifecycle of the single managed noise comment on a pull request."""

from __future__ import annotations

import logging

from dataclasses import dataclass

from prnoise.domain.noise.report import NoiseReport
from prnoise.domain.noise.repositories import CommentThread
from prnoise.shared.constants import (
    REPORT_FOOTER,
    REPORT_HEADER_PREFIX,
    REPORT_HEADER_SUFFIX,
    REPORT_MARKER,
)
from prnoise.shared.types import ReconcileOutcome

logger = logging.getLogger(__name__)

# =============================================================================
# ENTITIES
# =============================================================================


@dataclass(frozen=True)
class ReviewComment:
    """A comment on the pull request conversation."""

    id: int
    author_is_automation: bool
    body: str


def is_marker_comment(comment: ReviewComment) -> bool:
    """Whether *comment* is a noise report previously posted by automation.

    Comments carrying the hidden tag are recognised directly; older reports
    without it are recognised by their header and footer text.
    """
    if not comment.author_is_automation:
        return False
    body = comment.body
    if REPORT_MARKER in body:
        return True
    return (
        body.startswith(REPORT_HEADER_PREFIX)
        and REPORT_HEADER_SUFFIX.strip() in body
        and REPORT_FOOTER in body
    )


def render_comment_body(report: NoiseReport) -> str:
    """Report text followed by the hidden marker tag."""
    return f"{report.text}\n\n{REPORT_MARKER}"


# =============================================================================
# RECONCILER
# =============================================================================


@dataclass
class CommentReconciler:
    """Creates, updates, or deletes the managed comment.

    Issues at most one mutating call per ``reconcile``.
    """

    thread: CommentThread
    update_mode: bool = False

    def reconcile(
        self,
        report: NoiseReport,
        *,
        is_pull_request: bool,
    ) -> ReconcileOutcome:
        if not is_pull_request:
            logger.info("Not a pull request, skipping comment")
            return ReconcileOutcome.SKIPPED

        if not report.has_noise:
            if not self.update_mode:
                return ReconcileOutcome.NOOP
            existing = self._find_existing()
            if existing is None:
                return ReconcileOutcome.NOOP
            self.thread.delete(existing.id)
            logger.info("Deleted stale noise comment %d", existing.id)
            return ReconcileOutcome.DELETED

        body = render_comment_body(report)
        if self.update_mode:
            existing = self._find_existing()
            if existing is not None:
                self.thread.update(existing.id, body)
                logger.info("Updated noise comment %d", existing.id)
                return ReconcileOutcome.UPDATED

        self.thread.create(body)
        logger.info("Posted noise comment to PR")
        return ReconcileOutcome.CREATED

    def _find_existing(self) -> ReviewComment | None:
        """Return the last marker comment in listing order."""
        found: ReviewComment | None = None
        for comment in self.thread.list():
            if is_marker_comment(comment):
                found = comment
        return found
