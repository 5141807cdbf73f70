"""CommentThread implementation backed by GitHub issue comments."""

from __future__ import annotations

import logging

from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from prnoise.domain.noise.reconciler import ReviewComment
from prnoise.infrastructure.constants import BOT_LOGIN_SUFFIX, GitHubUserType
from prnoise.infrastructure.github.client import GitHubClient

logger = logging.getLogger(__name__)

# =============================================================================
# RESPONSE SCHEMA
# =============================================================================


class _UserPayload(BaseModel):
    login: str = ""
    type: str = ""


class _IssueCommentPayload(BaseModel):
    id: int
    body: str | None = None
    user: _UserPayload | None = None

    def to_domain(self) -> ReviewComment:
        user = self.user or _UserPayload()
        return ReviewComment(
            id=self.id,
            author_is_automation=_is_automation(user),
            body=self.body or "",
        )


def _is_automation(user: _UserPayload) -> bool:
    return user.type == GitHubUserType.BOT or user.login.endswith(BOT_LOGIN_SUFFIX)


# =============================================================================
# THREAD
# =============================================================================


@dataclass
class GitHubCommentThread:
    """The issue-comment conversation of one pull request."""

    client: GitHubClient
    pr_number: int

    def list(self) -> list[ReviewComment]:
        comments: list[ReviewComment] = []
        for raw in self.client.get_issue_comments(self.pr_number):
            try:
                payload = _IssueCommentPayload.model_validate(raw)
            except ValidationError:
                logger.warning(
                    "Skipping malformed comment payload: %r", raw.get("id")
                )
                continue
            comments.append(payload.to_domain())
        return comments

    def create(self, body: str) -> None:
        self.client.post_issue_comment(self.pr_number, body)

    def update(self, comment_id: int, body: str) -> None:
        self.client.update_issue_comment(comment_id, body)

    def delete(self, comment_id: int) -> None:
        self.client.delete_issue_comment(comment_id)
