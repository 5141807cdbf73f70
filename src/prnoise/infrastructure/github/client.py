"""GitHub REST API client."""

from __future__ import annotations

import logging
import re

from dataclasses import dataclass
from typing import cast

import httpx

from prnoise.infrastructure.constants import GitHubAPI
from prnoise.shared.constants import DEFAULT_TIMEOUT_SECONDS
from prnoise.shared.exceptions import PublishError

logger = logging.getLogger(__name__)

_LINK_NEXT_RE = re.compile(r'<([^>]+)>;\s*rel="next"')


def _next_page_url(response: httpx.Response) -> str | None:
    """Extract the next page URL from a GitHub ``Link`` header."""
    link = response.headers.get("link", "")
    match = _LINK_NEXT_RE.search(link)
    return match.group(1) if match else None


# =============================================================================
# CLIENT
# =============================================================================

_STATUS_OK_MAX = 299


@dataclass
class GitHubClient:
    """Thin wrapper around the GitHub issue-comments REST API."""

    token: str
    repo: str

    def get_issue_comments(self, pr_number: int) -> list[dict[str, object]]:
        """Fetch every issue comment on a PR, following pagination.

        Raises:
            PublishError: If the API call fails.
        """
        return self._get_list(
            f"/repos/{self.repo}/issues/{pr_number}/comments"
            f"?per_page={GitHubAPI.PER_PAGE}"
        )

    def post_issue_comment(self, pr_number: int, body: str) -> None:
        """Post a comment on a PR (as issue comment).

        Raises:
            PublishError: If the API call fails.
        """
        url = f"{GitHubAPI.BASE_URL}/repos/{self.repo}/issues/{pr_number}/comments"
        self._send("POST", url, {"body": body})

    def update_issue_comment(self, comment_id: int, body: str) -> None:
        """Replace the body of an existing issue comment.

        Raises:
            PublishError: If the API call fails.
        """
        url = f"{GitHubAPI.BASE_URL}/repos/{self.repo}/issues/comments/{comment_id}"
        self._send("PATCH", url, {"body": body})

    def delete_issue_comment(self, comment_id: int) -> None:
        """Delete an issue comment.

        Raises:
            PublishError: If the API call fails.
        """
        url = f"{GitHubAPI.BASE_URL}/repos/{self.repo}/issues/comments/{comment_id}"
        self._send("DELETE", url)

    # =================================================================
    # HTTP helpers
    # =================================================================

    def _get_list(self, path: str) -> list[dict[str, object]]:
        url: str | None = f"{GitHubAPI.BASE_URL}{path}"
        all_items: list[dict[str, object]] = []
        while url is not None:
            response = self._send("GET", url)
            data = response.json()
            if isinstance(data, list):
                all_items.extend(cast(list[dict[str, object]], data))
            url = _next_page_url(response)
        return all_items

    def _send(
        self,
        method: str,
        url: str,
        payload: dict[str, object] | None = None,
    ) -> httpx.Response:
        try:
            with httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS) as client:
                response = client.request(
                    method, url, json=payload, headers=self._headers()
                )
        except httpx.HTTPError as e:
            raise PublishError(f"GitHub API error: {e}") from e

        if response.status_code > _STATUS_OK_MAX:
            raise PublishError(
                f"GitHub API HTTP {response.status_code}: {response.text}"
            )
        return response

    def _headers(self) -> dict[str, str]:
        return {
            "authorization": f"Bearer {self.token}",
            "accept": GitHubAPI.ACCEPT_JSON,
            "x-github-api-version": GitHubAPI.API_VERSION,
        }
