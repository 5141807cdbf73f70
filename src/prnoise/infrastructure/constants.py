"""Infrastructure-layer constants and enums.

Eliminates magic strings across all infrastructure modules.
"""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# PROVIDER CONSTANTS
# =============================================================================


class GitHubAPI(StrEnum):
    """GitHub REST API constants."""

    BASE_URL = "https://api.github.com"
    ACCEPT_JSON = "application/vnd.github.v3+json"
    API_VERSION = "2022-11-28"
    PER_PAGE = "100"


class GitHubUserType(StrEnum):
    """Values of the ``type`` field on a GitHub user object."""

    BOT = "Bot"


BOT_LOGIN_SUFFIX = "[bot]"
"""Suffix GitHub appends to the login of every App/Actions identity."""


# =============================================================================
# ACTION OUTPUTS
# =============================================================================


class ActionOutput(StrEnum):
    """Output names published to ``$GITHUB_OUTPUT``."""

    NOISE_FOUND = "noise-found"
    NOISE_FILES = "noise-files"
    REPORT = "report"
