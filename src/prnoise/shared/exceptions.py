"""Typed exception hierarchy for prnoise."""

from __future__ import annotations

# =============================================================================
# BASE
# =============================================================================


class PrNoiseError(Exception):
    """Base exception for all prnoise errors."""


# =============================================================================
# SCANNING
# =============================================================================


class ScanError(PrNoiseError):
    """Failed to list a directory while scanning the tree."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to scan {path}: {reason}")


# =============================================================================
# REVIEW THREAD
# =============================================================================


class PublishError(PrNoiseError):
    """Failed to list, post, update, or delete a comment on GitHub."""


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(PrNoiseError):
    """Invalid or missing configuration."""
