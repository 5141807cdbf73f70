"""Centralized defaults for prnoise. Overridable via configuration."""

from __future__ import annotations

# =============================================================================
# IGNORE FILE
# =============================================================================

DEFAULT_IGNORE_FILE = ".pr-noise-ignore"
IGNORE_COMMENT_PREFIX = "#"

# =============================================================================
# REPORT
# =============================================================================

DEFAULT_MAX_FILES_PER_DIR = 3
DEFAULT_GROUP_THRESHOLD = 3
DEFAULT_OUTPUT_FILE = "noise.txt"

NO_NOISE_MESSAGE = "✅ No noise detected."
REPORT_HEADER_PREFIX = "⚠️ Found "
REPORT_HEADER_SUFFIX = " potentially superfluous files:"
REPORT_FOOTER = "🧹 Consider removing them if they are not needed."
ROOT_DIRECTORY_LABEL = "(root)"

# Invisible tag appended to the managed comment so it can be found again.
REPORT_MARKER = "<!-- prnoise:report -->"

# =============================================================================
# TIMEOUTS
# =============================================================================

DEFAULT_TIMEOUT_SECONDS = 30
