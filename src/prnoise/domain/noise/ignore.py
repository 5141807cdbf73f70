"""User-supplied ignore rules loaded from the repository's ignore file.

Each non-blank, non-comment line of the file is a glob where ``*`` matches
any run of characters and every other character is literal. A rule must
match the whole repository-relative path.

Rules are held in immutable ``IgnoreRuleSet`` snapshots. ``IgnoreRuleCache``
owns the single reference callers share; ``reload`` builds a new snapshot
and swaps it in.
"""

from __future__ import annotations

import logging
import re

from dataclasses import dataclass, field
from pathlib import Path

from prnoise.shared.constants import DEFAULT_IGNORE_FILE, IGNORE_COMMENT_PREFIX
from prnoise.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_WILDCARD = "*"

# =============================================================================
# VALUE OBJECTS
# =============================================================================


@dataclass(frozen=True)
class IgnoreRule:
    """A single anchored glob compiled from one line of the ignore file."""

    glob: str
    pattern: re.Pattern[str]

    @classmethod
    def from_glob(cls, glob: str) -> IgnoreRule:
        escaped = ".*".join(re.escape(part) for part in glob.split(_WILDCARD))
        return cls(glob=glob, pattern=re.compile(f"^{escaped}$"))

    def matches(self, path: str) -> bool:
        return self.pattern.match(path) is not None


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Immutable snapshot of the rules loaded from one ignore file."""

    rules: tuple[IgnoreRule, ...] = ()
    source: str | None = None

    @classmethod
    def parse(cls, text: str, source: str | None = None) -> IgnoreRuleSet:
        """Compile every meaningful line of *text* into a rule."""
        rules: list[IgnoreRule] = []
        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line or line.startswith(IGNORE_COMMENT_PREFIX):
                continue
            rules.append(IgnoreRule.from_glob(line))
        return cls(rules=tuple(rules), source=source)

    def matches(self, path: str) -> bool:
        return any(rule.matches(path) for rule in self.rules)

    @property
    def globs(self) -> list[str]:
        return [rule.glob for rule in self.rules]

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)


# =============================================================================
# LOADING
# =============================================================================


def load_ignore_rules(path: str | Path = DEFAULT_IGNORE_FILE) -> IgnoreRuleSet:
    """Load the ignore file at *path*.

    A missing file yields an empty rule set; this never raises for absence.

    Raises:
        ConfigurationError: If the file exists but cannot be read as UTF-8.
    """
    ignore_path = Path(path)
    if not ignore_path.is_file():
        logger.debug("No ignore file at %s, using empty rule set", ignore_path)
        return IgnoreRuleSet(source=str(ignore_path))

    try:
        text = ignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read ignore file {ignore_path}: {exc}"
        raise ConfigurationError(msg) from exc

    rule_set = IgnoreRuleSet.parse(text, source=str(ignore_path))
    logger.info("Loaded %d ignore rule(s) from %s", len(rule_set), ignore_path)
    return rule_set


@dataclass
class IgnoreRuleCache:
    """Owns the current rule snapshot for one ignore file path."""

    path: str | Path = DEFAULT_IGNORE_FILE
    _current: IgnoreRuleSet | None = field(default=None, init=False, repr=False)

    @property
    def rules(self) -> IgnoreRuleSet:
        if self._current is None:
            self._current = load_ignore_rules(self.path)
        return self._current

    def reload(self) -> IgnoreRuleSet:
        """Re-read the ignore file and replace the cached snapshot."""
        self._current = load_ignore_rules(self.path)
        return self._current


# Shared for the life of the process; not safe for concurrent reloads.
_default_cache = IgnoreRuleCache()


def cached_rules() -> IgnoreRuleSet:
    """Return the process-wide rule snapshot, loading it on first use."""
    return _default_cache.rules


def reload_ignore_rules() -> IgnoreRuleSet:
    """Reload the process-wide snapshot from the default ignore file."""
    return _default_cache.reload()
