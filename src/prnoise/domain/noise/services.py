"""Domain services for noise classification."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from prnoise.domain.noise import taxonomy
from prnoise.domain.noise.ignore import IgnoreRuleSet, cached_rules
from prnoise.shared.types import FlaggedPath, NoiseKind

# =============================================================================
# CLASSIFIER
# =============================================================================


@dataclass
class NoiseClassifier:
    """Combines the taxonomy with ignore rules and an explicit ignore list.

    Ignore rules and the explicit list can only suppress a flag; a path is
    never noise just because a rule matched it.
    """

    ignore_rules: IgnoreRuleSet = field(default_factory=IgnoreRuleSet)
    explicit_ignores: frozenset[str] = field(default_factory=frozenset[str])

    def __post_init__(self) -> None:
        self.explicit_ignores = frozenset(self.explicit_ignores)

    def is_suppressed(self, path: str) -> bool:
        """Whether the explicit list or an ignore rule covers *path*."""
        return path in self.explicit_ignores or self.ignore_rules.matches(path)

    def classify(self, path: str, *, is_dir: bool = False) -> NoiseKind | None:
        """Return the matching pattern family unless *path* is suppressed."""
        if self.is_suppressed(path):
            return None
        return taxonomy.match(path, is_dir=is_dir)

    def is_noise(self, path: str) -> bool:
        return self.classify(path) is not None

    def detect(self, paths: Iterable[str]) -> list[FlaggedPath]:
        """Filter candidate *paths* down to noise, preserving input order."""
        return [FlaggedPath(p) for p in paths if self.is_noise(p)]


def is_noise(
    path: str,
    explicit_ignores: Iterable[str] = (),
    ignore_rules: IgnoreRuleSet | None = None,
) -> bool:
    """Classify one path, using the process-wide rule cache by default."""
    rules = cached_rules() if ignore_rules is None else ignore_rules
    classifier = NoiseClassifier(
        ignore_rules=rules,
        explicit_ignores=frozenset(explicit_ignores),
    )
    return classifier.is_noise(path)
