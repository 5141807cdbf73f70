"""Top-down walk of a source tree that collects noise entries."""

from __future__ import annotations

import logging
import os

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from prnoise.domain.noise import taxonomy
from prnoise.domain.noise.services import NoiseClassifier
from prnoise.shared.exceptions import ScanError
from prnoise.shared.types import FlaggedPath, NoiseKind

logger = logging.getLogger(__name__)

# =============================================================================
# SCANNER
# =============================================================================


@dataclass
class FileTreeScanner:
    """Implements TreeScannerPort over the local filesystem.

    Entries are classified by their path relative to the scan root and
    reported joined onto the root. Ignore rules and the explicit list are
    matched against that reported path. A directory flagged by the directory
    family stands in for its whole subtree and is not descended into;
    suppressed entries are skipped together with their subtree.
    """

    classifier: NoiseClassifier

    def scan(self, root: str | Path) -> list[FlaggedPath]:
        """Walk *root* in pre-order and return the flagged paths.

        Raises:
            ScanError: If any directory in the tree cannot be listed.
        """
        root_path = Path(root)
        flagged: list[FlaggedPath] = []
        self._walk(root_path, PurePosixPath(), flagged)
        logger.info("Scanned %s: %d noise entries", root_path, len(flagged))
        return flagged

    def _walk(
        self,
        directory: Path,
        relative: PurePosixPath,
        flagged: list[FlaggedPath],
    ) -> None:
        # Unreadable sub-directories abort the scan just like the root.
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(str(directory), e.strerror or str(e)) from e

        for entry in entries:
            rel = relative / entry.name
            display = _display_path(directory, entry.name)
            if self.classifier.is_suppressed(display):
                logger.debug("Ignoring %s", display)
                continue

            is_dir = entry.is_dir(follow_symlinks=False)
            kind = taxonomy.match(rel.as_posix(), is_dir=is_dir)
            if kind is not None:
                flagged.append(FlaggedPath(display))

            if is_dir and kind is not NoiseKind.DIRECTORY:
                self._walk(Path(entry.path), rel, flagged)


def _display_path(directory: Path, name: str) -> str:
    """Join *name* onto *directory* using forward slashes."""
    return (PurePosixPath(directory.as_posix()) / name).as_posix()
