"""Unified entry point — dispatches to the appropriate mode.

Reads ``INPUT_MODE`` from the environment and runs the corresponding
pipeline:

- ``comment`` (default): scan, publish outputs, reconcile the PR comment
- ``scan``: scan the working tree and print the report only
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

_VALID_MODES = {"comment", "scan"}


def main() -> None:
    """Dispatch to the appropriate entry point based on INPUT_MODE."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    mode = os.environ.get("INPUT_MODE", "comment").strip().lower()

    if mode not in _VALID_MODES:
        valid = ", ".join(sorted(_VALID_MODES))
        logger.error("Unknown mode: %r (valid: %s)", mode, valid)
        sys.exit(1)

    if mode == "comment":
        from prnoise.interfaces.action import run

        run()
    elif mode == "scan":
        from prnoise.interfaces.scan import run as scan_run

        scan_run()


if __name__ == "__main__":
    main()
