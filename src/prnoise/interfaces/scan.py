"""Local scan entry point — reports noise without touching GitHub."""

from __future__ import annotations

import logging
import sys

from pathlib import Path

from prnoise.application.detect_noise import DetectNoise
from prnoise.application.dto import DetectNoiseCommand, DetectNoiseResult
from prnoise.domain.noise.ignore import IgnoreRuleCache
from prnoise.domain.noise.services import NoiseClassifier
from prnoise.infrastructure.filesystem.scanner import FileTreeScanner
from prnoise.interfaces.config import ActionConfig
from prnoise.shared.exceptions import PrNoiseError

logger = logging.getLogger(__name__)


def run() -> None:
    """Scan the configured root, write the report file, and print it."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        result = scan_local(ActionConfig.from_env())
    except PrNoiseError as e:
        logger.error("prnoise failed: %s", e)
        sys.exit(1)

    print(result.report.text)


def scan_local(config: ActionConfig) -> DetectNoiseResult:
    """Run detection only; no comment reconciliation."""
    classifier = NoiseClassifier(
        ignore_rules=IgnoreRuleCache(path=config.ignore_file).rules,
        explicit_ignores=frozenset(config.ignored_paths),
    )
    use_case = DetectNoise(scanner=FileTreeScanner(classifier=classifier))
    return use_case.execute(
        DetectNoiseCommand(
            root_directory=Path(config.root_directory),
            options=config.report_options,
            output_path=Path(config.output_file) if config.output_file else None,
        )
    )
