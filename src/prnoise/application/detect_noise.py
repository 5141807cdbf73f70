"""Detect Noise use case."""

from __future__ import annotations

import logging

from dataclasses import dataclass

from prnoise.application.dto import DetectNoiseCommand, DetectNoiseResult
from prnoise.domain.noise.reconciler import CommentReconciler
from prnoise.domain.noise.report import build_report
from prnoise.domain.noise.repositories import TreeScannerPort
from prnoise.shared.types import ReconcileOutcome

logger = logging.getLogger(__name__)


@dataclass
class DetectNoise:
    """Scan, render, persist, and reconcile the noise report.

    Errors from any step propagate; at most one comment call mutates the
    pull request.
    """

    scanner: TreeScannerPort
    reconciler: CommentReconciler | None = None

    def execute(self, cmd: DetectNoiseCommand) -> DetectNoiseResult:
        flagged = self.scanner.scan(cmd.root_directory)
        report = build_report(flagged, cmd.options)

        if report.has_noise:
            logger.warning("Found potentially superfluous files/directories:")
            for path in report.flagged:
                logger.warning("  %s", path)
        else:
            logger.info("No noise files detected")

        if cmd.output_path is not None:
            cmd.output_path.write_text(report.text, encoding="utf-8")
            logger.debug("Wrote report to %s", cmd.output_path)

        outcome = ReconcileOutcome.SKIPPED
        if self.reconciler is not None:
            outcome = self.reconciler.reconcile(
                report, is_pull_request=cmd.is_pull_request
            )

        return DetectNoiseResult(report=report, outcome=outcome)
