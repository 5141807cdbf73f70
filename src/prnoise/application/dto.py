"""Application-layer command and result DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prnoise.domain.noise.report import NoiseReport, ReportOptions
from prnoise.shared.types import FlaggedPath, ReconcileOutcome

# =============================================================================
# DETECT NOISE
# =============================================================================


@dataclass(frozen=True)
class DetectNoiseCommand:
    """Command to scan a tree and report its noise."""

    root_directory: Path
    options: ReportOptions = ReportOptions()
    is_pull_request: bool = False
    output_path: Path | None = None


@dataclass(frozen=True)
class DetectNoiseResult:
    """Result of a noise detection run."""

    report: NoiseReport
    outcome: ReconcileOutcome = ReconcileOutcome.SKIPPED

    @property
    def noise_found(self) -> bool:
        return self.report.has_noise

    @property
    def flagged(self) -> list[FlaggedPath]:
        return list(self.report.flagged)
