"""Action outputs written to the ``$GITHUB_OUTPUT`` file."""

from __future__ import annotations

import json
import logging
import uuid

from pathlib import Path

from pydantic import BaseModel, Field

from prnoise.application.dto import DetectNoiseResult
from prnoise.infrastructure.constants import ActionOutput

logger = logging.getLogger(__name__)


class ActionOutputs(BaseModel):
    """The values published by one run."""

    noise_found: bool
    noise_files: list[str] = Field(default_factory=list)
    report: str = ""

    @classmethod
    def from_result(cls, result: DetectNoiseResult) -> ActionOutputs:
        return cls(
            noise_found=result.noise_found,
            noise_files=[str(p) for p in result.flagged],
            report=result.report.text,
        )

    def render(self, delimiter: str | None = None) -> str:
        """Render as ``name=value`` lines, multi-line values in heredoc form."""
        eof = delimiter or f"ghadelimiter_{uuid.uuid4().hex}"
        lines = [
            f"{ActionOutput.NOISE_FOUND}={'true' if self.noise_found else 'false'}",
            f"{ActionOutput.NOISE_FILES}={json.dumps(self.noise_files)}",
            f"{ActionOutput.REPORT}<<{eof}",
            self.report,
            eof,
        ]
        return "\n".join(lines) + "\n"


def write_outputs(outputs: ActionOutputs, output_path: str) -> None:
    """Append *outputs* to the file named by ``$GITHUB_OUTPUT``.

    Does nothing when *output_path* is empty (not running in Actions).
    """
    if not output_path:
        logger.debug("GITHUB_OUTPUT not set, skipping action outputs")
        return
    with Path(output_path).open("a", encoding="utf-8") as f:
        f.write(outputs.render())
