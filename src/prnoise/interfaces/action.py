"""GitHub Action entry point — composition root."""

from __future__ import annotations

import json
import logging
import sys

from pathlib import Path
from typing import cast

from prnoise.application.detect_noise import DetectNoise
from prnoise.application.dto import DetectNoiseCommand, DetectNoiseResult
from prnoise.domain.noise.ignore import IgnoreRuleCache
from prnoise.domain.noise.reconciler import CommentReconciler
from prnoise.domain.noise.services import NoiseClassifier
from prnoise.infrastructure.filesystem.scanner import FileTreeScanner
from prnoise.infrastructure.github.client import GitHubClient
from prnoise.infrastructure.github.comment_thread import GitHubCommentThread
from prnoise.interfaces.config import ActionConfig
from prnoise.interfaces.outputs import ActionOutputs, write_outputs
from prnoise.shared.exceptions import ConfigurationError, PrNoiseError

logger = logging.getLogger(__name__)


def run() -> None:
    """Execute the prnoise detection pipeline."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = ActionConfig.from_env()
        _execute_pipeline(config)
    except PrNoiseError as e:
        logger.error("prnoise failed: %s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


def _execute_pipeline(config: ActionConfig) -> DetectNoiseResult:
    """Wire infrastructure, build use case, and execute."""
    # 1. Parse event
    pr_number: int | None = None
    if config.github_event_path:
        event = _load_event(config.github_event_path)
        pr_number = _extract_pr_number(event)
    if pr_number is None:
        logger.info("No pull request in event payload; comments disabled")

    # 2. Construct classification + scanning
    rule_cache = IgnoreRuleCache(path=config.ignore_file)
    classifier = NoiseClassifier(
        ignore_rules=rule_cache.rules,
        explicit_ignores=frozenset(config.ignored_paths),
    )
    scanner = FileTreeScanner(classifier=classifier)

    # 3. Construct comment reconciler (only inside a PR)
    reconciler: CommentReconciler | None = None
    if pr_number is not None:
        token, repo = config.require_github()
        client = GitHubClient(token=token, repo=repo)
        thread = GitHubCommentThread(client=client, pr_number=pr_number)
        reconciler = CommentReconciler(
            thread=thread,
            update_mode=config.update_comment,
        )

    # 4. Execute
    use_case = DetectNoise(scanner=scanner, reconciler=reconciler)
    result = use_case.execute(
        DetectNoiseCommand(
            root_directory=Path(config.root_directory),
            options=config.report_options,
            is_pull_request=pr_number is not None,
            output_path=Path(config.output_file) if config.output_file else None,
        )
    )

    # 5. Publish outputs
    write_outputs(ActionOutputs.from_result(result), config.github_output)
    logger.info(
        "Noise check complete: %d flagged, comment %s",
        result.report.count,
        result.outcome,
    )
    return result


def _load_event(event_path: str) -> dict[str, object]:
    """Load the GitHub event JSON file."""
    try:
        with Path(event_path).open() as f:
            result: dict[str, object] = json.load(f)
            return result
    except FileNotFoundError as e:
        raise ConfigurationError(f"Event file not found: {event_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid event JSON: {e}") from e


def _extract_pr_number(event: dict[str, object]) -> int | None:
    """Extract PR number from event payload, or ``None`` outside a PR."""
    pr: object = event.get("pull_request")
    if pr is None:
        return None
    if isinstance(pr, dict):
        pr_data = cast(dict[str, object], pr)
        number: object = pr_data.get("number")
        if isinstance(number, int):
            return number
    msg = "Cannot extract PR number from event payload"
    raise ConfigurationError(msg)


if __name__ == "__main__":
    run()
