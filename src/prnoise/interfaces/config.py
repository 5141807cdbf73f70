"""Configuration assembly from ``pyproject.toml`` and environment variables."""

from __future__ import annotations

import os

from dataclasses import dataclass, field
from pathlib import Path

from prnoise.domain.noise.report import ReportOptions
from prnoise.interfaces.env_utils import (
    optional_env,
    parse_bool,
    parse_int,
    parse_list,
    require_env,
)
from prnoise.interfaces.toml_config import load_noise_config
from prnoise.shared.constants import (
    DEFAULT_GROUP_THRESHOLD,
    DEFAULT_IGNORE_FILE,
    DEFAULT_MAX_FILES_PER_DIR,
    DEFAULT_OUTPUT_FILE,
)


@dataclass(frozen=True)
class ActionConfig:
    """Typed configuration for the prnoise GitHub Action."""

    root_directory: str = "."
    ignore_file: str = DEFAULT_IGNORE_FILE
    max_files_per_dir: int = DEFAULT_MAX_FILES_PER_DIR
    group_threshold: int = DEFAULT_GROUP_THRESHOLD
    update_comment: bool = False
    ignored_paths: list[str] = field(default_factory=list[str])
    output_file: str = DEFAULT_OUTPUT_FILE
    github_token: str = ""
    github_repository: str = ""
    github_event_path: str = ""
    github_output: str = ""

    @property
    def report_options(self) -> ReportOptions:
        return ReportOptions(
            max_files_per_dir=self.max_files_per_dir,
            group_threshold=self.group_threshold,
        )

    @classmethod
    def from_env(cls, project_root: Path | None = None) -> ActionConfig:
        """Build config from ``[tool.prnoise]`` overlaid with action inputs.

        Optional (each overrides the TOML value when set):
            INPUT_ROOT_DIRECTORY, INPUT_IGNORE_FILE, INPUT_MAX_FILES_PER_DIR,
            INPUT_GROUP_THRESHOLD, INPUT_UPDATE_COMMENT, INPUT_IGNORED_PATHS,
            INPUT_OUTPUT_FILE

        GitHub context (read as-is, validated only when needed):
            GITHUB_TOKEN / INPUT_GITHUB_TOKEN, GITHUB_REPOSITORY,
            GITHUB_EVENT_PATH, GITHUB_OUTPUT
        """
        base = load_noise_config(project_root)

        max_files = optional_env("INPUT_MAX_FILES_PER_DIR")
        threshold = optional_env("INPUT_GROUP_THRESHOLD")
        update = optional_env("INPUT_UPDATE_COMMENT")
        ignored = optional_env("INPUT_IGNORED_PATHS")

        return cls(
            root_directory=optional_env("INPUT_ROOT_DIRECTORY") or ".",
            ignore_file=optional_env("INPUT_IGNORE_FILE") or base.ignore_file,
            max_files_per_dir=(
                parse_int("INPUT_MAX_FILES_PER_DIR", max_files)
                if max_files is not None
                else base.max_files_per_dir
            ),
            group_threshold=(
                parse_int("INPUT_GROUP_THRESHOLD", threshold)
                if threshold is not None
                else base.group_threshold
            ),
            update_comment=(
                parse_bool("INPUT_UPDATE_COMMENT", update)
                if update is not None
                else base.update_comment
            ),
            ignored_paths=(
                parse_list(ignored) if ignored is not None else base.ignored_paths
            ),
            output_file=optional_env("INPUT_OUTPUT_FILE") or base.output_file,
            github_token=(
                optional_env("INPUT_GITHUB_TOKEN") or os.environ.get("GITHUB_TOKEN", "")
            ),
            github_repository=os.environ.get("GITHUB_REPOSITORY", ""),
            github_event_path=os.environ.get("GITHUB_EVENT_PATH", ""),
            github_output=os.environ.get("GITHUB_OUTPUT", ""),
        )

    def require_github(self) -> tuple[str, str]:
        """Return ``(token, repository)`` or raise if either is missing.

        Raises:
            ConfigurationError: If a credential is missing.
        """
        token = self.github_token or require_env("GITHUB_TOKEN")
        repo = self.github_repository or require_env("GITHUB_REPOSITORY")
        return token, repo
