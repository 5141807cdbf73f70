"""Tests for environment variable helpers."""

from __future__ import annotations

import pytest

from prnoise.interfaces.env_utils import (
    optional_env,
    parse_bool,
    parse_int,
    parse_list,
    require_env,
)
from prnoise.shared.exceptions import ConfigurationError


class TestRequireEnv:
    def test_returns_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "abc")
        assert require_env("GITHUB_TOKEN") == "abc"

    def test_missing_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="GITHUB_TOKEN"):
            require_env("GITHUB_TOKEN")

    def test_empty_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "")
        with pytest.raises(ConfigurationError):
            require_env("GITHUB_TOKEN")


class TestParsers:
    def test_optional_env_blank_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_MODE", "   ")
        assert optional_env("INPUT_MODE") is None

    def test_parse_int(self) -> None:
        assert parse_int("X", "12") == 12

    @pytest.mark.parametrize("raw", ["TRUE", "true", "1", "yes"])
    def test_parse_bool_true(self, raw: str) -> None:
        assert parse_bool("X", raw) is True

    @pytest.mark.parametrize("raw", ["False", "0", "no"])
    def test_parse_bool_false(self, raw: str) -> None:
        assert parse_bool("X", raw) is False

    def test_parse_list_drops_blanks(self) -> None:
        assert parse_list(" a , ,b\n\nc ") == ["a", "b", "c"]
