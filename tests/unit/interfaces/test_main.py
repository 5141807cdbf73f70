"""Tests for the unified entry point dispatcher."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from prnoise.interfaces.main import _VALID_MODES, main


class TestMainDispatch:
    def test_valid_modes_set(self) -> None:
        assert {"comment", "scan"} == _VALID_MODES

    @patch("prnoise.interfaces.main.os.environ", {"INPUT_MODE": "comment"})
    @patch("prnoise.interfaces.action.run")
    def test_dispatch_comment(self, mock_run: object) -> None:
        main()
        from prnoise.interfaces.action import run

        run.assert_called_once()  # type: ignore[attr-defined]

    @patch("prnoise.interfaces.main.os.environ", {"INPUT_MODE": "scan"})
    @patch("prnoise.interfaces.scan.run")
    def test_dispatch_scan(self, mock_run: object) -> None:
        main()
        from prnoise.interfaces.scan import run

        run.assert_called_once()  # type: ignore[attr-defined]

    @patch("prnoise.interfaces.main.os.environ", {})
    @patch("prnoise.interfaces.action.run")
    def test_default_mode_is_comment(self, mock_run: object) -> None:
        main()
        from prnoise.interfaces.action import run

        run.assert_called_once()  # type: ignore[attr-defined]

    @patch("prnoise.interfaces.main.os.environ", {"INPUT_MODE": "invalid"})
    def test_invalid_mode_exits(self) -> None:
        with pytest.raises(SystemExit, match="1"):
            main()

    @patch("prnoise.interfaces.main.os.environ", {"INPUT_MODE": "  Scan  "})
    @patch("prnoise.interfaces.scan.run")
    def test_mode_is_stripped_and_lowered(self, mock_run: object) -> None:
        main()
        from prnoise.interfaces.scan import run

        run.assert_called_once()  # type: ignore[attr-defined]
