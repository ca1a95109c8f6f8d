"""Unit tests for formatting and logging utilities."""

import logging
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console
from stowed.core.theme import get_theme
from stowed.utils import formatting
from stowed.utils.log import setup_logging


class TestPrintError:
    """Tests for print_error."""

    @pytest.fixture
    def streams(self, monkeypatch: pytest.MonkeyPatch) -> tuple[StringIO, StringIO]:
        out, err = StringIO(), StringIO()
        monkeypatch.setattr(formatting, "console", Console(file=out, theme=get_theme(), width=200))
        monkeypatch.setattr(
            formatting, "err_console", Console(file=err, theme=get_theme(), width=200)
        )
        return out, err

    def test_error_goes_to_stderr(self, streams: tuple[StringIO, StringIO]) -> None:
        """print_error writes a prefixed line to the error console."""
        out, err = streams
        formatting.print_error("Package does not exist: nvim")

        assert out.getvalue() == ""
        assert "Error: Package does not exist: nvim" in err.getvalue()

    def test_markup_in_message_is_escaped(self, streams: tuple[StringIO, StringIO]) -> None:
        """Brackets in messages are printed literally."""
        _, err = streams
        formatting.print_error("bad path /tmp/[x]")

        assert "/tmp/[x]" in err.getvalue()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without verbose only warnings are logged."""
        with patch("stowed.utils.log.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        """verbose switches to DEBUG."""
        with patch("stowed.utils.log.logging.basicConfig") as basic_config:
            setup_logging(verbose=True)

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
