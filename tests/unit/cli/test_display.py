"""Unit tests for CLI display helpers."""

from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from stowed.cli.display import ConsoleReporter, format_status, print_run_summary
from stowed.core.deploy import RunSummary
from stowed.core.linker import LinkAction
from stowed.core.theme import get_theme
from stowed.models.link import LinkResult, RunOptions


def _console(buffer: StringIO) -> Console:
    return Console(file=buffer, theme=get_theme(), width=200, color_system=None)


def _applied(tmp_path: Path, options: RunOptions, occupy: bool = False) -> LinkAction:
    source = tmp_path / "src"
    source.write_text("")
    link_path = tmp_path / "dst"
    if occupy:
        link_path.symlink_to(source)
    action = LinkAction(source, link_path, options)
    action.apply()
    return action


class TestFormatStatus:
    """Tests for format_status."""

    def test_linked(self, tmp_path: Path) -> None:
        """LINKED shows a check mark and both paths."""
        action = _applied(tmp_path, RunOptions())
        line = format_status(action, dry_run=False)

        assert line is not None
        assert "✔" in line
        assert "Linked" in line
        assert str(tmp_path / "src") in line
        assert str(tmp_path / "dst") in line

    def test_dry_run_prefix(self, tmp_path: Path) -> None:
        """Dry runs replace the marker with a Dry run tag."""
        action = _applied(tmp_path, RunOptions(dry_run=True))
        buffer = StringIO()
        _console(buffer).print(format_status(action, dry_run=True))

        assert "[Dry run] Linked" in buffer.getvalue()

    def test_unlinked(self, tmp_path: Path) -> None:
        """UNLINKED shows a cross."""
        action = _applied(tmp_path, RunOptions(unlink=True), occupy=True)
        line = format_status(action, dry_run=False)

        assert line is not None
        assert "✘" in line
        assert "Unlinked" in line

    def test_nothing(self, tmp_path: Path) -> None:
        """NOTHING is indented."""
        action = _applied(tmp_path, RunOptions(), occupy=True)
        line = format_status(action, dry_run=False)

        assert line is not None
        assert line.startswith("  ")
        assert "Nothing to do for" in line

    def test_failed_has_no_status_line(self, tmp_path: Path) -> None:
        """FAILED is reported through the failure hook only."""
        action = LinkAction(tmp_path / "src", tmp_path / "dst")
        with patch.object(Path, "symlink_to", side_effect=OSError(5, "I/O error")):
            action.apply()

        assert action.result == LinkResult.FAILED
        assert format_status(action, dry_run=False) is None


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_status_and_failure_streams(self, tmp_path: Path) -> None:
        """Status goes to stdout console, failures to the error console."""
        out, err = StringIO(), StringIO()
        reporter = ConsoleReporter(out=_console(out), err=_console(err))
        source = tmp_path / "src"
        source.write_text("")

        LinkAction(source, tmp_path / "dst", reporter=reporter).apply()
        with patch.object(Path, "symlink_to", side_effect=OSError(5, "I/O error")):
            LinkAction(source, tmp_path / "other", reporter=reporter).apply()

        assert "Linked" in out.getvalue()
        assert "Failed to create symlink" in err.getvalue()
        assert "I/O error" in err.getvalue()

    def test_paths_with_brackets_are_escaped(self, tmp_path: Path) -> None:
        """Rich markup characters in paths are printed literally."""
        out = StringIO()
        reporter = ConsoleReporter(out=_console(out), err=_console(StringIO()))
        source = tmp_path / "[bold]src"
        source.write_text("")

        LinkAction(source, tmp_path / "dst", reporter=reporter).apply()

        assert "[bold]src" in out.getvalue()


class TestPrintRunSummary:
    """Tests for print_run_summary."""

    @pytest.fixture
    def buffer(self, monkeypatch: pytest.MonkeyPatch) -> StringIO:
        buffer = StringIO()
        monkeypatch.setattr("stowed.cli.display.console", _console(buffer))
        return buffer

    def test_counts(self, tmp_path: Path, buffer: StringIO) -> None:
        """Counts per outcome are printed."""
        linked = _applied(tmp_path, RunOptions())
        print_run_summary(RunSummary(succeeded=[linked]))

        assert "Summary: 1 linked" in buffer.getvalue()

    def test_dry_run_label(self, tmp_path: Path, buffer: StringIO) -> None:
        """Dry runs are labelled."""
        linked = _applied(tmp_path, RunOptions(dry_run=True))
        print_run_summary(RunSummary(succeeded=[linked]), dry_run=True)

        assert "Dry run: 1 linked" in buffer.getvalue()

    def test_empty(self, buffer: StringIO) -> None:
        """An empty run says so."""
        print_run_summary(RunSummary())

        assert "No links to process." in buffer.getvalue()
