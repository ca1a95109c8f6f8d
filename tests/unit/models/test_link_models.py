"""Unit tests for link models.

Tests for LinkMode, LinkResult and RunOptions.
"""

import pytest
from stowed.models.link import LinkMode, LinkResult, RunOptions


class TestLinkResult:
    """Tests for LinkResult enum."""

    def test_result_values(self) -> None:
        """LinkResult has expected values."""
        assert LinkResult.LINKED.value == "linked"
        assert LinkResult.UNLINKED.value == "unlinked"
        assert LinkResult.NOTHING.value == "nothing"
        assert LinkResult.FAILED.value == "failed"

    def test_result_count(self) -> None:
        """LinkResult has exactly 4 members."""
        assert len(LinkResult) == 4

    def test_only_failed_is_failure(self) -> None:
        """is_failure is True for FAILED only."""
        assert [r for r in LinkResult if r.is_failure] == [LinkResult.FAILED]


class TestRunOptions:
    """Tests for RunOptions dataclass."""

    def test_defaults(self) -> None:
        """Default options create links for real."""
        options = RunOptions()
        assert options.dry_run is False
        assert options.silent is False
        assert options.unlink is False
        assert options.mode == LinkMode.LINK

    def test_unlink_selects_unlink_mode(self) -> None:
        """unlink=True selects UNLINK mode."""
        assert RunOptions(unlink=True).mode == LinkMode.UNLINK

    def test_options_are_frozen(self) -> None:
        """RunOptions is immutable."""
        options = RunOptions()
        with pytest.raises(AttributeError):
            options.dry_run = True  # type: ignore[misc]
