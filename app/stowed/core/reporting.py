"""Reporting interface for link actions.

Link actions report their outcome through a LinkReporter so that
presentation (colors, consoles) stays out of the state machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stowed.core.linker import LinkAction


class LinkReporter(ABC):
    """Abstract receiver of link action status lines."""

    @abstractmethod
    def status(self, action: LinkAction, dry_run: bool) -> None:
        """Report the terminal outcome of an applied action.

        Args:
            action: Action whose ``result`` has just been set.
            dry_run: Whether the run made no filesystem changes.
        """

    @abstractmethod
    def failure(self, action: LinkAction, message: str) -> None:
        """Report a failed filesystem mutation.

        Args:
            action: Action that failed.
            message: Human-readable description of the failure.
        """


class NullReporter(LinkReporter):
    """Reporter that discards everything."""

    def status(self, action: LinkAction, dry_run: bool) -> None:
        return None

    def failure(self, action: LinkAction, message: str) -> None:
        return None
