"""Link models for symlink operations.

This module defines the vocabulary shared by the link state machine,
the resolver and the orchestrator: link modes, terminal outcomes and
the per-run options.
"""

from dataclasses import dataclass
from enum import Enum


class LinkMode(Enum):
    """Direction of a link operation.

    Attributes:
        LINK: Create a symlink at the destination.
        UNLINK: Remove the entry at the destination.
    """

    LINK = "link"
    UNLINK = "unlink"


class LinkResult(Enum):
    """Terminal outcome of applying a link action.

    Attributes:
        LINKED: A symlink was created (or would be, in a dry run).
        UNLINKED: The destination was removed (or would be, in a dry run).
        NOTHING: The destination was already in the desired state.
        FAILED: A filesystem mutation failed.
    """

    LINKED = "linked"
    UNLINKED = "unlinked"
    NOTHING = "nothing"
    FAILED = "failed"

    @property
    def is_failure(self) -> bool:
        """Check if this outcome represents a failure."""
        return self is LinkResult.FAILED


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Options shared by every link action of a single run.

    Attributes:
        dry_run: Compute outcomes without touching the filesystem.
        silent: Suppress reporting of NOTHING outcomes.
        unlink: Remove links instead of creating them.
    """

    dry_run: bool = False
    silent: bool = False
    unlink: bool = False

    @property
    def mode(self) -> LinkMode:
        """Link mode selected by these options."""
        return LinkMode.UNLINK if self.unlink else LinkMode.LINK
