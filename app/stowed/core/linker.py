"""Symlink creation and removal.

A LinkAction pairs a source path with a destination path and applies
one idempotent link or unlink operation against the filesystem, with
dry-run support and a fixed outcome vocabulary.
"""

import logging
import os
from pathlib import Path

from stowed.core.reporting import LinkReporter, NullReporter
from stowed.models.link import LinkMode, LinkResult, RunOptions

logger = logging.getLogger(__name__)


class LinkActionNotAppliedError(RuntimeError):
    """Raised when a link action's result is read before it was applied."""


class LinkAction:
    """One source-to-destination symlink operation.

    The mode is fixed at construction from the run options. Each call
    to :meth:`apply` sets exactly one terminal :class:`LinkResult`.

    Attributes:
        real_path: Absolute source path the link points to.
        link_path: Absolute destination path where the link lives.
        mode: LINK or UNLINK.
    """

    def __init__(
        self,
        real_path: Path | str,
        link_path: Path | str,
        options: RunOptions | None = None,
        reporter: LinkReporter | None = None,
    ) -> None:
        """Initialize the LinkAction.

        Args:
            real_path: Source path the symlink will point to.
            link_path: Destination path of the symlink.
            options: Run options; defaults to a plain, non-dry-run link.
            reporter: Receiver of status lines; defaults to a NullReporter.
        """
        self.real_path = Path(real_path)
        self.link_path = Path(link_path)
        self._options = options or RunOptions()
        self._reporter = reporter or NullReporter()
        self.mode = self._options.mode
        self._result: LinkResult | None = None

    def __repr__(self) -> str:
        real, link = str(self.real_path), str(self.link_path)
        return f"LinkAction({real!r}, {link!r}, mode={self.mode.value})"

    @property
    def options(self) -> RunOptions:
        """Run options this action was created with."""
        return self._options

    @property
    def is_applied(self) -> bool:
        """Check if the action has a terminal result."""
        return self._result is not None

    @property
    def result(self) -> LinkResult:
        """Terminal outcome of the last :meth:`apply` call.

        Raises:
            LinkActionNotAppliedError: If :meth:`apply` has not completed yet.
        """
        if self._result is None:
            msg = f"Link action has not been applied: {self.link_path}"
            raise LinkActionNotAppliedError(msg)
        return self._result

    @property
    def pretty(self) -> str:
        """Plain ``source → destination`` rendering for reports."""
        return f"{self.real_path} → {self.link_path}"

    def apply(self) -> LinkResult:
        """Apply the action according to its mode.

        Mutation failures are caught and recorded as FAILED; they are
        never raised to the caller.

        Returns:
            The terminal result, also available as :attr:`result`.
        """
        if self.mode == LinkMode.UNLINK:
            return self._unlink()
        return self._link()

    def _exists(self) -> bool:
        # A dangling symlink still occupies the destination
        return os.path.lexists(self.link_path)

    def _link(self) -> LinkResult:
        if self._exists():
            return self._finish(LinkResult.NOTHING)

        if not self._options.dry_run:
            try:
                self.link_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                return self._fail(
                    f"Failed to create directory for {self.link_path}: {e.strerror or e}"
                )

            try:
                self.link_path.symlink_to(self.real_path)
            except OSError as e:
                return self._fail(
                    f"Failed to create symlink from {self.real_path} to {self.link_path}: "
                    f"{e.strerror or e}"
                )

        return self._finish(LinkResult.LINKED)

    def _unlink(self) -> LinkResult:
        if not self._exists():
            return self._finish(LinkResult.NOTHING)

        if not self._options.dry_run:
            try:
                self.link_path.unlink()
            except OSError as e:
                return self._fail(f"Failed to unlink {self.link_path}: {e.strerror or e}")

        return self._finish(LinkResult.UNLINKED)

    def _finish(self, result: LinkResult) -> LinkResult:
        self._result = result
        if result == LinkResult.NOTHING and self._options.silent:
            return result
        self._reporter.status(self, self._options.dry_run)
        return result

    def _fail(self, message: str) -> LinkResult:
        self._result = LinkResult.FAILED
        logger.debug(message)
        self._reporter.failure(self, message)
        return LinkResult.FAILED
