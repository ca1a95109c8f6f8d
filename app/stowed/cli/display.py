"""Rich display functions for link actions and run results.

ConsoleReporter prints one status line per applied link action;
print_run_summary closes a run with a one-line outcome count.
"""

from rich.console import Console
from rich.markup import escape

from stowed.core.deploy import RunSummary
from stowed.core.linker import LinkAction
from stowed.core.reporting import LinkReporter
from stowed.models.link import LinkResult
from stowed.utils.formatting import console, err_console

# "[Dry run]" is not a valid markup tag, so Rich prints it literally
DRY_RUN_PREFIX = "[dry_run][Dry run][/]"


def format_link(action: LinkAction) -> str:
    """Render ``source → destination`` with Rich markup."""
    return (
        f"[path]{escape(str(action.real_path))}[/] [muted]→[/] "
        f"[path]{escape(str(action.link_path))}[/]"
    )


def format_status(action: LinkAction, dry_run: bool) -> str | None:
    """Build the status line for an applied action.

    Args:
        action: Applied action.
        dry_run: Whether the run made no filesystem changes.

    Returns:
        Rich markup string, or None for FAILED (reported separately).
    """
    target = format_link(action)
    result = action.result

    if result == LinkResult.LINKED:
        marker = DRY_RUN_PREFIX if dry_run else "[linked]✔[/]"
        return f"{marker} [muted]Linked[/] {target}"
    if result == LinkResult.UNLINKED:
        marker = DRY_RUN_PREFIX if dry_run else "[unlinked]✘[/]"
        return f"{marker} [muted]Unlinked[/] {target}"
    if result == LinkResult.NOTHING:
        prefix = f"{DRY_RUN_PREFIX} " if dry_run else ""
        return f"  {prefix}[muted]Nothing to do for[/] {target}"
    return None


class ConsoleReporter(LinkReporter):
    """Prints link action outcomes to the terminal."""

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self._out = out or console
        self._err = err or err_console

    def status(self, action: LinkAction, dry_run: bool) -> None:
        line = format_status(action, dry_run)
        if line is not None:
            self._out.print(line, soft_wrap=True)

    def failure(self, action: LinkAction, message: str) -> None:
        self._err.print(f"[error]{escape(message)}[/]", soft_wrap=True)


def print_run_summary(summary: RunSummary, dry_run: bool = False) -> None:
    """Print a one-line count of outcomes for a successful run.

    Args:
        summary: Aggregated run outcome.
        dry_run: Whether this was a dry run.
    """
    counts = summary.counts()
    parts: list[str] = []
    if counts[LinkResult.LINKED]:
        parts.append(f"[linked]{counts[LinkResult.LINKED]} linked[/]")
    if counts[LinkResult.UNLINKED]:
        parts.append(f"[unlinked]{counts[LinkResult.UNLINKED]} unlinked[/]")
    if counts[LinkResult.NOTHING]:
        parts.append(f"[muted]{counts[LinkResult.NOTHING]} unchanged[/]")

    if not parts:
        console.print("[muted]No links to process.[/]")
        return

    label = "Dry run" if dry_run else "Summary"
    console.print(f"\n{label}: {', '.join(parts)}")
