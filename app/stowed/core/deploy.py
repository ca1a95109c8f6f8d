"""Deployment orchestration.

Validates the requested packages, resolves them into link actions and
applies every action, aggregating the outcomes. These functions back
the ``stowed`` command.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from stowed.core.linker import LinkAction
from stowed.core.reporting import LinkReporter
from stowed.core.resolver import discover
from stowed.models.link import LinkResult, RunOptions
from stowed.models.package import Package, PackageNotFoundError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunSummary:
    """Aggregated outcome of applying a set of link actions.

    Attributes:
        succeeded: Actions that ended LINKED, UNLINKED or NOTHING.
        failed: Actions that ended FAILED.
    """

    succeeded: list[LinkAction] = field(default_factory=list)
    failed: list[LinkAction] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if no action failed."""
        return not self.failed

    @property
    def total(self) -> int:
        """Number of applied actions."""
        return len(self.succeeded) + len(self.failed)

    def counts(self) -> dict[LinkResult, int]:
        """Count applied actions per outcome."""
        counter = Counter(a.result for a in (*self.succeeded, *self.failed))
        return {result: counter.get(result, 0) for result in LinkResult}


def load_packages(inputs: Iterable[str], root_dir: Path) -> list[Package]:
    """Build and validate every requested package before any link is touched.

    Duplicate inputs naming the same package are collapsed, keeping the
    order of first occurrence.

    Args:
        inputs: Package identifiers from the command line.
        root_dir: Directory that holds the packages.

    Returns:
        Packages in input order.

    Raises:
        InvalidPackageError: If an input does not name a package.
        PackageNotFoundError: If a package directory does not exist.
    """
    packages: list[Package] = []
    seen: set[str] = set()
    for value in inputs:
        package = Package.from_input(value, root_dir)
        if package.name in seen:
            continue
        seen.add(package.name)
        packages.append(package)

    for package in packages:
        if not package.exists():
            msg = f"Package does not exist: {package.name}"
            raise PackageNotFoundError(msg)

    return packages


def resolve_links(
    packages: Iterable[Package],
    target_dir: Path,
    options: RunOptions,
    reporter: LinkReporter | None = None,
) -> list[LinkAction]:
    """Resolve packages into link actions, in package order.

    Raises:
        ResolutionError: If a package tree cannot be read.
    """
    links: list[LinkAction] = []
    for package in packages:
        package_links = discover(package, target_dir, options, reporter)
        logger.debug("Resolved %d link(s) for package %s", len(package_links), package.name)
        links.extend(package_links)
    return links


def apply_links(links: Iterable[LinkAction]) -> RunSummary:
    """Apply every link action sequentially and aggregate the outcomes.

    A failed action does not stop the remaining ones.

    Args:
        links: Actions to apply.

    Returns:
        RunSummary with succeeded and failed actions.
    """
    summary = RunSummary()
    for link in links:
        if link.apply().is_failure:
            summary.failed.append(link)
        else:
            summary.succeeded.append(link)

    if summary.failed:
        logger.debug("%d of %d link action(s) failed", len(summary.failed), summary.total)
    return summary


def run(
    inputs: Iterable[str],
    root_dir: Path,
    target_dir: Path,
    options: RunOptions,
    reporter: LinkReporter | None = None,
) -> RunSummary:
    """Validate, resolve and apply the requested packages.

    Raises:
        PackageError: If validation or resolution fails; nothing is applied then.
    """
    packages = load_packages(inputs, root_dir)
    links = resolve_links(packages, target_dir, options, reporter)
    return apply_links(links)
