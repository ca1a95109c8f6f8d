"""Link discovery for packages.

Walks a package directory and decides, for each node, whether to
link it directly, link it as a unit, or recurse further:

1. Files are linked individually.
2. Directories named after the package are linked whole (the package
   owns that subtree).
3. Directories holding at least one direct file are leaf directories
   and are linked whole.
4. Directories holding only subdirectories are containers and are
   traversed.
"""

import logging
import stat
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

from stowed.core.linker import LinkAction
from stowed.core.reporting import LinkReporter
from stowed.models.link import RunOptions
from stowed.models.package import Package, PackageError

logger = logging.getLogger(__name__)


class ResolutionError(PackageError):
    """Raised when a package tree cannot be listed or inspected."""


class NodeKind(Enum):
    """Filesystem type of a directory entry (symlinks followed)."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class DirectoryKind(Enum):
    """Classification of a directory inside a package.

    Attributes:
        OWNED: Named after the package; linked as a whole.
        LEAF: Holds at least one direct file; linked as a whole.
        CONTAINER: Holds only subdirectories; traversed further.
    """

    OWNED = "owned"
    LEAF = "leaf"
    CONTAINER = "container"


def classify_directory(
    name: str,
    package_name: str,
    child_kinds: Iterable[NodeKind],
) -> DirectoryKind:
    """Classify a directory from its name and its direct children.

    The name check happens first, so ``child_kinds`` is not consumed
    for directories owned by the package.

    Args:
        name: Directory basename.
        package_name: Name of the package being resolved.
        child_kinds: Kinds of the directory's direct children.

    Returns:
        The DirectoryKind for this directory.
    """
    if name == package_name:
        return DirectoryKind.OWNED
    if any(kind == NodeKind.FILE for kind in child_kinds):
        return DirectoryKind.LEAF
    return DirectoryKind.CONTAINER


def node_kind(path: Path) -> NodeKind:
    """Return the kind of ``path``, following symlinks.

    Raises:
        OSError: If the path cannot be stat'd.
    """
    mode = path.stat().st_mode
    if stat.S_ISREG(mode):
        return NodeKind.FILE
    if stat.S_ISDIR(mode):
        return NodeKind.DIRECTORY
    return NodeKind.OTHER


def list_children(directory: Path) -> list[Path]:
    """List the direct children of ``directory`` sorted by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _child_kinds(directory: Path) -> Iterator[NodeKind]:
    for child in list_children(directory):
        yield node_kind(child)


def contains_files(directory: Path) -> bool:
    """Check if a directory has at least one direct file child.

    Only direct children are inspected; files deeper down do not count.

    Raises:
        OSError: If the directory or one of its children cannot be read.
    """
    return any(kind == NodeKind.FILE for kind in _child_kinds(directory))


def discover(
    package: Package,
    target_dir: Path,
    options: RunOptions | None = None,
    reporter: LinkReporter | None = None,
) -> list[LinkAction]:
    """Discover every link action needed to deploy a package.

    Args:
        package: Package to resolve.
        target_dir: Directory the package is deployed into.
        options: Run options handed to every created action.
        reporter: Reporter handed to every created action.

    Returns:
        Link actions in depth-first, name-sorted order.

    Raises:
        ResolutionError: If any directory in the package cannot be read.
    """
    try:
        return list(_walk(package, package.path, Path(target_dir), Path(), options, reporter))
    except OSError as e:
        location = e.filename or package.path
        msg = f"Cannot resolve package {package.name}: {location}: {e.strerror or e}"
        raise ResolutionError(msg) from e


def _walk(
    package: Package,
    current: Path,
    target_dir: Path,
    relative: Path,
    options: RunOptions | None,
    reporter: LinkReporter | None,
) -> Iterator[LinkAction]:
    """Yield link actions for the children of ``current``."""
    for child in list_children(current):
        child_relative = relative / child.name
        kind = node_kind(child)

        if kind == NodeKind.FILE:
            yield LinkAction(child, target_dir / child_relative, options, reporter)
            continue

        if kind != NodeKind.DIRECTORY:
            logger.debug("Skipping non-regular entry: %s", child)
            continue

        dir_kind = classify_directory(child.name, package.name, _child_kinds(child))
        logger.debug("%s: %s", child_relative, dir_kind.value)

        if dir_kind == DirectoryKind.CONTAINER:
            yield from _walk(package, child, target_dir, child_relative, options, reporter)
        else:
            yield LinkAction(child, target_dir / child_relative, options, reporter)
