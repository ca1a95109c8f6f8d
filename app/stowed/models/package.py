"""Package model.

A package is a named directory under the root directory whose
contents are deployed into the target directory via symlinks.
"""

from dataclasses import dataclass
from pathlib import Path


class PackageError(Exception):
    """Base exception for package-related errors."""


class InvalidPackageError(PackageError, ValueError):
    """Raised when a package identifier is empty or malformed."""


class PackageNotFoundError(PackageError):
    """Raised when a requested package directory does not exist."""


def normalize_input(value: str) -> str:
    """Strip one leading ``./`` and one trailing ``/`` from a package input."""
    if value.startswith("./"):
        value = value[2:]
    if value.endswith("/"):
        value = value[:-1]
    return value


@dataclass(frozen=True, slots=True)
class Package:
    """A deployable package directory.

    Attributes:
        name: First path segment of the user input.
        path: Absolute path of the package root (root directory joined with name).
    """

    name: str
    path: Path

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name or "/" in self.name or self.name in (".", ".."):
            msg = f"Invalid package path: {self.name}"
            raise InvalidPackageError(msg)

    @classmethod
    def from_input(cls, value: str, root_dir: Path) -> "Package":
        """Build a package from a command-line input.

        Sub-path inputs such as ``nvim/.config/nvim`` name the package
        of their first segment.

        Args:
            value: Raw package identifier as typed by the user.
            root_dir: Directory that holds the packages.

        Returns:
            Package rooted at ``root_dir / <name>``.

        Raises:
            InvalidPackageError: If no package name can be extracted.
        """
        name = normalize_input(value).split("/")[0]
        if not name:
            msg = f"Invalid package path: {value}"
            raise InvalidPackageError(msg)
        return cls(name=name, path=Path(root_dir).absolute() / name)

    def exists(self) -> bool:
        """Check if the package directory exists."""
        return self.path.exists()
