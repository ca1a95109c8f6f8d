"""Data models for stowed.

This module exports the core data structures used throughout the application.
"""

from stowed.models.config import StowedConfig
from stowed.models.link import LinkMode, LinkResult, RunOptions
from stowed.models.package import (
    InvalidPackageError,
    Package,
    PackageError,
    PackageNotFoundError,
    normalize_input,
)

__all__ = [
    "InvalidPackageError",
    "LinkMode",
    "LinkResult",
    "Package",
    "PackageError",
    "PackageNotFoundError",
    "RunOptions",
    "StowedConfig",
    "normalize_input",
]
