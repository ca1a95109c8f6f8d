"""Utility modules for stowed.

This module exports commonly used utility functions.
"""

from stowed.utils.formatting import (
    console,
    err_console,
    print_error,
)
from stowed.utils.log import setup_logging

__all__ = [
    "console",
    "err_console",
    "print_error",
    "setup_logging",
]
