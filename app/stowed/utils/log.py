"""Logging configuration for stowed."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger to write to stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
