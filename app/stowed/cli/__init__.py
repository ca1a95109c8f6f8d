"""CLI package for stowed.

This package contains the Typer application.
"""

from stowed.cli.main import app

__all__ = ["app"]
