"""Configuration model for stowed.

This module defines the Pydantic model for the optional
``config.toml`` file that supplies defaults for command-line options.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StowedConfig(BaseModel):
    """User configuration loaded from ``~/.config/stowed/config.toml``.

    Attributes:
        target: Default target directory (home directory when unset).
        root: Default directory holding packages (working directory when unset).
        silent: Suppress "nothing to do" messages by default.
    """

    model_config = ConfigDict(extra="forbid")

    target: Annotated[Path | None, Field(description="Default target directory")] = None
    root: Annotated[Path | None, Field(description="Directory holding the packages")] = None
    silent: Annotated[bool, Field(description="Suppress no-op messages")] = False

    @field_validator("target", "root", mode="after")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        """Expand a leading ``~`` in configured paths."""
        if v is None:
            return None
        return v.expanduser()
