"""stowed - Symlink farm manager for dotfile packages.

Links the contents of named package directories into a target
directory, mirroring their layout with symbolic links.
"""

__version__ = "0.1.0"
