"""Directory tree operations package for filekit.

This package provides the DirectoryTree class for recursive directory copies
and best-effort removal of empty subdirectories.

Example:
    >>> from filekit.operations import DirectoryTree
    >>> tree = DirectoryTree()
    >>> copied = tree.copy_directory("mods/base", "build/mods")
    >>> removed = tree.prune_empty_directories("build/mods")
    >>> print(f"Copied: {copied}, Removed: {removed}")
"""

from .directory_tree import DirectoryTree

__all__ = ["DirectoryTree"]
