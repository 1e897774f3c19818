"""
Collision-free path naming for files and directories.

This module provides functions that pick a name not currently used by any
filesystem entry by appending a numeric counter to a base path. The check
happens once, at call time; nothing is reserved, so a concurrent creator
using the same base name can still collide.

Example:
    >>> from filekit.naming import make_unique_file_name
    >>> make_unique_file_name("exports/report.txt")
    PosixPath('exports/report (2).txt')
"""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# Highest directory candidate tried (base, base2 ... base999)
MAX_DIRECTORY_CANDIDATES = 999


def make_unique_directory_name(base_path: PathLike) -> Path:
    """
    Return `base_path`, or `base_path` with an integer appended, that does not exist yet.

    Candidates are `base`, `base2`, `base3` ... `base999`. The counter is appended
    directly to the last path component without a separator, so a trailing
    separator on `base_path` still yields a sibling directory. If every candidate
    is taken, `base999` is returned even though it exists; a warning is logged
    so the caller can tell the name is not actually unique.

    Parameters:
        base_path: Desired directory path.

    Returns:
        Path: First candidate that does not exist, or the colliding last candidate.
    """
    base = Path(base_path)
    if not base.name:
        # "." and "" name the current directory
        base = Path(os.path.abspath(base))
    candidate = base
    if not candidate.exists():
        return candidate

    for counter in range(2, MAX_DIRECTORY_CANDIDATES + 1):
        candidate = base.with_name(f"{base.name}{counter}")
        if not candidate.exists():
            logger.debug(f"Unique directory name: {candidate}")
            return candidate

    logger.warning(
        f"No free directory name for {base} after {MAX_DIRECTORY_CANDIDATES} "
        f"candidates, returning existing path {candidate}"
    )
    return candidate


def make_unique_file_name(base_path: PathLike) -> Path:
    """
    Return `base_path`, or a numbered variant of it, that does not exist yet.

    The counter is inserted before the extension in parentheses, starting at 2:
    `name.txt` -> `name (2).txt` -> `name (3).txt`. The counter is always applied
    to the original stem. There is no upper bound on the number of candidates.

    Parameters:
        base_path: Desired file path.

    Returns:
        Path: First candidate that does not exist.
    """
    candidate = Path(base_path)
    if not candidate.exists():
        return candidate

    parent = candidate.parent
    stem = candidate.stem
    suffix = candidate.suffix

    counter = 2
    while True:
        candidate = parent / f"{stem} ({counter}){suffix}"
        if not candidate.exists():
            logger.debug(f"Unique file name: {candidate}")
            return candidate
        counter += 1


def extensionless_path(path: PathLike) -> Path:
    """Return `path` with its final extension removed."""
    path = Path(path)
    return path.parent / path.stem


def relative_path(from_path: PathLike, to_path: PathLike) -> str:
    """
    Express `to_path` relative to `from_path`.

    When `from_path` is an existing file the result is relative to the
    directory containing it.

    Parameters:
        from_path: Starting file or directory.
        to_path: Target file or directory.

    Returns:
        str: Relative path using the platform separator.
    """
    start = Path(from_path)
    if start.is_file():
        start = start.parent
    return os.path.relpath(os.path.abspath(to_path), os.path.abspath(start))
