"""filekit - Filesystem Utility Toolkit.

Low-level file and directory helpers for asset and mod-management
pipelines: recursive directory copy, empty-subdirectory pruning,
identical-file detection with an image-aware stage, collision-free naming
and waiting for files written by other processes.
"""

__version__ = "0.1.0"

from .availability import AvailabilityWaiter, wait_for_directory, wait_for_file
from .comparison import FileComparator, ImageDecoder, are_identical
from .models import CompareMethod, ComparisonResult, SharePolicy
from .naming import (
    extensionless_path,
    make_unique_directory_name,
    make_unique_file_name,
    relative_path,
)
from .operations import DirectoryTree

__all__ = [
    "__version__",
    "AvailabilityWaiter",
    "wait_for_directory",
    "wait_for_file",
    "FileComparator",
    "ImageDecoder",
    "are_identical",
    "CompareMethod",
    "ComparisonResult",
    "SharePolicy",
    "extensionless_path",
    "make_unique_directory_name",
    "make_unique_file_name",
    "relative_path",
    "DirectoryTree",
]


def main() -> None:
    """Entry point for the filekit CLI application.

    Imports and runs the Typer app from the filekit.cli module.
    """
    from filekit.cli import app
    app()
