"""Path naming package for filekit.

Generates collision-free file and directory names by appending a counter
and offers small path helpers.

Example:
    >>> from filekit.naming import make_unique_directory_name
    >>> out_dir = make_unique_directory_name("build/output")
    >>> out_dir.mkdir()
"""

from .path_namer import (
    MAX_DIRECTORY_CANDIDATES,
    extensionless_path,
    make_unique_directory_name,
    make_unique_file_name,
    relative_path,
)

__all__ = [
    "MAX_DIRECTORY_CANDIDATES",
    "extensionless_path",
    "make_unique_directory_name",
    "make_unique_file_name",
    "relative_path",
]
