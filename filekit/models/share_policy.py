"""
SharePolicy enum for handles returned by the availability waiter.

The policy states what other openers may do with the file while the
returned handle is held. On POSIX it maps to a non-blocking advisory lock.
"""

from enum import Enum


class SharePolicy(Enum):
    """Access other processes keep while the handle is open."""
    NONE = "none"                      # Exclusive lock, nobody else may lock the file
    READ = "read"                      # Shared lock, other readers may lock too
    READ_WRITE = "read_write"          # No lock taken
