"""Availability waiting package for filekit.

Polls for files and directories that another process may still be creating.

Example:
    >>> from filekit.availability import AvailabilityWaiter
    >>> waiter = AvailabilityWaiter(attempts=5, delay=1.0)
    >>> waiter.wait_for_directory("incoming")
"""

from .availability_waiter import (
    DEFAULT_ATTEMPTS,
    DEFAULT_DELAY_SECONDS,
    AvailabilityWaiter,
    wait_for_directory,
    wait_for_file,
)

__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_DELAY_SECONDS",
    "AvailabilityWaiter",
    "wait_for_directory",
    "wait_for_file",
]
