"""
Polling waits for files and directories written by another process.

This module provides the AvailabilityWaiter class. It repeatedly tries to
open a file (or observe a directory) that an external, uncoordinated
producer may still be creating, sleeping a fixed interval between attempts.

Example:
    >>> from filekit.availability import AvailabilityWaiter
    >>> waiter = AvailabilityWaiter()
    >>> handle = waiter.wait_for_file("incoming/archive.bin", mode="rb")
    >>> if handle is None:
    ...     raise SystemExit("archive never became available")
    >>> with handle:
    ...     data = handle.read()
"""

import logging
import os
import time
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Union

from filekit.models import SharePolicy

if os.name == "posix":
    import fcntl
else:
    fcntl = None

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# Default polling budget: 10 attempts, 2 seconds apart
DEFAULT_ATTEMPTS = 10
DEFAULT_DELAY_SECONDS = 2.0


class AvailabilityWaiter:
    """
    Waits for a path to become usable with a fixed polling cadence.

    Each wait makes up to `attempts` attempts and sleeps `delay` seconds after
    every failed one. There is no backoff, no jitter and no cancellation: a
    wait runs until success or until its budget is spent.

    Attributes:
        attempts: Maximum number of attempts per wait.
        delay: Seconds slept after each failed attempt.
    """

    def __init__(
        self,
        attempts: int = DEFAULT_ATTEMPTS,
        delay: float = DEFAULT_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Create a waiter with the given polling budget.

        Parameters:
            attempts (int): Maximum number of attempts per wait. Must be at least 1.
            delay (float): Seconds to sleep after each failed attempt. Must not be negative.
            sleep (Callable[[float], None]): Function used to sleep between attempts.

        Raises:
            ValueError: If `attempts` or `delay` is out of range.
        """
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.attempts = attempts
        self.delay = delay
        self._sleep = sleep

    def wait_for_file(
        self,
        path: PathLike,
        mode: str = "r+b",
        share: SharePolicy = SharePolicy.NONE,
    ) -> Optional[BinaryIO]:
        """
        Open `path`, retrying while it is missing, locked or otherwise unavailable.

        A handle that opened but could not take the lock required by `share` is
        closed before the next attempt, so only fully acquired handles are ever
        returned.

        Parameters:
            path: File to open.
            mode (str): Mode passed to `open()`; decides access rights and whether the file is created.
            share (SharePolicy): What other processes may still do with the file while the handle is held.

        Returns:
            The open file object, owned by the caller, or None when the file did not
            become available within the polling budget.
        """
        for attempt in range(1, self.attempts + 1):
            handle = self._try_open(path, mode, share)
            if handle is not None:
                logger.debug(f"Opened {path} on attempt {attempt}")
                return handle
            self._sleep(self.delay)

        logger.debug(f"{path} unavailable after {self.attempts} attempts")
        return None

    def wait_for_directory(self, path: PathLike) -> None:
        """
        Return once `path` exists as a directory or the polling budget is spent.

        Nothing signals which of the two happened; callers that need the
        directory must check for it afterwards.

        Parameters:
            path: Directory to wait for.
        """
        directory = Path(path)
        for _ in range(self.attempts):
            if directory.is_dir():
                return
            self._sleep(self.delay)

        logger.debug(f"Directory {path} not found after {self.attempts} attempts")

    def _try_open(
        self,
        path: PathLike,
        mode: str,
        share: SharePolicy,
    ) -> Optional[BinaryIO]:
        """
        Make a single attempt to open and lock `path`.

        Truncating modes ("w", "w+") open the file without truncating it and
        truncate only once the lock is held, so a failed attempt never wipes
        a file another process is still writing.

        Returns:
            The open, locked handle, or None if the open or the lock failed.
        """
        truncate = "w" in mode
        handle = None
        try:
            handle = self._open_untruncated(path, mode) if truncate else open(path, mode)
            self._lock(handle, share)
            if truncate:
                handle.truncate(0)
            return handle
        except OSError as e:
            if handle is not None:
                handle.close()
            logger.debug(f"Waiting for {path}: {e}")
            return None

    @staticmethod
    def _open_untruncated(path: PathLike, mode: str) -> BinaryIO:
        """Open `path` for writing like `open(path, mode)` but without O_TRUNC."""
        flags = os.O_CREAT | (os.O_RDWR if "+" in mode else os.O_WRONLY)
        flags |= getattr(os, "O_BINARY", 0)
        fd = os.open(path, flags)
        try:
            return os.fdopen(fd, mode)
        except (OSError, ValueError):
            os.close(fd)
            raise

    def _lock(self, handle: BinaryIO, share: SharePolicy) -> None:
        """Take a non-blocking advisory lock matching `share`."""
        if fcntl is None or share is SharePolicy.READ_WRITE:
            return
        operation = fcntl.LOCK_EX if share is SharePolicy.NONE else fcntl.LOCK_SH
        fcntl.flock(handle.fileno(), operation | fcntl.LOCK_NB)


def wait_for_file(
    path: PathLike,
    mode: str = "r+b",
    share: SharePolicy = SharePolicy.NONE,
) -> Optional[BinaryIO]:
    """Wait for `path` with the default polling budget. See AvailabilityWaiter.wait_for_file."""
    return AvailabilityWaiter().wait_for_file(path, mode, share)


def wait_for_directory(path: PathLike) -> None:
    """Wait for directory `path` with the default polling budget."""
    AvailabilityWaiter().wait_for_directory(path)
