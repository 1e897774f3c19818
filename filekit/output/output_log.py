"""OutputLog for timestamped messages to a text file and the console.

This module provides the OutputLog class. It is a caller-side collaborator:
the filekit core never logs through it, the CLI and embedding tools do.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from rich.console import Console


class OutputLog:
    """Writes timestamped log lines to an optional file and to a Rich console.

    Usage:
        log = OutputLog(log_path=Path("run.log"), verbose=False)
        log.log("Copied 12 files", color="green")
        log.log("Scanning mods/base", verbose_only=True)   # dropped unless verbose
        log.log("Progress: 50%", skip_file=True)           # console only

    Attributes:
        TIMESTAMP_FORMAT: strftime format of the timestamp prefix in the log file.
        log_path: File the log text is appended to, or None to skip file output.
        verbose: Whether messages flagged verbose_only are emitted.
    """

    TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M %p"

    def __init__(
        self,
        log_path: Optional[Union[str, Path]] = None,
        verbose: bool = False,
        console: Optional[Console] = None,
    ) -> None:
        """Initialize the OutputLog.

        Args:
            log_path: Optional path of the text file to append to.
            verbose: Emit messages flagged verbose_only.
            console: Rich console for display output. Defaults to a new Console.
        """
        self.log_path = Path(log_path) if log_path is not None else None
        self.verbose = verbose
        self.console = console if console is not None else Console()

    def log(
        self,
        text: str,
        color: Optional[str] = None,
        verbose_only: bool = False,
        skip_file: bool = False,
    ) -> None:
        """Log a message.

        Args:
            text: The text to log.
            color: Rich color or style name for the console output.
            verbose_only: Only log the message when verbose logging is on.
            skip_file: Do not append the message to the log file.
        """
        if verbose_only and not self.verbose:
            return

        if self.log_path is not None and not skip_file:
            self._append(f"\n[{self._format_timestamp(datetime.now())}] {text}")

        self.console.print(text, style=color, markup=False, highlight=False)

    def _append(self, log_text: str) -> None:
        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(log_text)
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)

    def _format_timestamp(self, dt: datetime) -> str:
        """Format a datetime as a timestamp string.

        Returns:
            Timestamp in 'MM/DD/YYYY HH:MM AM' format.
        """
        return dt.strftime(self.TIMESTAMP_FORMAT)
