"""Output package for filekit.

- OutputLog: Timestamped log lines to a text file and a Rich console.
"""

from filekit.output.output_log import OutputLog

__all__ = ["OutputLog"]
