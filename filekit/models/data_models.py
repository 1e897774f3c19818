"""
Core data models for the filesystem utility toolkit.

This module contains the following dataclasses:
- ComparisonResult: Outcome of an identical-file check and the stage that decided it
"""

from dataclasses import dataclass
from pathlib import Path

from .compare_method import CompareMethod


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two files."""
    path_a: Path                      # First compared path
    path_b: Path                      # Second compared path
    identical: bool                   # True when the files are considered identical
    method: CompareMethod             # Stage that decided the outcome

    def __bool__(self) -> bool:
        return self.identical
