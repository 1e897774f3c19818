"""
Models package for the filesystem utility toolkit.

This package provides convenient imports for all data models:
- CompareMethod: Enum for the comparison stage that decided an outcome
- SharePolicy: Enum for the sharing mode of waited-for file handles
- ComparisonResult: Result of an identical-file check
"""

from .compare_method import CompareMethod
from .share_policy import SharePolicy
from .data_models import ComparisonResult

__all__ = [
    "CompareMethod",
    "SharePolicy",
    "ComparisonResult",
]
