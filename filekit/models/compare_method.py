"""
CompareMethod enum for the two-stage identical-file check.

Stages are evaluated in order:
1. Same Path - both arguments name the same location textually (no I/O)
2. Perceptual - decoded image pixels match (only a positive match decides)
3. Size Mismatch - file lengths differ, content is never read
4. Bytes - file contents were streamed and compared
"""

from enum import Enum


class CompareMethod(Enum):
    """Records which stage of the comparison decided the outcome."""
    SAME_PATH = "same_path"            # Both paths are textually equal
    PERCEPTUAL = "perceptual"          # Decoded pixel buffers are equal
    SIZE_MISMATCH = "size_mismatch"    # Lengths differ
    BYTES = "bytes"                    # Full byte-by-byte comparison
