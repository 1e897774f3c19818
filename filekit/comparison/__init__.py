"""File comparison package for filekit.

This package detects identical files. It contains:

- FileComparator: Two-stage comparison (optional perceptual image check,
  then exact length and byte comparison).
- ImageDecoder: Decodes image files into RGBA pixel buffers with Pillow.

Example:
    >>> from filekit.comparison import are_identical
    >>> are_identical("old/data.bin", "new/data.bin")
    True
"""

from .file_comparator import CHUNK_SIZE, FileComparator, are_identical
from .image_decoder import IMAGE_EXTENSIONS, ImageDecoder, is_image_path

__all__ = [
    "CHUNK_SIZE",
    "FileComparator",
    "are_identical",
    "IMAGE_EXTENSIONS",
    "ImageDecoder",
    "is_image_path",
]
