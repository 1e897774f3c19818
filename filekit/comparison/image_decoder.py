"""Image decoding for perceptual file comparison.

Decodes image files into RGBA pixel buffers with Pillow so two files with
different encodings can be checked for equal pixels.
"""

import os
from pathlib import Path
from typing import FrozenSet, Union

from PIL import Image

PathLike = Union[str, os.PathLike]

# Extensions eligible for perceptual comparison (matched case-insensitively)
IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".jpg", ".jpeg", ".bmp", ".png", ".jfif", ".gif", ".tif", ".tiff",
})


def is_image_path(path: PathLike) -> bool:
    """Return True if `path` has one of the recognised image extensions."""
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


class ImageDecoder:
    """
    Turns image files into comparable pixel buffers.

    Every image is converted to RGBA so that palette, greyscale and RGB
    encodings of the same picture produce the same buffer.
    """

    MODE = "RGBA"

    def decode(self, path: PathLike) -> Image.Image:
        """
        Decode `path` into a fully loaded RGBA image.

        The source file is closed before returning.

        Raises:
            OSError: If the file cannot be read or is not a decodable image.
        """
        with Image.open(path) as image:
            return image.convert(self.MODE)

    def pixels_equal(self, first: Image.Image, second: Image.Image) -> bool:
        """Return True if both images have the same size and identical pixels."""
        if first.size != second.size:
            return False
        return first.tobytes() == second.tobytes()
