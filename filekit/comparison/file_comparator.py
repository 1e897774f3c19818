"""
Identical-file detection with an optional perceptual image stage.

This module contains the FileComparator class. Two files are compared in two
explicit stages:

1. Perceptual (optional): when enabled and both files carry an image
   extension, the decoded pixel buffers are compared. Only a positive match
   decides the outcome; a mismatch or a decoding failure moves on to stage 2.
2. Exact: lengths are compared first, then the contents are streamed from
   both files in lock-step until a difference or the end of both files.

Example:
    >>> from filekit.comparison import FileComparator
    >>> comparator = FileComparator(compare_images_perceptually=True)
    >>> if comparator.are_identical("a/cover.png", "b/cover.bmp"):
    ...     print("duplicate")
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

from PIL import Image

from filekit.models import CompareMethod, ComparisonResult

from .image_decoder import ImageDecoder, is_image_path

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# Read size for the exact comparison stage (8KB)
CHUNK_SIZE = 8192


class FileComparator:
    """
    Decides whether two files are identical.

    Attributes:
        compare_images_perceptually: Whether image files may be reported identical
            because their decoded pixels match.
        decoder: ImageDecoder used for the perceptual stage.
    """

    def __init__(
        self,
        compare_images_perceptually: bool = False,
        decoder: Optional[ImageDecoder] = None,
    ) -> None:
        """
        Create a comparator.

        Parameters:
            compare_images_perceptually (bool): Enable the perceptual stage for image files.
            decoder (Optional[ImageDecoder]): Decoder for the perceptual stage. A default
                ImageDecoder is created when not provided.
        """
        self.compare_images_perceptually = compare_images_perceptually
        self.decoder = decoder if decoder is not None else ImageDecoder()

    def are_identical(self, path_a: PathLike, path_b: PathLike) -> bool:
        """
        Return True if the two files are identical.

        Raises:
            OSError: If either file cannot be opened or read during the exact stage.
        """
        return self.compare(path_a, path_b).identical

    def compare(self, path_a: PathLike, path_b: PathLike) -> ComparisonResult:
        """
        Compare two files and report which stage decided the outcome.

        Paths that are textually equal are identical without touching the
        filesystem. Otherwise the perceptual stage runs when enabled and both
        paths are images, followed by the exact stage unless the perceptual
        stage found a match.

        Parameters:
            path_a: First file.
            path_b: Second file.

        Returns:
            ComparisonResult: Outcome and deciding CompareMethod.

        Raises:
            OSError: If either file cannot be opened or read during the exact stage.
        """
        if os.fspath(path_a) == os.fspath(path_b):
            return self._result(path_a, path_b, True, CompareMethod.SAME_PATH)

        if (
            self.compare_images_perceptually
            and is_image_path(path_a)
            and is_image_path(path_b)
            and self._pixels_match(path_a, path_b)
        ):
            return self._result(path_a, path_b, True, CompareMethod.PERCEPTUAL)

        with open(path_a, "rb") as file_a, open(path_b, "rb") as file_b:
            # Length check first
            if os.fstat(file_a.fileno()).st_size != os.fstat(file_b.fileno()).st_size:
                return self._result(path_a, path_b, False, CompareMethod.SIZE_MISMATCH)

            identical = self._streams_equal(file_a, file_b)

        return self._result(path_a, path_b, identical, CompareMethod.BYTES)

    def _pixels_match(self, path_a: PathLike, path_b: PathLike) -> bool:
        """
        Run the perceptual stage.

        Returns:
            bool: True only if both images decoded and their pixels are equal.
                A decoding failure counts as no match.
        """
        try:
            image_a = self.decoder.decode(path_a)
            image_b = self.decoder.decode(path_b)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.debug(f"Perceptual comparison skipped for {path_a}, {path_b}: {e}")
            return False

        matched = self.decoder.pixels_equal(image_a, image_b)
        logger.debug(f"Perceptual comparison {path_a} == {path_b}: {matched}")
        return matched

    def _streams_equal(self, file_a: BinaryIO, file_b: BinaryIO) -> bool:
        """Read both streams in lock-step and return True if they end together without a difference."""
        while True:
            chunk_a = file_a.read(CHUNK_SIZE)
            chunk_b = file_b.read(CHUNK_SIZE)
            if chunk_a != chunk_b:
                return False
            if not chunk_a:
                return True

    @staticmethod
    def _result(
        path_a: PathLike,
        path_b: PathLike,
        identical: bool,
        method: CompareMethod,
    ) -> ComparisonResult:
        return ComparisonResult(
            path_a=Path(path_a),
            path_b=Path(path_b),
            identical=identical,
            method=method,
        )


def are_identical(
    path_a: PathLike,
    path_b: PathLike,
    compare_images_perceptually: bool = False,
) -> bool:
    """Return True if the two files are identical. See FileComparator.compare."""
    return FileComparator(compare_images_perceptually).are_identical(path_a, path_b)
