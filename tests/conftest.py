"""Pytest fixtures for filekit tests."""

import os
import platform
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional

import pytest
from PIL import Image

from filekit.operations import DirectoryTree


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests combining several components")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_files(temp_dir: Path) -> Dict[str, Path]:
    """Create test files of various sizes with known content.

    Creates:
        - empty.txt: 0 bytes
        - empty_copy.txt: 0 bytes
        - small.txt: 1KB with 'a' characters
        - small_copy.txt: same content as small.txt
        - medium.txt: 1MB with 'b' characters
        - medium_copy.txt: same content as medium.txt

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Dictionary mapping file keys to their paths.
    """
    contents = {
        "empty": b"",
        "small": b"a" * 1024,
        "medium": b"b" * (1024 * 1024),
    }

    files = {}
    for key, content in contents.items():
        original = temp_dir / f"{key}.txt"
        original.write_bytes(content)
        files[key] = original

        copy = temp_dir / f"{key}_copy.txt"
        copy.write_bytes(content)
        files[f"{key}_copy"] = copy

    return files


@pytest.fixture
def source_tree(temp_dir: Path) -> Path:
    """Create a nested source tree for copy tests.

    Creates:
        temp_dir/source/
        ├── readme.txt
        ├── data.bin (256 bytes, every byte value)
        ├── assets/
        │   ├── icon.txt
        │   └── textures/
        │       └── stone.txt
        ├── empty/
        └── scripts/
            └── init.txt

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the source directory.
    """
    source = temp_dir / "source"
    (source / "assets" / "textures").mkdir(parents=True)
    (source / "empty").mkdir()
    (source / "scripts").mkdir()

    (source / "readme.txt").write_text("top level readme")
    (source / "data.bin").write_bytes(bytes(range(256)))
    (source / "assets" / "icon.txt").write_text("icon")
    (source / "assets" / "textures" / "stone.txt").write_text("stone texture")
    (source / "scripts" / "init.txt").write_text("print('init')")

    return source


@pytest.fixture
def prune_tree(temp_dir: Path) -> Path:
    """Create a tree mixing empty chains and directories holding files.

    Creates:
        temp_dir/root/
        ├── keep.txt
        ├── chain/            (removed)
        │   └── a/
        │       └── b/
        │           └── c/
        ├── mixed/            (kept)
        │   ├── empty/        (removed)
        │   └── deep/         (kept)
        │       └── deeper/
        │           └── file.txt
        └── lone/             (removed)

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the root directory.
    """
    root = temp_dir / "root"
    (root / "chain" / "a" / "b" / "c").mkdir(parents=True)
    (root / "mixed" / "empty").mkdir(parents=True)
    (root / "mixed" / "deep" / "deeper").mkdir(parents=True)
    (root / "lone").mkdir()

    (root / "keep.txt").write_text("keep")
    (root / "mixed" / "deep" / "deeper" / "file.txt").write_text("file")

    return root


@pytest.fixture
def sample_images(temp_dir: Path) -> Dict[str, Path]:
    """Create small images, some sharing pixels across different encodings.

    Creates:
        - red.png / red.bmp: same 8x8 red square, two encodings
        - blue.png: 8x8 blue square
        - red_big.png: 16x16 red square

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Dictionary mapping image keys to their paths.
    """
    images = {}

    red = Image.new("RGB", (8, 8), (255, 0, 0))
    for ext in ("png", "bmp"):
        path = temp_dir / f"red.{ext}"
        red.save(path)
        images[f"red_{ext}"] = path

    blue = temp_dir / "blue.png"
    Image.new("RGB", (8, 8), (0, 0, 255)).save(blue)
    images["blue_png"] = blue

    red_big = temp_dir / "red_big.png"
    Image.new("RGB", (16, 16), (255, 0, 0)).save(red_big)
    images["red_big_png"] = red_big

    return images


@pytest.fixture
def restricted_dir(temp_dir: Path) -> Generator[Optional[Path], None, None]:
    """Create a directory without read or execute permissions.

    Note: This fixture is platform-specific. On Windows, or when running as
    root (which ignores permission bits), it yields None.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to the restricted directory, or None if permissions cannot be enforced.
    """
    if platform.system() == "Windows" or os.geteuid() == 0:
        yield None
        return

    restricted = temp_dir / "root" / "outer" / "locked"
    (restricted / "inner").mkdir(parents=True)

    original_mode = restricted.stat().st_mode
    os.chmod(restricted, 0o000)

    try:
        yield restricted
    finally:
        # Restore permissions for cleanup
        os.chmod(restricted, original_mode)


@pytest.fixture
def directory_tree() -> DirectoryTree:
    """Return a DirectoryTree in live mode."""
    return DirectoryTree(dry_run=False)


class FakeSleep:
    """Records sleep calls instead of sleeping and runs an optional hook.

    The hook receives the 1-based call number, so tests can make a path
    appear or a lock disappear after a given number of failed attempts.
    """

    def __init__(self, on_call=None) -> None:
        self.calls: List[float] = []
        self._on_call = on_call

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self._on_call is not None:
            self._on_call(len(self.calls))

    @property
    def total(self) -> float:
        return sum(self.calls)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    """Return a FakeSleep with no hook."""
    return FakeSleep()


@pytest.fixture
def fake_sleep_factory():
    """Return the FakeSleep class so tests can attach a hook."""
    return FakeSleep
