"""
Directory tree operations for the filesystem utility toolkit.

This module contains the DirectoryTree class for recursively copying a
directory and for pruning subdirectories that hold no files.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class DirectoryTree:
    """
    Copies directory trees and prunes empty subdirectories.

    Copying is fail-fast: any OSError reaches the caller and the destination may
    be left partially populated. Pruning is best-effort: an error inside one
    subtree is recorded and skipped, and the remaining subtrees are still pruned.
    Both operations support dry-run mode.

    Attributes:
        dry_run: If True, report what would happen without touching the filesystem.
        _errors: Error messages suppressed while pruning.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """
        Create a DirectoryTree.

        Parameters:
            dry_run (bool): If True, simulate operations without making filesystem changes.
        """
        self.dry_run = dry_run
        self._errors: List[str] = []

    def copy_directory(self, source: PathLike, destination: PathLike) -> int:
        """
        Recursively copy every file and subdirectory of `source` into `destination`.

        `destination` is created if missing. Files directly inside `source` are
        copied first (overwriting files of the same name, preserving metadata),
        then each subdirectory is copied into the destination subdirectory of the
        same name.

        Parameters:
            source: Existing, readable directory to copy.
            destination: Directory to copy into.

        Returns:
            int: Number of files copied (or that would be copied in dry-run mode).

        Raises:
            OSError: On any I/O failure. Nothing already copied is rolled back.
        """
        source = Path(source)
        destination = Path(destination)

        if not self.dry_run:
            destination.mkdir(parents=True, exist_ok=True)

        files, directories = self._list_children(source)

        copied = 0
        for file_path in files:
            dest_file = destination / file_path.name
            self._copy_file(file_path, dest_file)
            copied += 1

        for directory in directories:
            copied += self.copy_directory(directory, destination / directory.name)

        return copied

    def prune_empty_directories(self, root: PathLike, remove_root: bool = False) -> int:
        """
        Remove every subdirectory of `root` whose subtree contains no files.

        Subdirectories are handled depth-first, so chains of nested empty
        directories collapse bottom-up before their parent is checked. A
        directory holding a file anywhere below it is never removed. Symlinks
        are not followed and count as files, so a directory holding a link is
        kept and nothing outside `root` is touched.

        An OSError while listing, checking or removing a subtree is recorded
        (see get_errors) and only that subtree is skipped.

        Parameters:
            root: Directory to clean up.
            remove_root (bool): Also remove `root` itself when it ends up without files.

        Returns:
            int: Number of directories removed (or that would be removed in dry-run mode).
        """
        root = Path(root)

        if remove_root:
            return self._prune(root)

        removed = 0
        try:
            _, directories = self._list_children(root, follow_symlinks=False)
        except OSError as e:
            self._record_error(root, e)
            return removed

        for directory in directories:
            removed += self._prune(directory)
        return removed

    def get_errors(self) -> List[str]:
        """Get the error messages suppressed while pruning."""
        return self._errors.copy()

    def clear_errors(self) -> None:
        """Clear the list of suppressed errors."""
        self._errors.clear()

    def _prune(self, directory: Path) -> int:
        """
        Prune one subtree and return the number of directories removed from it.

        Errors are suppressed for this subtree only; whatever was removed before
        the error is still counted.
        """
        if self.dry_run:
            count, _ = self._count_prunable(directory)
            return count

        removed = 0
        try:
            _, subdirectories = self._list_children(directory, follow_symlinks=False)
            for subdirectory in subdirectories:
                removed += self._prune(subdirectory)

            if not self._contains_files(directory):
                directory.rmdir()
                removed += 1
                logger.debug(f"Removed empty directory: {directory}")
        except OSError as e:
            self._record_error(directory, e)

        return removed

    def _count_prunable(self, directory: Path) -> Tuple[int, bool]:
        """
        Count directories in a subtree that pruning would remove.

        Returns:
            Tuple[int, bool]: Number of prunable directories and whether the
                subtree holds any file. A subtree that cannot be read counts as
                holding files, since pruning would leave it in place.
        """
        try:
            files, subdirectories = self._list_children(directory, follow_symlinks=False)
        except OSError as e:
            self._record_error(directory, e)
            return 0, True

        count = 0
        has_files = bool(files)
        for subdirectory in subdirectories:
            sub_count, sub_has_files = self._count_prunable(subdirectory)
            count += sub_count
            has_files = has_files or sub_has_files

        if not has_files:
            count += 1
            logger.debug(f"[DRY RUN] Would remove empty directory: {directory}")
        return count, has_files

    def _contains_files(self, directory: Path) -> bool:
        """Return True if any file exists anywhere below `directory`."""
        files, subdirectories = self._list_children(directory, follow_symlinks=False)
        if files:
            return True
        return any(self._contains_files(subdirectory) for subdirectory in subdirectories)

    def _list_children(
        self, directory: Path, follow_symlinks: bool = True
    ) -> Tuple[List[Path], List[Path]]:
        """
        List the direct children of `directory`, split into files and directories.

        With `follow_symlinks` True a symlink is classified by its target.
        Otherwise it is listed as a file, so a link to a directory is never
        descended into. Entries are sorted by name.

        Raises:
            OSError: If the directory cannot be listed.
        """
        files: List[Path] = []
        directories: List[Path] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=follow_symlinks):
                    directories.append(Path(entry.path))
                else:
                    files.append(Path(entry.path))
        files.sort()
        directories.sort()
        return files, directories

    def _copy_file(self, source: Path, dest: Path) -> None:
        """
        Copy a file to the destination, overwriting it and preserving file metadata.

        In dry-run mode the intended copy is logged and no filesystem changes are made.
        """
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would copy: {source} -> {dest}")
            return

        shutil.copy2(source, dest)
        logger.debug(f"Copied: {source} -> {dest}")

    def _record_error(self, directory: Path, error: OSError) -> None:
        message = f"Skipped {directory}: {error}"
        logger.debug(message)
        self._errors.append(message)
