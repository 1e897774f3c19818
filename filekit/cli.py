"""
filekit - Filesystem Utility Toolkit - CLI Interface.

A command-line interface over the filekit operations: recursive directory
copy, empty-subdirectory pruning, identical-file detection, unique naming
and waiting for files produced by other processes.

Usage Examples:
    # Copy a directory tree
    python -m filekit copy mods/base build/mods

    # Preview which empty subdirectories would be removed
    python -m filekit prune build/mods --dry-run

    # Compare two images by pixels, falling back to bytes
    python -m filekit compare a/cover.png b/cover.png --images

    # Pick a free name for a new file
    python -m filekit unique exports/report.txt

    # Wait up to 30 seconds for another process to finish writing a file
    python -m filekit wait incoming/archive.bin --attempts 15 --delay 2
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from filekit import __version__
from filekit.availability import DEFAULT_ATTEMPTS, DEFAULT_DELAY_SECONDS, AvailabilityWaiter
from filekit.comparison import FileComparator
from filekit.models import SharePolicy
from filekit.naming import make_unique_directory_name, make_unique_file_name
from filekit.operations import DirectoryTree
from filekit.output import OutputLog


# Initialize Typer app
app = typer.Typer(
    name="filekit",
    help="Filesystem Utility Toolkit - copy, prune, compare and name files safely.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()

LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    "-l",
    help="Append timestamped output to this file.",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-V",
    help="Enable verbose output.",
)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"filekit v{__version__}")
        raise typer.Exit()


def create_output(log_file: Optional[Path], verbose: bool) -> OutputLog:
    """
    Build the OutputLog for a command and configure library logging.

    With verbose enabled, DEBUG records from the filekit modules are shown
    through a RichHandler.

    Args:
        log_file: Optional log file path.
        verbose: Whether verbose output is enabled.

    Returns:
        OutputLog writing to the shared console.
    """
    package_logger = logging.getLogger("filekit")
    if verbose and not package_logger.handlers:
        package_logger.addHandler(RichHandler(console=console, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return OutputLog(log_path=log_file, verbose=verbose, console=console)


def validate_directory(path: Path, label: str) -> None:
    """
    Validate that `path` exists and is a directory.

    Raises:
        typer.Exit: If validation fails with descriptive error message.
    """
    if not path.exists():
        console.print(f"[red]Error:[/red] {label} does not exist: {path}")
        raise typer.Exit(1)

    if not path.is_dir():
        console.print(f"[red]Error:[/red] {label} is not a directory: {path}")
        raise typer.Exit(1)


def validate_attempts(value: int) -> int:
    """
    Validate the polling attempt count.

    Raises:
        typer.BadParameter: If value is below 1.
    """
    if value < 1:
        raise typer.BadParameter("Attempts must be at least 1")
    return value


def validate_delay(value: float) -> float:
    """
    Validate the polling delay.

    Raises:
        typer.BadParameter: If value is negative.
    """
    if value < 0:
        raise typer.BadParameter("Delay must not be negative")
    return value


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Filesystem Utility Toolkit - copy, prune, compare and name files safely."""
    pass


@app.command()
def copy(
    source: Path = typer.Argument(..., help="Directory to copy."),
    destination: Path = typer.Argument(..., help="Directory to copy into."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be copied without writing anything.",
    ),
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Recursively copy a directory tree.

    Existing files in the destination are overwritten. On error the
    destination may be left partially copied.
    """
    validate_directory(source, "Source")
    output = create_output(log_file, verbose)

    if dry_run:
        console.print("[yellow][DRY RUN MODE][/yellow] No files will be written.\n")

    try:
        copied = DirectoryTree(dry_run=dry_run).copy_directory(source, destination)
    except KeyboardInterrupt:
        console.print("\n[yellow]Copy interrupted by user.[/yellow]")
        raise typer.Exit(130)
    except PermissionError as e:
        console.print(f"[red]Error:[/red] Permission denied - {e}")
        raise typer.Exit(1)
    except OSError as e:
        if getattr(e, "errno", None) == 28:
            console.print("[red]Error:[/red] Disk full - copy aborted.")
            console.print(
                "[dim]Some files may have been partially copied. "
                "Please free up disk space and retry.[/dim]"
            )
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    verb = "Would copy" if dry_run else "Copied"
    output.log(f"{verb} {copied} file(s) from {source} to {destination}", color="green")


@app.command()
def prune(
    root: Path = typer.Argument(..., help="Directory whose empty subdirectories are removed."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Count removable directories without deleting them.",
    ),
    remove_root: bool = typer.Option(
        False,
        "--remove-root",
        help="Also remove ROOT itself if it holds no files.",
    ),
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Remove subdirectories that contain no files anywhere below them.

    Subtrees that cannot be read or removed are skipped and reported.
    """
    validate_directory(root, "Root")
    output = create_output(log_file, verbose)

    tree = DirectoryTree(dry_run=dry_run)
    removed = tree.prune_empty_directories(root, remove_root=remove_root)

    verb = "Would remove" if dry_run else "Removed"
    output.log(f"{verb} {removed} empty director(y/ies) under {root}", color="green")

    errors = tree.get_errors()
    if errors:
        output.log(f"Skipped {len(errors)} subtree(s):", color="yellow")
        for error in errors:
            output.log(f"  - {error}", color="yellow", verbose_only=True)


@app.command()
def compare(
    first: Path = typer.Argument(..., help="First file."),
    second: Path = typer.Argument(..., help="Second file."),
    images: bool = typer.Option(
        False,
        "--images",
        "-i",
        help="Treat images with identical pixels as identical.",
    ),
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Check whether two files are identical.

    Exits with 0 when identical, 1 when different and 2 on error.
    """
    output = create_output(log_file, verbose)

    try:
        result = FileComparator(compare_images_perceptually=images).compare(first, second)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    output.log(f"Decided by: {result.method.value}", verbose_only=True)
    if result.identical:
        output.log(f"Identical: {first} == {second}", color="green")
    else:
        output.log(f"Different: {first} != {second}", color="red")
        raise typer.Exit(1)


@app.command()
def unique(
    path: Path = typer.Argument(..., help="Desired file or directory path."),
    directory: bool = typer.Option(
        False,
        "--directory",
        "-d",
        help="Generate a directory name (counter appended) instead of a file name.",
    ),
) -> None:
    """Print a path that does not exist yet, derived from PATH."""
    if directory:
        result = make_unique_directory_name(path)
    else:
        result = make_unique_file_name(path)
    typer.echo(str(result))


@app.command()
def wait(
    path: Path = typer.Argument(..., help="File or directory to wait for."),
    directory: bool = typer.Option(
        False,
        "--directory",
        "-d",
        help="Wait for a directory to exist instead of a file to open.",
    ),
    attempts: int = typer.Option(
        DEFAULT_ATTEMPTS,
        "--attempts",
        "-a",
        help="Maximum number of attempts.",
        callback=validate_attempts,
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY_SECONDS,
        "--delay",
        help="Seconds between attempts.",
        callback=validate_delay,
    ),
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Wait until a file can be opened for reading or a directory exists.

    Exits with 1 when PATH is still unavailable after all attempts.
    """
    output = create_output(log_file, verbose)
    waiter = AvailabilityWaiter(attempts=attempts, delay=delay)

    try:
        if directory:
            waiter.wait_for_directory(path)
            available = path.is_dir()
        else:
            handle = waiter.wait_for_file(path, mode="rb", share=SharePolicy.READ)
            available = handle is not None
            if handle is not None:
                handle.close()
    except KeyboardInterrupt:
        console.print("\n[yellow]Wait interrupted by user.[/yellow]")
        raise typer.Exit(130)

    if available:
        output.log(f"Available: {path}", color="green")
    else:
        output.log(f"Unavailable after {attempts} attempt(s): {path}", color="red")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
