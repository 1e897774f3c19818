"""End-to-end tests for the filekit CLI.

This module tests the CLI interface using Typer's CliRunner.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filekit import __version__
from filekit.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CliRunner instance for testing."""
    return CliRunner()


class TestGlobalOptions:
    """Tests for app-level options."""

    def test_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_has_single_source(self):
        import filekit.cli

        assert filekit.cli.__version__ is __version__

    def test_no_args_shows_help(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, [])
        assert "Usage" in result.output


class TestCopyCommand:
    """Tests for the copy command."""

    def test_copy_tree(self, cli_runner: CliRunner, temp_dir: Path, source_tree: Path):
        destination = temp_dir / "out"

        result = cli_runner.invoke(app, ["copy", str(source_tree), str(destination)])

        assert result.exit_code == 0, result.output
        assert "Copied 5 file(s)" in result.output
        assert (destination / "assets" / "textures" / "stone.txt").read_text() == "stone texture"

    def test_copy_dry_run(self, cli_runner: CliRunner, temp_dir: Path, source_tree: Path):
        destination = temp_dir / "out"

        result = cli_runner.invoke(app, ["copy", str(source_tree), str(destination), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "DRY RUN" in result.output
        assert "Would copy 5 file(s)" in result.output
        assert not destination.exists()

    def test_copy_missing_source(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(app, ["copy", str(temp_dir / "missing"), str(temp_dir / "out")])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_copy_disk_full(self, cli_runner: CliRunner, temp_dir: Path, source_tree: Path):
        with patch("filekit.operations.directory_tree.shutil.copy2", side_effect=OSError(28, "No space left on device")):
            result = cli_runner.invoke(app, ["copy", str(source_tree), str(temp_dir / "out")])

        assert result.exit_code == 1
        assert "Disk full" in result.output

    def test_copy_writes_log_file(self, cli_runner: CliRunner, temp_dir: Path, source_tree: Path):
        log_file = temp_dir / "copy.log"

        result = cli_runner.invoke(
            app,
            ["copy", str(source_tree), str(temp_dir / "out"), "--log-file", str(log_file)],
        )

        assert result.exit_code == 0, result.output
        assert "Copied 5 file(s)" in log_file.read_text(encoding="utf-8")


class TestPruneCommand:
    """Tests for the prune command."""

    def test_prune(self, cli_runner: CliRunner, prune_tree: Path):
        result = cli_runner.invoke(app, ["prune", str(prune_tree)])

        assert result.exit_code == 0, result.output
        assert "Removed 6" in result.output
        assert not (prune_tree / "chain").exists()
        assert (prune_tree / "mixed" / "deep").is_dir()

    def test_prune_dry_run(self, cli_runner: CliRunner, prune_tree: Path):
        result = cli_runner.invoke(app, ["prune", str(prune_tree), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Would remove 6" in result.output
        assert (prune_tree / "chain").exists()

    def test_prune_remove_root(self, cli_runner: CliRunner, temp_dir: Path):
        root = temp_dir / "root"
        (root / "a").mkdir(parents=True)

        result = cli_runner.invoke(app, ["prune", str(root), "--remove-root"])

        assert result.exit_code == 0, result.output
        assert not root.exists()

    def test_prune_rejects_file(self, cli_runner: CliRunner, temp_dir: Path):
        target = temp_dir / "file.txt"
        target.write_text("x")
        result = cli_runner.invoke(app, ["prune", str(target)])
        assert result.exit_code == 1
        assert "not a directory" in result.output


class TestCompareCommand:
    """Tests for the compare command."""

    def test_identical(self, cli_runner: CliRunner, sample_files):
        result = cli_runner.invoke(app, ["compare", str(sample_files["small"]), str(sample_files["small_copy"])])
        assert result.exit_code == 0
        assert "Identical" in result.output

    def test_different(self, cli_runner: CliRunner, sample_files):
        result = cli_runner.invoke(app, ["compare", str(sample_files["small"]), str(sample_files["medium"])])
        assert result.exit_code == 1
        assert "Different" in result.output

    def test_images_flag(self, cli_runner: CliRunner, sample_images):
        args = ["compare", str(sample_images["red_png"]), str(sample_images["red_bmp"])]

        assert cli_runner.invoke(app, args).exit_code == 1
        assert cli_runner.invoke(app, args + ["--images"]).exit_code == 0

    def test_verbose_reports_method(self, cli_runner: CliRunner, sample_files):
        result = cli_runner.invoke(
            app,
            ["compare", str(sample_files["small"]), str(sample_files["medium"]), "--verbose"],
        )
        assert "size_mismatch" in result.output

    def test_missing_file_is_error(self, cli_runner: CliRunner, temp_dir: Path, sample_files):
        result = cli_runner.invoke(app, ["compare", str(sample_files["small"]), str(temp_dir / "absent")])
        assert result.exit_code == 2
        assert "Error" in result.output


class TestUniqueCommand:
    """Tests for the unique command."""

    def test_unique_file(self, cli_runner: CliRunner, temp_dir: Path):
        (temp_dir / "a.txt").write_text("x")
        (temp_dir / "a (2).txt").write_text("x")

        result = cli_runner.invoke(app, ["unique", str(temp_dir / "a.txt")])

        assert result.exit_code == 0
        assert result.output.strip() == str(temp_dir / "a (3).txt")

    def test_unique_directory(self, cli_runner: CliRunner, temp_dir: Path):
        (temp_dir / "out").mkdir()

        result = cli_runner.invoke(app, ["unique", str(temp_dir / "out"), "--directory"])

        assert result.exit_code == 0
        assert result.output.strip() == str(temp_dir / "out2")


class TestWaitCommand:
    """Tests for the wait command."""

    def test_wait_existing_file(self, cli_runner: CliRunner, sample_files):
        result = cli_runner.invoke(app, ["wait", str(sample_files["small"])])
        assert result.exit_code == 0
        assert "Available" in result.output

    def test_wait_missing_file(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(
            app,
            ["wait", str(temp_dir / "never.bin"), "--attempts", "2", "--delay", "0"],
        )
        assert result.exit_code == 1
        assert "Unavailable after 2 attempt(s)" in result.output

    def test_wait_existing_directory(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(app, ["wait", str(temp_dir), "--directory"])
        assert result.exit_code == 0

    def test_wait_missing_directory(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(
            app,
            ["wait", str(temp_dir / "never"), "--directory", "--attempts", "1", "--delay", "0"],
        )
        assert result.exit_code == 1

    def test_wait_rejects_zero_attempts(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(app, ["wait", str(temp_dir), "--attempts", "0"])
        assert result.exit_code != 0
