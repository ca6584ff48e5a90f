"""Unit tests for DeletionPolicy.

Tests matching, interactive confirmation, dry-run and deletion
failure handling for single entries.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

from rmds.cleaner.config import CleanConfig
from rmds.cleaner.models import Outcome
from rmds.cleaner.policy import DeletionPolicy

from conftest import CapturedOutput


def _target(tmp_path: Path, name: str = ".DS_Store") -> Path:
    path = tmp_path / name
    path.write_bytes(b"Bud1")
    return path


class TestConsiderMatching:
    """Tests for the match step."""

    def test_non_matching_entry_untouched(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """Entries that do not match are left alone and produce no output."""
        other = _target(tmp_path, "notes.txt")
        policy = DeletionPolicy(CleanConfig(), captured.reporter())

        assert policy.consider(other.name, str(other)) == Outcome.NO_MATCH
        assert other.exists()
        assert captured.stdout == ""

    def test_matching_entry_deleted(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """A matching entry is removed and reported."""
        target = _target(tmp_path)
        policy = DeletionPolicy(CleanConfig(), captured.reporter())

        assert policy.consider(target.name, str(target)) == Outcome.DELETED
        assert not target.exists()
        assert f"Deleted: {target}" in captured.stdout

    def test_case_sensitive_name(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """A differently-cased name is not a match."""
        target = _target(tmp_path, ".ds_store")
        policy = DeletionPolicy(CleanConfig(), captured.reporter())

        assert policy.consider(target.name, str(target)) == Outcome.NO_MATCH
        assert target.exists()


class TestConsiderInteractive:
    """Tests for interactive confirmation."""

    def test_confirmed_entry_deleted(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """An affirmative answer deletes the file."""
        target = _target(tmp_path)
        confirm = MagicMock(return_value=True)
        policy = DeletionPolicy(CleanConfig(interactive=True), captured.reporter(), confirm)

        assert policy.consider(target.name, str(target)) == Outcome.DELETED
        confirm.assert_called_once_with(str(target))
        assert not target.exists()

    def test_declined_entry_kept(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """A negative answer keeps the file without output."""
        target = _target(tmp_path)
        policy = DeletionPolicy(
            CleanConfig(interactive=True), captured.reporter(), MagicMock(return_value=False)
        )

        assert policy.consider(target.name, str(target)) == Outcome.DECLINED
        assert target.exists()
        assert captured.stdout == ""

    def test_no_prompt_without_interactive(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """The confirmer is not consulted in non-interactive mode."""
        target = _target(tmp_path)
        confirm = MagicMock(return_value=False)
        policy = DeletionPolicy(CleanConfig(), captured.reporter(), confirm)

        assert policy.consider(target.name, str(target)) == Outcome.DELETED
        confirm.assert_not_called()

    def test_no_prompt_for_non_matching(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """Non-matching entries never trigger a prompt."""
        other = _target(tmp_path, "readme.md")
        confirm = MagicMock(return_value=True)
        policy = DeletionPolicy(CleanConfig(interactive=True), captured.reporter(), confirm)

        policy.consider(other.name, str(other))

        confirm.assert_not_called()

    def test_interactive_dry_run(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """Confirmed entries in dry-run mode are only reported."""
        target = _target(tmp_path)
        policy = DeletionPolicy(
            CleanConfig(interactive=True, dry_run=True),
            captured.reporter(),
            MagicMock(return_value=True),
        )

        assert policy.consider(target.name, str(target)) == Outcome.WOULD_DELETE
        assert target.exists()


class TestConsiderDryRun:
    """Tests for dry-run mode."""

    def test_dry_run_reports_only(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """Dry-run leaves the file and prints a would-delete notice."""
        target = _target(tmp_path)
        policy = DeletionPolicy(CleanConfig(dry_run=True), captured.reporter())

        assert policy.consider(target.name, str(target)) == Outcome.WOULD_DELETE
        assert target.exists()
        assert f"(dry-run) Would delete: {target}" in captured.stdout

    def test_dry_run_quiet(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """Quiet dry-run prints nothing."""
        target = _target(tmp_path)
        config = CleanConfig(dry_run=True, quiet=True)
        policy = DeletionPolicy(config, captured.reporter(quiet=True))

        policy.consider(target.name, str(target))

        assert captured.stdout == ""


class TestConsiderFailures:
    """Tests for deletion failures."""

    @patch("rmds.cleaner.policy.os.unlink", side_effect=PermissionError(13, "Permission denied"))
    def test_failure_reported(
        self, _mock_unlink: MagicMock, tmp_path: Path, captured: CapturedOutput
    ) -> None:
        """A failed removal returns FAILED and writes to stderr."""
        target = _target(tmp_path)
        policy = DeletionPolicy(CleanConfig(), captured.reporter())

        assert policy.consider(target.name, str(target)) == Outcome.FAILED
        assert target.exists()
        assert f"Error deleting file {target}: Permission denied" in captured.stderr
        assert "Deleted:" not in captured.stdout

    @patch("rmds.cleaner.policy.os.unlink", side_effect=PermissionError(13, "Permission denied"))
    def test_failure_reported_when_quiet(
        self, _mock_unlink: MagicMock, tmp_path: Path, captured: CapturedOutput
    ) -> None:
        """Deletion failures are never silenced by quiet mode."""
        target = _target(tmp_path)
        policy = DeletionPolicy(CleanConfig(quiet=True), captured.reporter(quiet=True))

        policy.consider(target.name, str(target))

        assert "Error deleting file" in captured.stderr
        assert captured.stdout == ""

    def test_vanished_file(self, tmp_path: Path, captured: CapturedOutput) -> None:
        """A target removed between listing and deletion is a failure."""
        missing = tmp_path / ".DS_Store"
        policy = DeletionPolicy(CleanConfig(), captured.reporter())

        assert policy.consider(missing.name, str(missing)) == Outcome.FAILED
        assert "No such file or directory" in captured.stderr
