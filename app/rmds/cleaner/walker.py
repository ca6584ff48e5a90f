"""Directory tree traversal for cleanup runs.

Walks a tree depth-first using an explicit work-list instead of
recursion, so arbitrarily deep trees cannot exhaust the interpreter
stack. Directories are filtered by depth, device and name before they
are entered; every other entry is handed to the DeletionPolicy.
"""

import logging
import os
import stat

from rmds.cleaner.config import CleanConfig
from rmds.cleaner.models import SkipReason, WalkSummary
from rmds.cleaner.policy import DeletionPolicy
from rmds.cleaner.prompt import Confirmer
from rmds.cleaner.reporter import Reporter

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a directory tree and applies the deletion policy.

    Per-directory and per-entry errors are reported and skipped; a walk
    never raises because of a single unreadable entry.

    Args:
        config: Active configuration. With ``one_file_system`` its
            ``root_device`` must already be resolved (see
            CleanConfig.for_root).
        reporter: Output hooks. Defaults to a Reporter built from config.
        confirm: Confirmation callback for interactive mode.

    Raises:
        ValueError: If one_file_system is set without a root_device.
    """

    def __init__(
        self,
        config: CleanConfig,
        reporter: Reporter | None = None,
        confirm: Confirmer | None = None,
    ) -> None:
        if config.one_file_system and config.root_device is None:
            msg = "root_device must be resolved before walking with one_file_system"
            raise ValueError(msg)
        self._config = config
        self._reporter = reporter or Reporter.from_config(config)
        self._policy = DeletionPolicy(config, self._reporter, confirm)

    def walk(self, path: str, depth: int = 0) -> WalkSummary:
        """Walk the tree rooted at path.

        Directories are visited in pre-order: a directory is enumerated
        before any of its subdirectories, and a subtree is finished
        before its next sibling is entered.

        Args:
            path: Directory to start from.
            depth: Depth assigned to path. The starting path is depth 0.

        Returns:
            WalkSummary with the counters for this walk.
        """
        summary = WalkSummary()
        pending: list[tuple[str, int]] = [(path, depth)]

        while pending:
            current, level = pending.pop()
            children = self._scan_directory(current, level, summary)
            # Reversed so the first enumerated subdirectory is popped first
            pending.extend(reversed(children))

        return summary

    def _scan_directory(
        self,
        path: str,
        depth: int,
        summary: WalkSummary,
    ) -> list[tuple[str, int]]:
        """Enumerate one directory and return the subdirectories to enter.

        Args:
            path: Directory to enumerate.
            depth: Depth of the directory.
            summary: Counters to update.

        Returns:
            ``(path, depth)`` pairs for subdirectories to descend into.
        """
        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug("Depth limit %d reached at %s", max_depth, path)
            return []

        try:
            entries = os.scandir(path)
        except PermissionError:
            logger.debug("Permission denied opening %s", path)
            summary.skipped += 1
            self._reporter.skipped(path, SkipReason.PERMISSION_DENIED)
            return []
        except OSError as e:
            logger.warning("Cannot open directory %s: %s", path, e)
            summary.errors += 1
            self._reporter.error(f"Cannot open directory {path}: {e.strerror or e}")
            return []

        children: list[tuple[str, int]] = []
        with entries:
            summary.directories += 1
            self._reporter.scanning(path)
            try:
                for entry in entries:
                    child = self._visit(entry, depth, summary)
                    if child is not None:
                        children.append(child)
            except OSError as e:
                logger.warning("Error reading directory %s: %s", path, e)
                summary.errors += 1
                self._reporter.error(f"Error reading directory {path}: {e.strerror or e}")

        return children

    def _visit(
        self,
        entry: os.DirEntry[str],
        depth: int,
        summary: WalkSummary,
    ) -> tuple[str, int] | None:
        """Handle a single directory entry.

        Args:
            entry: Entry produced by os.scandir.
            depth: Depth of the directory containing the entry.
            summary: Counters to update.

        Returns:
            ``(path, depth + 1)`` if the entry is a directory to descend
            into, None otherwise.
        """
        try:
            # Symlinks are never followed: a link to a directory is a plain entry
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.warning("Cannot stat %s: %s", entry.path, e)
            summary.errors += 1
            self._reporter.error(f"Cannot stat {entry.path}: {e.strerror or e}")
            return None

        if stat.S_ISDIR(st.st_mode):
            return self._check_subdirectory(entry, st.st_dev, depth, summary)

        outcome = self._policy.consider(entry.name, entry.path)
        summary.record(outcome, entry.path)
        return None

    def _check_subdirectory(
        self,
        entry: os.DirEntry[str],
        device: int,
        depth: int,
        summary: WalkSummary,
    ) -> tuple[str, int] | None:
        """Apply the exclusion and filesystem-boundary rules to a subdirectory."""
        if entry.name in self._config.excluded_names:
            summary.skipped += 1
            self._reporter.skipped(entry.path, SkipReason.EXCLUDED)
            return None

        if self._config.one_file_system and device != self._config.root_device:
            summary.skipped += 1
            self._reporter.skipped(entry.path, SkipReason.OTHER_FILESYSTEM)
            return None

        return (entry.path, depth + 1)
