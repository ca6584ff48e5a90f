"""Match-and-delete decision for a single filesystem entry."""

import logging
import os

from rmds.cleaner.config import CleanConfig
from rmds.cleaner.matcher import is_target
from rmds.cleaner.models import Outcome
from rmds.cleaner.prompt import Confirmer, ask_confirmation
from rmds.cleaner.reporter import Reporter

logger = logging.getLogger(__name__)


class DeletionPolicy:
    """Decides what happens to one non-directory entry.

    The policy keeps no state between calls: the outcome for an entry
    depends only on its name and the configuration.

    Args:
        config: Active configuration.
        reporter: Output hooks for results and errors.
        confirm: Called with the full path in interactive mode. Defaults
            to prompting on the terminal.
    """

    def __init__(
        self,
        config: CleanConfig,
        reporter: Reporter,
        confirm: Confirmer | None = None,
    ) -> None:
        self._config = config
        self._reporter = reporter
        self._confirm = confirm or ask_confirmation

    def consider(self, entry_name: str, full_path: str) -> Outcome:
        """Delete, report or ignore an entry.

        Args:
            entry_name: Base name of the entry.
            full_path: Path used for the prompt, the removal and the report.

        Returns:
            Outcome of the decision.
        """
        if not is_target(entry_name, self._config):
            return Outcome.NO_MATCH

        if self._config.interactive and not self._confirm(full_path):
            logger.debug("Deletion declined: %s", full_path)
            return Outcome.DECLINED

        if self._config.dry_run:
            self._reporter.would_delete(full_path)
            return Outcome.WOULD_DELETE

        try:
            os.unlink(full_path)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", full_path, e)
            self._reporter.deletion_failed(full_path, e)
            return Outcome.FAILED

        logger.debug("Deleted %s", full_path)
        self._reporter.deleted(full_path)
        return Outcome.DELETED
