"""Output hooks for cleanup walks.

The Reporter owns the quiet/verbose policy: every line the walker and
the deletion policy emit goes through it. Informational lines go to the
stdout console, errors to the stderr console. Deletion failures are the
one kind of output that quiet mode does not suppress.
"""

from rich.console import Console
from rich.markup import escape

from rmds.cleaner.config import CleanConfig
from rmds.cleaner.models import SkipReason, WalkSummary
from rmds.utils.formatting import console as default_console
from rmds.utils.formatting import err_console as default_err_console


class Reporter:
    """Emits progress, result and error lines for a walk.

    Args:
        quiet: Suppress everything except deletion failures.
        verbose: Also report directories entered and subtrees skipped.
        out: Console for informational lines. Defaults to the shared
            stdout console.
        err: Console for errors. Defaults to the shared stderr console.
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        verbose: bool = False,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self._quiet = quiet
        self._verbose = verbose and not quiet
        self._out = out or default_console
        self._err = err or default_err_console

    @classmethod
    def from_config(
        cls,
        config: CleanConfig,
        *,
        out: Console | None = None,
        err: Console | None = None,
    ) -> "Reporter":
        """Create a Reporter using the quiet/verbose flags of a config."""
        return cls(quiet=config.quiet, verbose=config.verbose, out=out, err=err)

    @property
    def verbose(self) -> bool:
        """Whether per-directory notices are emitted."""
        return self._verbose

    def header(self, root: str, target: str) -> None:
        """Announce the start of a walk over one starting path."""
        if not self._quiet:
            self._info(f"Scanning for {escape(target)} in: [path]{escape(root)}[/]")

    def scanning(self, path: str) -> None:
        """Announce that a directory is being enumerated."""
        if self._verbose:
            self._info(f"[muted]Scanning:[/] {escape(path)}")

    def skipped(self, path: str, reason: SkipReason) -> None:
        """Announce that a directory was not descended into."""
        if self._verbose:
            self._info(f"[skipped]Skipping ({reason.label}):[/] {escape(path)}")

    def would_delete(self, path: str) -> None:
        """Announce a deletion that dry-run mode did not perform."""
        if not self._quiet:
            self._info(f"[dry_run](dry-run) Would delete:[/] {escape(path)}")

    def deleted(self, path: str) -> None:
        """Announce a completed deletion."""
        if not self._quiet:
            self._info(f"[deleted]Deleted:[/] {escape(path)}")

    def error(self, message: str) -> None:
        """Report a recoverable error. Suppressed in quiet mode."""
        if not self._quiet:
            self._error(escape(message))

    def deletion_failed(self, path: str, exc: OSError) -> None:
        """Report a failed deletion. Never suppressed."""
        reason = exc.strerror or str(exc)
        self._error(f"Error deleting file {escape(path)}: {escape(reason)}")

    def summary(self, summary: WalkSummary, *, dry_run: bool) -> None:
        """Print the totals of a finished run."""
        if self._quiet:
            return
        if dry_run:
            count = len(summary.would_delete)
            self._info(f"[info]Dry-run: {count} file(s) would be deleted.[/]")
        else:
            count = len(summary.deleted)
            self._info(f"[success]Deleted {count} file(s).[/]")
        if summary.declined:
            self._info(f"[muted]{summary.declined} file(s) kept at your request.[/]")
        if summary.failed:
            self._err.print(
                f"[warning]Warning:[/] {summary.failed} file(s) could not be deleted.",
                soft_wrap=True,
                highlight=False,
            )

    def _info(self, message: str) -> None:
        self._out.print(message, soft_wrap=True, highlight=False)

    def _error(self, message: str) -> None:
        self._err.print(f"[error]Error:[/] {message}", soft_wrap=True, highlight=False)
