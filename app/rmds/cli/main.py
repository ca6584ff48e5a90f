"""Main CLI application entry point.

Defines the Typer application that turns command-line flags and the
user settings file into a CleanConfig and runs one walk per starting
path.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from rmds import __version__
from rmds.cleaner.config import CleanConfig
from rmds.cleaner.models import WalkSummary
from rmds.cleaner.reporter import Reporter
from rmds.cleaner.walker import TreeWalker
from rmds.core.paths import get_default_start_path
from rmds.core.settings import CleanSettings, SettingsError, load_settings
from rmds.utils.formatting import print_error

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
# Exit status Click uses for usage errors
USAGE_ERROR_EXIT = 2

app = typer.Typer(
    name="rmds",
    help="Recursively remove .DS_Store files.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmds version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Directories to scan. Defaults to $HOME.",
            show_default=False,
        ),
    ] = None,
    clean_all: Annotated[
        bool,
        typer.Option("--clean-all", "-a", help="Also delete AppleDouble (._*) files."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only report deletion failures."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Report every directory scanned or skipped."),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Ask before deleting each file."),
    ] = False,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            "-d",
            min=0,
            metavar="N",
            help="Do not descend more than N levels below each path.",
        ),
    ] = None,
    one_file_system: Annotated[
        bool,
        typer.Option("--one-file-system", "-x", help="Stay on the filesystem of each path."),
    ] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            metavar="DIR",
            help="Skip directories with this name (repeatable).",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", metavar="NAME", help="File name to delete instead of .DS_Store."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            dir_okay=False,
            help="Settings file to use instead of ~/.config/rmds/config.toml.",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Recursively remove .DS_Store files.

    Scans each PATH (or $HOME when none is given) and deletes every file
    named .DS_Store. Deleted files cannot be recovered.

    Examples:
        rmds                      # Clean the home directory
        rmds --dry-run ~/Music    # Preview without deleting
        rmds -a -e .git /Volumes/USB
    """
    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=EXIT_FAILURE) from e

    try:
        config = _build_config(
            settings.clean,
            clean_all=clean_all,
            dry_run=dry_run,
            quiet=quiet,
            verbose=verbose,
            interactive=interactive,
            max_depth=max_depth,
            one_file_system=one_file_system,
            exclude=exclude or [],
            name=name,
        )
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=EXIT_FAILURE) from e

    start_paths = list(paths or [])
    if not start_paths:
        home = get_default_start_path()
        if home is None:
            print_error("Could not determine starting path.")
            raise typer.Exit(code=EXIT_FAILURE)
        start_paths = [home]

    reporter = Reporter.from_config(config)
    total = WalkSummary()
    unresolved = 0

    for start in start_paths:
        try:
            root_config = config.for_root(start)
        except OSError as e:
            logger.warning("Cannot access starting path %s: %s", start, e)
            print_error(f"Cannot access {escape(start)}: {escape(e.strerror or str(e))}")
            unresolved += 1
            continue

        reporter.header(start, config.describe_target())
        total.merge(TreeWalker(root_config, reporter).walk(start))

    if unresolved < len(start_paths):
        reporter.summary(total, dry_run=config.dry_run)

    if unresolved:
        raise typer.Exit(code=EXIT_FAILURE)


def _build_config(
    settings: CleanSettings,
    *,
    clean_all: bool,
    dry_run: bool,
    quiet: bool,
    verbose: bool,
    interactive: bool,
    max_depth: int | None,
    one_file_system: bool,
    exclude: list[str],
    name: str | None,
) -> CleanConfig:
    """Merge command-line flags over the settings file.

    Switches are enabled by either source, exclusions are combined, and
    --name / --max-depth replace the settings values when given.

    Raises:
        ValueError: If the merged values are invalid.
    """
    return CleanConfig(
        dry_run=dry_run,
        quiet=quiet,
        verbose=verbose,
        interactive=interactive,
        max_depth=max_depth if max_depth is not None else settings.max_depth,
        one_file_system=one_file_system or settings.one_file_system,
        excluded_names=frozenset([*settings.exclude, *exclude]),
        target_name=name if name is not None else settings.name,
        clean_all=clean_all or settings.clean_all,
    )


def run() -> None:
    """Console script entry point.

    Usage errors exit with status 1 instead of Click's default 2.
    """
    try:
        app()
    except SystemExit as e:
        if e.code == USAGE_ERROR_EXIT:
            sys.exit(EXIT_FAILURE)
        raise


if __name__ == "__main__":
    run()
