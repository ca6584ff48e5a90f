"""CLI package for rmds.

This package contains the Typer application and its console entry point.
"""

from rmds.cli.main import app, run

__all__ = ["app", "run"]
