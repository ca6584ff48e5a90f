"""Utility modules for rmds.

This module exports the shared consoles and message helpers.
"""

from rmds.utils.formatting import console, err_console, print_error

__all__ = [
    "console",
    "err_console",
    "print_error",
]
