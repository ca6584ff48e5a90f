"""Interactive deletion confirmation."""

import logging
from collections.abc import Callable
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from rmds.utils.formatting import console as default_console

logger = logging.getLogger(__name__)

# Takes the full path of a matching file, returns True to delete it
Confirmer = Callable[[str], bool]


def ask_confirmation(
    path: str,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Ask whether a file should be deleted.

    Reads one whole line so that leftover characters never leak into
    the next prompt. Only an answer starting with ``y`` or ``Y`` is
    affirmative; an empty line or end of input means no.

    Args:
        path: Full path of the file.
        console: Console to prompt on. Defaults to the shared stdout console.
        stream: Stream to read the answer from. Defaults to stdin.

    Returns:
        True if the user confirmed the deletion.
    """
    prompt_console = console or default_console
    try:
        answer = prompt_console.input(
            f"Delete {escape(path)}? {escape('[y/N]')} ",
            stream=stream,
        )
    except EOFError:
        logger.debug("End of input while confirming %s", path)
        return False
    return answer[:1] in ("y", "Y")
