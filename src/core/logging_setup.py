"""Logging configuration shared by every entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "bytepipe-rich"


def configure_logging(level: str | int, *, console: Console | None = None) -> logging.Logger:
    """Install a single Rich handler on the root logger.

    Calling it again only updates the level, so repeated CLI invocations in
    one process (tests) do not stack handlers.
    """

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            if console is not None and isinstance(handler, RichHandler):
                handler.console = console
            return root

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    return root
