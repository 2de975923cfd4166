# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

_console = Console(stderr=True)


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Route all log records through a single rich handler on stderr."""
    log_level = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False, console=_console)],
        force=True,
    )
