"""Console logging for browsekit runs.

``configure()`` calls ``setup_logging`` with ``Settings.log_level`` so that
session creation, scope changes and reset failures show up on stderr while
tests run. HTTP client chatter stays at WARNING.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger to a Rich handler on stderr at *level*.

    Unknown level names fall back to INFO. Any handlers already on the root
    logger are replaced.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
