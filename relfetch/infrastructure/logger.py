"""
Package-wide logger for relfetch, rendered through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "relfetch"


def _build_logger() -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    return log


logger = _build_logger()


__all__ = [
    "logger",
]
