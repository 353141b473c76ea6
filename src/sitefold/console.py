"""Console logging for the command-line build.

The library modules only create loggers; handlers are installed here,
by the CLI, on the ``sitefold`` logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from sitefold.environment import terminal

_HANDLER_NAME = "sitefold-console"


class ColorFormatter(logging.Formatter):
    """Prefix warnings and errors with a colored level tag.

    INFO and DEBUG records print bare, like the build's progress output.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"{terminal.error_code('Error:')} {message}"
        if record.levelno >= logging.WARNING:
            return f"{terminal.warning('Warning:')} {message}"
        if record.levelno <= logging.DEBUG:
            return terminal.dim_text(message)
        return message


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single console handler to the ``sitefold`` logger.

    Calling it again replaces the previous handler instead of stacking
    another one.

    Args:
        level: Minimum level to print
        stream: Output stream, ``sys.stderr`` by default

    Returns:
        The configured ``sitefold`` logger.
    """
    logger = logging.getLogger("sitefold")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter("%(message)s"))
    logger.addHandler(handler)
    return logger
