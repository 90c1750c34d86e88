"""Logger construction for the CLI.

Components never read a global debug switch; they receive the logger built
here (or fall back to their module logger when used as a library).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_logger(debug: bool = False, stream: TextIO | None = None, name: str = "monometa") -> logging.Logger:
    """Return a logger writing to ``stream`` (stderr by default).

    Args:
        debug: Emit DEBUG records and a more detailed format.
        stream: Destination stream.
        name: Logger name.

    Returns:
        A logger that does not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
