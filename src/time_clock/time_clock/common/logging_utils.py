from __future__ import annotations

import logging
from typing import Union

PACKAGE_LOGGER = __name__.rsplit(".", 2)[0]
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, *, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Configure and return the package logger.

    Safe to call more than once: the console handler is only attached the first time.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
