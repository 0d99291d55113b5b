from __future__ import annotations

import logging
import sys

from .constants import LOG_FORMAT, LOG_LEVEL, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

logger.setLevel(LOG_LEVEL)


def set_log_level(level: int) -> None:
    logger.setLevel(level)
    for existing in logger.handlers:
        existing.setLevel(level)
