from __future__ import annotations

import logging
import sys

from .constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
PACKAGE_LOGGER = __name__.rpartition(".core.")[0]
HANDLER_NAME = "student_management"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a single stdout handler to the package logger.

    Safe to call more than once: the level is updated, the handler is not
    duplicated.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(str(level).upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
