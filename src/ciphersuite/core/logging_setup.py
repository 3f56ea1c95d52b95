from __future__ import annotations

import logging

from .config import Settings

ROOT_LOGGER = "ciphersuite"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a single stderr handler to the package logger, replacing any earlier one."""
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    logger.setLevel(settings.numeric_level)
    logger.propagate = False
    logger.debug("Logging initialised at %s", settings.log_level)
    return logger
