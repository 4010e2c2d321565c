"""Logger setup: console at INFO, optional rotating debug.log."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from arkstatus import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("arkstatus")


def configure_logging(debug_log: bool = config.DEBUG_LOG_ENABLED, filename: str = "debug.log"):
    """Console always ON (INFO+); optional rotating file for DEBUG. Safe to call twice."""
    logger.setLevel(logging.DEBUG)  # master gate
    if getattr(logger, "_arkstatus_configured", False):
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if debug_log:
        file_handler = RotatingFileHandler(filename, maxBytes=5 * 1024 * 1024, backupCount=3)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    logger._arkstatus_configured = True
    return logger
