"""
Logging Configuration
Sets up the package logger for the viewer.

The screen belongs to the viewer while it runs, so records are never
written to stdout or stderr: they go to a file, or nowhere.
"""
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configures the logger for the 'termview' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to. Without it, records
            are discarded.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("termview")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(file_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger
