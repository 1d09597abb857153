"""
Logging for the cooler_core package.

The console shows warnings by default and more with each -v. Every run
also keeps a full debug log next to its outputs, so a cut file can be
traced back to the parameters and decisions that produced it.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "cooler_core"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
RUN_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def level_for(verbosity: int) -> int:
    """0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """
    Point the package logger at stderr.

    The logger itself passes everything through; the console handler does
    the filtering so a run log can still record debug messages.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level_for(verbosity))
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    return logger


def add_run_log(path: str, level: int = logging.DEBUG) -> logging.FileHandler:
    """Attach a file handler for one run; pass it to close_run_log when done."""
    handler = logging.FileHandler(path, mode='w', encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(RUN_LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logging.getLogger(LOGGER_NAME).addHandler(handler)
    return handler


def close_run_log(handler: Optional[logging.FileHandler]) -> None:
    if handler is None:
        return
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()
