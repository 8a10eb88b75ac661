"""
Logging helpers.

The package emits DEBUG records only, through module loggers below the "datasize" logger, which carries a
NullHandler. Applications opt in to output with setup_logging() or their own logging configuration.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys
from typing import TextIO

# Constants ------------------------------------------------------------------------------------------------------------

PACKAGE_LOGGER = "datasize"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "datasize.stream"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


# Methods --------------------------------------------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """
    Attach a stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call instead of adding another one.

    Args:
        level: Logging level as int or level name such as "DEBUG".
        stream: Output stream, stderr by default.

    Returns:
        logging.Handler: The installed handler.

    Raises:
        ValueError: level is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown logging level: {level!r}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
