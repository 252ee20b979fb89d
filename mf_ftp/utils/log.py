"""
Logging setup for the command line tool.

Library modules only create loggers with logging.getLogger(__name__);
handlers are attached here, once, by the CLI.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a single stderr handler to the mf_ftp logger.

    Calling it again replaces the handler instead of adding another.

    Args:
        level: Logging level number or name

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("mf_ftp")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    return logger
