# core/logger.py

"""
Logging setup for Tutorly.

Log records go to stderr so they never interleave with the menus printed on stdout. The level comes from
`TUTORLY_LOG_LEVEL` (see `core.config`), and the root handler is installed the first time any module asks
for a logger.
"""

import logging
import sys

import core.config as config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler_installed = False


def _install_handler() -> None:
    global _handler_installed

    if _handler_installed:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))
    root_logger.addHandler(handler)

    _handler_installed = True


def get_logger(module_name: str) -> logging.Logger:
    """
    Returns the logger for a Tutorly module, installing the stderr handler on first use.

    Args:
        module_name (str): The dotted name of the calling module, normally `__name__`.

    Returns:
        logging.Logger: The named logger, propagating to the configured root logger.
    """
    _install_handler()

    return logging.getLogger(module_name)
