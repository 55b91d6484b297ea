"""Logging utilities.

This module provides a unified logging interface for the package: every
module obtains its logger through :func:`get_logger` so that output format
and level are controlled from one place.
"""

import logging

_LOGGERS: dict = {}


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger for the given module.

    Parameters
    ----------
    name : str
        Module name (typically __name__).

    Returns
    -------
    logging.Logger
        Logger namespaced under ``bchgen``.

    Examples
    --------
    >>> logger = get_logger(__name__)
    >>> logger.info("Building field tables")
    INFO:bchgen.field.arithmetic:Building field tables
    """
    if name != "bchgen" and not name.startswith("bchgen."):
        name = f"bchgen.{name}"

    if name not in _LOGGERS:
        logger = logging.getLogger(name)
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
        _LOGGERS[name] = logger
    return _LOGGERS[name]


def set_log_level(level: str) -> None:
    """Set the logging level for all package loggers.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.getLogger("bchgen").setLevel(numeric_level)
    for logger in _LOGGERS.values():
        logger.setLevel(numeric_level)
