"""
Logging setup for ifcval.

Library code only creates named loggers under the ``ifcval`` namespace
(``ifcval.pipeline``, ``ifcval.policy``, ``ifcval.cli``) and never installs
handlers itself. Applications that have not configured logging can call
``configure_logger()`` once at startup.

Usage:

    from ifcval_core.codebase.logs import configure_logger

    configure_logger("DEBUG")
"""

import logging

__all__ = [
    "LOGGER_NAME",
    "LOG_FORMAT",
    "configure_logger",
    "resolve_level",
]

LOGGER_NAME = "ifcval"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_logger = logging.getLogger(LOGGER_NAME)


def resolve_level(level: int | str) -> int:
    """Accept a logging level as an int or a name such as "info"."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logger(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Ensure the ifcval logger has a handler in case the app didn't configure logging.
    Safe to call multiple times; later calls only change the level.
    """
    if not _logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(resolve_level(level))
    return _logger
