"""
Logging configuration for sphere-tools.

The package logger stays silent unless verbose output is requested,
either programmatically, with the CLI ``--verbose`` flag, or with
``verbose = true`` in the ``[defaults]`` config section.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

LOG_FORMAT = "[%(levelname)s] %(message)s"

# Package logger; module loggers (sphere_tools.config, ...) propagate to it
_logger = logging.getLogger("sphere_tools")
_logger.addHandler(logging.NullHandler())

# The stderr handler installed by enable_verbose, if any
_stderr_handler: logging.Handler | None = None


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def enable_verbose(level: str | int = "INFO", format: str | None = None) -> None:
    """Send package log records to stderr.

    Calling again replaces the stderr handler installed by an earlier call.
    Handlers attached to the ``sphere_tools`` logger by the application are
    left in place.

    Args:
        level: Level name ("DEBUG", "INFO", "WARNING", "ERROR") or number
        format: Optional custom format string
    """
    global _stderr_handler

    number = _level_number(level)
    disable_verbose()

    handler = logging.StreamHandler()
    handler.setLevel(number)
    handler.setFormatter(logging.Formatter(format or LOG_FORMAT))
    _logger.setLevel(number)
    _logger.addHandler(handler)
    _stderr_handler = handler


def disable_verbose() -> None:
    """Remove the stderr handler and restore the WARNING threshold."""
    global _stderr_handler

    if _stderr_handler is not None:
        _logger.removeHandler(_stderr_handler)
        _stderr_handler = None
    _logger.setLevel(logging.WARNING)


def configure_logging(config: Config, verbose_flag: bool = False) -> bool:
    """Apply the logging settings of a loaded configuration.

    The ``--verbose`` flag always logs at DEBUG. Without it,
    ``defaults.verbose`` enables logging at ``defaults.log_level``.

    Returns:
        True if verbose logging was enabled
    """
    if verbose_flag:
        enable_verbose("DEBUG")
    elif config.defaults.verbose:
        enable_verbose(config.defaults.log_level)
    else:
        return False
    return True
