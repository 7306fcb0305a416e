#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/logging_utils.py
"""Logging setup for hosts embedding scribex.

Every scribex module logs through a child of the ``scribex`` package logger
and the library installs no handlers on import. A host that wants to see
those records calls :func:`configure_logging`, which attaches handlers to the
package logger only; the root logger and the host's own handlers are left
alone. Handlers installed here are named so that a later call, or
:func:`reset_logging`, replaces exactly those.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "scribex"

_HANDLER_PREFIX = "scribex."
_CONSOLE_HANDLER_NAME = f"{_HANDLER_PREFIX}console"
_FILE_HANDLER_NAME = f"{_HANDLER_PREFIX}file"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    # getLevelName maps unknown names to "Level <name>"
    return level if isinstance(level, int) else logging.INFO


def _remove_installed_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            package_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Send scribex log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"); unknown names
        fall back to INFO
    log_file : str, optional
        Path of a file that receives the same records
    trace_mode : bool, default False
        Include timestamps and the emitting module in each line
    propagate : bool, default False
        Also pass records on to the host's root handlers

    Returns
    -------
    logging.Logger
        The ``scribex`` package logger

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_installed_handlers(package_logger)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate

    if trace_mode:
        formatter = logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter("scribex %(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning(f"Could not open log file {log_file}: {exc}")
        else:
            file_handler.set_name(_FILE_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug(f"Logging to file: {log_file}")

    return package_logger


def reset_logging() -> None:
    """Undo :func:`configure_logging`, leaving handlers added by others in place."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_installed_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging", "reset_logging"]
