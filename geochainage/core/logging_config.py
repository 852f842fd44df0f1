# ==============================================================================
# geochainage - Road Chainage and Geodesy Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

One handler on the ``geochainage`` logger, shared by every module.

The library is quiet by default: only WARNING and above reach stderr.
Sentinel returns (unresolvable distances, skipped anchors, dropped
segments) are logged at DEBUG, so a batch job that wants to know why a
record produced no stations can turn them on with enable_debug().

Usage:
    from geochainage.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Dense sequence has %d points", len(dense))

Levels used by the package:
    DEBUG    - sentinel returns and pipeline summaries
    WARNING  - segments that run against the route direction
    ERROR    - input rejected by the strict entry points
"""

import logging
import sys
from typing import Optional

LOGGER_PREFIX = "geochainage"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

_initialized = False


def setup_logging(
    level: int = logging.WARNING,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """(Re)configure the package logger.

    Any handler installed by an earlier call is replaced.

    Args:
        level: Threshold for the logger and its handler
        detailed: Add timestamps and line numbers to each record
        stream: Where records are written (default: sys.stderr)

    Returns:
        The ``geochainage`` logger
    """
    global _initialized

    package_logger = logging.getLogger(LOGGER_PREFIX)
    if _initialized:
        package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))

    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    # Records stop at the package logger
    package_logger.propagate = False

    _initialized = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the ``geochainage`` namespace.

    Package modules pass ``__name__`` and keep their dotted name; any other
    name is prefixed, so ``get_logger("batch")`` gives ``geochainage.batch``.
    """
    if not _initialized:
        setup_logging()

    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Apply a new threshold to the package logger and its handlers."""
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Show sentinel and summary records."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Return to the quiet WARNING threshold."""
    set_log_level(logging.WARNING)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
