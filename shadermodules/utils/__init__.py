"""
Utility functions for shadermodules.

.. currentmodule:: shadermodules.utils

The package logs through ``logger``, a standard library logger named
"shadermodules". Its level defaults to WARN and can be set with the
``SHADERMODULES_LOG_LEVEL`` environment variable, either as a number or as a
level name (e.g. "debug").
"""

import os
import logging


logger = logging.getLogger("shadermodules")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("SHADERMODULES_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid shadermodules log level: {level}")


_set_log_level()


def unique(names):
    """Get the unique items of an iterable, preserving first-seen order."""
    return list(dict.fromkeys(names))
