"""Logging setup for satelit.

Modules log through ``logging.getLogger(__name__)``; this only routes the
``satelit`` logger to stderr at the configured level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from satelit.config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler to the ``satelit`` logger.

    Args:
        level: Overrides ``log_level`` from the settings when given.
    """
    global _handler

    level = (level or get_settings().log_level or "INFO").upper()

    logger = logging.getLogger("satelit")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
