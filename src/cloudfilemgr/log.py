"""Logging helpers for applications embedding cloudfilemgr."""

from __future__ import annotations

import logging
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "cloudfilemgr"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    Attach a handler to the package logger and set its level.

    Library code never calls this; the package logger only carries a
    NullHandler until an application opts in.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    use_handler = handler if handler is not None else logging.StreamHandler()
    use_handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(use_handler)
    return logger
