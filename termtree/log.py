"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.WARNING, name: Optional[str] = "termtree") -> logging.Logger:
    """Attach a stderr handler to the ``termtree`` logger.

    Calling it again only updates the level; handlers are not duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(getattr(h, "_termtree", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        handler._termtree = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
