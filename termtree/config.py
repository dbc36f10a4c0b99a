"""Centralised settings for termtree.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

COLOR_MODES = ("auto", "always", "never")


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    color: str = field(
        default_factory=lambda: os.environ.get("TERMTREE_COLOR", "auto").lower()
    )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    guard_cycles: bool = field(
        default_factory=lambda: _env_flag("TERMTREE_GUARD_CYCLES", "true")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("TERMTREE_LOG_LEVEL", "WARNING").upper()
    )

    def use_color(self, stream_isatty: bool) -> bool:
        """Resolve the ``color`` mode against the output stream.

        ``auto`` colours only when writing to a terminal; values outside
        :data:`COLOR_MODES` behave like ``never``.
        """
        if self.color not in COLOR_MODES:
            return False
        if self.color == "always":
            return True
        if self.color == "auto":
            return stream_isatty
        return False

    def resolved_log_level(self) -> int:
        """Return ``log_level`` as a :mod:`logging` level number.

        Raises ``ValueError`` for names :mod:`logging` does not know.
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {self.log_level!r} (TERMTREE_LOG_LEVEL).")
        return level


# Module-level singleton — import this everywhere:
#   from termtree.config import settings
settings = Settings()
