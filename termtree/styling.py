"""Text styling applied to rendered tree lines.

Styles are plain callables ``(text, role) -> str``.  They are applied when a
line is emitted, never to stored labels, so :func:`strip` on a styled render
gives back the plain one.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import click
import typer


class Role(Enum):
    STRUCTURE = "structure"
    LABEL = "label"


Style = Callable[[str, Role], str]

_COLORS = {
    Role.STRUCTURE: typer.colors.BRIGHT_BLUE,
    Role.LABEL: typer.colors.CYAN,
}


def plain(text: str, role: Role) -> str:
    return text


def terminal(text: str, role: Role) -> str:
    """Colour ``text`` with ANSI escapes according to its role."""
    if not text:
        return text
    return typer.style(text, fg=_COLORS[role])


def strip(text: str) -> str:
    """Remove any ANSI styling from ``text``."""
    return click.unstyle(text)


def pick_style(color: bool) -> Style:
    return terminal if color else plain
