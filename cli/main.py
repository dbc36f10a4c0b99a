"""termtree CLI — entry-point for building and printing graphs.

Usage:
    python cli/main.py --help
    python cli/main.py graph show -e root:a -e root:b
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from termtree.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from termtree.config import settings
from termtree.log import setup_logging

from cli.commands.graph import graph_app

app = typer.Typer(
    name="termtree",
    help="Render graphs as box-drawing trees.",
    no_args_is_help=True,
)
app.add_typer(graph_app, name="graph")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Configure logging before any command runs."""
    if verbose:
        setup_logging(logging.DEBUG)
        return
    try:
        level = settings.resolved_log_level()
    except ValueError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)
    setup_logging(level)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
