"""Commands for building a graph from options and printing it."""

import sys
from typing import Any, List, Optional

import typer

from termtree.config import settings
from termtree.diagnostics import format_edges, format_sources
from termtree.errors import GraphError
from termtree.graph import Graph
from termtree.renderer import render
from termtree.styling import pick_style

from cli.rendering import build_graph

graph_app = typer.Typer(help="Build a graph from nodes and edges and print it.")

_NODE_HELP = "Node as NAME or NAME=LABEL (repeatable)."
_EDGE_HELP = "Edge as PARENT:CHILD (repeatable). Unknown names become nodes."
_ROOT_HELP = "Collapse all sources under a new root node with this name."


def _load_graph(nodes: List[str], edges: List[str], root: Optional[str]) -> Graph[Any]:
    """Build the graph or abort the command with exit code 1."""
    try:
        return build_graph(nodes, edges, root)
    except (ValueError, GraphError) as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)


@graph_app.command("show")
def graph_show(
    node: List[str] = typer.Option([], "--node", "-n", help=_NODE_HELP),
    edge: List[str] = typer.Option([], "--edge", "-e", help=_EDGE_HELP),
    root: Optional[str] = typer.Option(None, "--root", help=_ROOT_HELP),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Force coloured output on or off (default: TERMTREE_COLOR)."
    ),
) -> None:
    """Print the graph as a box-drawing tree."""
    graph = _load_graph(node, edge, root)
    if not len(graph):
        typer.echo("Graph is empty.")
        return

    if color is None:
        color = settings.use_color(sys.stdout.isatty())

    try:
        text = render(graph, style=pick_style(color), guard_cycles=settings.guard_cycles)
    except GraphError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)
    typer.echo(text, nl=False, color=color)


@graph_app.command("edges")
def graph_edges(
    node: List[str] = typer.Option([], "--node", "-n", help=_NODE_HELP),
    edge: List[str] = typer.Option([], "--edge", "-e", help=_EDGE_HELP),
    root: Optional[str] = typer.Option(None, "--root", help=_ROOT_HELP),
) -> None:
    """List every edge of the graph, grouped by parent."""
    typer.echo(format_edges(_load_graph(node, edge, root)))


@graph_app.command("sources")
def graph_sources(
    node: List[str] = typer.Option([], "--node", "-n", help=_NODE_HELP),
    edge: List[str] = typer.Option([], "--edge", "-e", help=_EDGE_HELP),
    root: Optional[str] = typer.Option(None, "--root", help=_ROOT_HELP),
) -> None:
    """List the nodes nothing points to."""
    typer.echo(format_sources(_load_graph(node, edge, root)))
