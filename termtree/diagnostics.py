"""Readable dumps of a graph's edges and sources, for debugging."""

from __future__ import annotations

from itertools import groupby
from operator import itemgetter
from typing import Any, List

from termtree.graph import Graph


def format_edges(graph: Graph[Any]) -> str:
    """List each node that has children, followed by one ``->`` line per edge."""
    lines: List[str] = ["Edges of graph"]
    for from_id, pairs in groupby(graph.edges(), key=itemgetter(0)):
        lines.append(f"{graph.label_of(from_id)}:")
        for _, to_id in pairs:
            lines.append(f"-> {graph.label_of(to_id)}")
    return "\n".join(lines)


def format_sources(graph: Graph[Any]) -> str:
    """List the cached sources by name; only the header if none were computed."""
    lines: List[str] = ["Sources of graph:"]
    for source_id in graph.sources or []:
        lines.append(graph.name_of(source_id))
    return "\n".join(lines)
