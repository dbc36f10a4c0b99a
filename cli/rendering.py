"""Utilities for turning CLI options into a graph and rendering it."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from termtree.graph import Graph


def parse_node_spec(spec: str) -> Tuple[str, str]:
    """Split ``NAME[=LABEL]`` into ``(name, label)``.

    The label defaults to the name.
    """
    name, sep, label = spec.partition("=")
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid node {spec!r}: expected NAME or NAME=LABEL.")
    return name, (label if sep else name)


def parse_edge_spec(spec: str) -> Tuple[str, str]:
    """Split ``PARENT:CHILD`` into ``(parent, child)``."""
    parent, sep, child = spec.partition(":")
    parent, child = parent.strip(), child.strip()
    if not sep or not parent or not child:
        raise ValueError(f"Invalid edge {spec!r}: expected PARENT:CHILD.")
    return parent, child


def build_graph(
    nodes: List[str],
    edges: List[str],
    root: Optional[str] = None,
) -> Graph[Any]:
    """Build a graph from ``--node`` and ``--edge`` option values.

    Explicit nodes are added first, in order.  Names that only appear in
    edges are created on first mention with their name as label.  Sources
    are computed before returning, and a synthetic ``root`` is added over
    them when requested.
    """
    graph: Graph[Any] = Graph()
    for spec in nodes:
        name, label = parse_node_spec(spec)
        graph.add_node(name, label)

    for spec in edges:
        parent, child = parse_edge_spec(spec)
        for name in (parent, child):
            if name not in graph:
                graph.add_node(name)
        graph.add_edge_by_name(parent, child)

    graph.find_sources()
    if root:
        graph.add_root(root)
    return graph
