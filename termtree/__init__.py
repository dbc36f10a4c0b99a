"""termtree — render small in-memory graphs as box-drawing trees.

Public API::

    from termtree import Graph, render
    g = Graph()
    g.add_node("root")
    g.add_node("a")
    g.add_edge_by_name("root", "a")
    print(render(g.find_sources()), end="")
"""

from termtree.errors import (
    CycleDetectedError,
    DuplicateNameError,
    GraphError,
    SourcesNotComputedError,
    UnresolvedNameError,
)
from termtree.graph import Graph, GraphBuilder, Node, new_graph
from termtree.renderer import render, render_lines
from termtree.styling import Role

__all__ = [
    "Graph",
    "GraphBuilder",
    "Node",
    "new_graph",
    "render",
    "render_lines",
    "Role",
    "GraphError",
    "UnresolvedNameError",
    "DuplicateNameError",
    "CycleDetectedError",
    "SourcesNotComputedError",
]
