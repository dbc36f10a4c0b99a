"""Box-drawing tree rendering for :class:`~termtree.graph.Graph`."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Set

from termtree.errors import CycleDetectedError
from termtree.graph import Graph
from termtree.styling import Role, Style, plain

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "


def render_lines(
    graph: Graph[Any],
    style: Optional[Style] = None,
    guard_cycles: bool = True,
) -> List[str]:
    """Render ``graph`` as one string per node line.

    Starts from the cached ``graph.sources`` or, when they were never
    computed, from the graph's current sources.  The graph is not modified.

    A node reachable from two parents is rendered under both.  With
    ``guard_cycles`` a node showing up on its own ancestor path raises
    :class:`CycleDetectedError`; without it a cycle recurses until Python
    gives up with ``RecursionError``.
    """
    style = style or plain
    sources = graph.sources if graph.sources is not None else graph.current_sources()
    lines: List[str] = []
    on_path: Optional[Set[int]] = set() if guard_cycles else None
    path: List[int] = []

    def _visit(node_id: int, prefix: str, child_prefix: str) -> None:
        if on_path is not None:
            if node_id in on_path:
                cycle = path[path.index(node_id):] + [node_id]
                raise CycleDetectedError([graph.name_of(i) for i in cycle])
            on_path.add(node_id)
            path.append(node_id)

        lines.append(style(prefix, Role.STRUCTURE) + style(graph.label_of(node_id), Role.LABEL))

        children = graph.children(node_id)
        if children:
            *rest, last = children
            for child_id in rest:
                _visit(child_id, child_prefix + BRANCH, child_prefix + PIPE)
            _visit(last, child_prefix + LAST_BRANCH, child_prefix + BLANK)

        if on_path is not None:
            on_path.discard(node_id)
            path.pop()

    for source_id in sources:
        _visit(source_id, "", "")

    logger.debug("rendered %d lines from %d sources", len(lines), len(sources))
    return lines


def render(
    graph: Graph[Any],
    style: Optional[Style] = None,
    guard_cycles: bool = True,
) -> str:
    """Render ``graph`` as a single text block, every line newline-terminated."""
    return "".join(line + "\n" for line in render_lines(graph, style, guard_cycles))
