"""In-memory graph store backing the tree renderer.

A :class:`Graph` is built once per render: insert nodes, connect them by
name, compute the sources (nodes nobody points to) and hand the graph to
:func:`termtree.renderer.render`.  Nothing is ever deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Protocol, Tuple, TypeVar

from termtree.errors import DuplicateNameError, SourcesNotComputedError, UnresolvedNameError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A single graph node.

    ``content`` is an opaque payload: neither the store nor the renderer
    ever look at it.
    """

    id: int
    name: str
    label: str
    content: Optional[T] = None

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Graph(Generic[T]):
    nodes: List[Node[T]] = field(default_factory=list)
    adjacency: Dict[int, List[int]] = field(default_factory=dict)
    name_index: Dict[str, int] = field(default_factory=dict)
    sources: Optional[List[int]] = None
    _in_degree: List[int] = field(default_factory=list, init=False, repr=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def add_node(self, name: str, label: Optional[str] = None, content: Optional[T] = None) -> int:
        """Append a node and return its id.

        Ids are dense and follow insertion order.  ``label`` defaults to
        ``name``.  Raises :class:`DuplicateNameError` if ``name`` is taken.
        """
        if name in self.name_index:
            raise DuplicateNameError(name, self.name_index[name])

        new_id = len(self.nodes)
        self.nodes.append(Node(id=new_id, name=name, label=name if label is None else label, content=content))
        self.name_index[name] = new_id
        self.adjacency[new_id] = []
        self._in_degree.append(0)
        logger.debug("added node %d %r", new_id, name)
        return new_id

    def add_edge_by_name(self, from_name: str, to_name: str) -> None:
        """Connect ``from_name`` to ``to_name``.

        Parallel edges are kept.  Raises :class:`UnresolvedNameError`
        naming the side that failed to resolve.
        """
        if from_name not in self.name_index:
            raise UnresolvedNameError(from_name, "source")
        if to_name not in self.name_index:
            raise UnresolvedNameError(to_name, "target")

        from_id = self.name_index[from_name]
        to_id = self.name_index[to_name]
        self._link(from_id, to_id)
        logger.debug("added edge %r -> %r", from_name, to_name)

    def _link(self, from_id: int, to_id: int) -> None:
        self.adjacency[from_id].append(to_id)
        self._in_degree[to_id] += 1

    def add_root(self, root_name: str, content: Optional[T] = None) -> int:
        """Collapse the current sources under a new node named ``root_name``.

        The new node points to every current source, in order, and becomes
        the only source.
        """
        if self.sources is None:
            raise SourcesNotComputedError()

        previous = list(self.sources)
        root_id = self.add_node(root_name, root_name, content)
        for source_id in previous:
            self._link(root_id, source_id)
        self.sources = [root_id]
        logger.debug("added root %r over %d sources", root_name, len(previous))
        return root_id

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------
    def current_sources(self) -> List[int]:
        """Ids with no incoming edge, in id order.  Never cached."""
        return [node_id for node_id, count in enumerate(self._in_degree) if count == 0]

    def find_sources(self) -> Graph[T]:
        """Recompute and cache :attr:`sources`; returns ``self`` for chaining."""
        self.sources = self.current_sources()
        logger.debug("found %d sources among %d nodes", len(self.sources), len(self.nodes))
        return self

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def resolve(self, name: str) -> int:
        try:
            return self.name_index[name]
        except KeyError:
            raise UnresolvedNameError(name, "lookup") from None

    def name_of(self, node_id: int) -> str:
        return self.nodes[node_id].name

    def label_of(self, node_id: int) -> str:
        return self.nodes[node_id].label

    def children(self, node_id: int) -> List[int]:
        return self.adjacency.get(node_id, [])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(from_id, to_id)`` pairs, grouped by source node."""
        for from_id, targets in self.adjacency.items():
            for to_id in targets:
                yield from_id, to_id

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        return name in self.name_index


class GraphBuilder(Protocol):
    """Anything that knows how to turn itself into a :class:`Graph`."""

    def build_graph(self) -> Graph[Any]:
        ...


def new_graph() -> Graph[Any]:
    return Graph()
