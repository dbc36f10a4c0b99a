"""Exceptions raised by the graph store and the tree renderer."""

from __future__ import annotations

from typing import Sequence


class GraphError(Exception):
    """Base class for every termtree error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnresolvedNameError(GraphError):
    """A name used to build or query an edge is not in the graph.

    ``side`` is ``"source"`` or ``"target"`` for edge construction and
    ``"lookup"`` for a plain name resolution.
    """

    def __init__(self, name: str, side: str) -> None:
        if side == "lookup":
            message = f"{name} not in graph."
        else:
            message = f"{name} not in graph. Cannot add edge."
        super().__init__(message)
        self.name = name
        self.side = side


class DuplicateNameError(GraphError):
    """A node with the same name is already registered."""

    def __init__(self, name: str, existing_id: int) -> None:
        super().__init__(f"{name} already in graph (id {existing_id}).")
        self.name = name
        self.existing_id = existing_id


class CycleDetectedError(GraphError):
    """The renderer reached a node that is already on its ancestor path."""

    def __init__(self, path: Sequence[str]) -> None:
        super().__init__("Cycle detected: " + " -> ".join(path))
        self.path = list(path)


class SourcesNotComputedError(GraphError):
    """``add_root`` was called before ``find_sources``."""

    def __init__(self) -> None:
        super().__init__("Sources not computed. Call find_sources() before add_root().")
