"""Tests for the graph store: ids, edges, sources and root synthesis."""

from __future__ import annotations

import pytest

from termtree.errors import DuplicateNameError, SourcesNotComputedError, UnresolvedNameError
from termtree.graph import Graph, GraphBuilder, Node, new_graph


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def forest() -> Graph:
    """Two trees: a -> (b, c) and d -> e, plus an isolated f."""
    g = Graph()
    for name in "abcdef":
        g.add_node(name, name.upper())
    g.add_edge_by_name("a", "b")
    g.add_edge_by_name("a", "c")
    g.add_edge_by_name("d", "e")
    return g


# ---------------------------------------------------------------------------
# add_node
# ---------------------------------------------------------------------------

class TestAddNode:
    def test_ids_are_dense_and_ordered(self) -> None:
        g = new_graph()
        ids = [g.add_node(f"n{i}", f"N{i}") for i in range(5)]
        assert ids == [0, 1, 2, 3, 4]
        assert [n.id for n in g.nodes] == ids

    def test_registers_name_and_empty_adjacency(self) -> None:
        g = Graph()
        node_id = g.add_node("svc", "Service", content={"port": 80})
        assert g.name_index["svc"] == node_id
        assert g.adjacency[node_id] == []
        assert g.nodes[node_id].label == "Service"
        assert g.nodes[node_id].content == {"port": 80}

    def test_label_defaults_to_name(self) -> None:
        g = Graph()
        node_id = g.add_node("svc")
        assert g.label_of(node_id) == "svc"

    def test_duplicate_name_rejected(self) -> None:
        g = Graph()
        first = g.add_node("dup", "one")
        with pytest.raises(DuplicateNameError) as exc_info:
            g.add_node("dup", "two")
        assert exc_info.value.existing_id == first
        assert len(g) == 1
        assert g.resolve("dup") == first

    def test_content_is_never_inspected(self) -> None:
        class Opaque:
            def __eq__(self, other):
                raise AssertionError("compared")

            __hash__ = None

        g = Graph()
        g.add_node("x", content=Opaque())
        g.add_node("y", content=Opaque())
        g.add_edge_by_name("x", "y")
        assert g.find_sources().sources == [0]

    def test_in_degree_is_not_a_constructor_argument(self) -> None:
        with pytest.raises(TypeError):
            Graph(_in_degree=[0])

    def test_equality_never_touches_content(self) -> None:
        class Opaque:
            def __eq__(self, other):
                raise AssertionError("compared")

            __hash__ = None

        left, right = Graph(), Graph()
        left.add_node("x", content=Opaque())
        right.add_node("x", content=Opaque())
        assert left != right
        assert left == left
        assert left.nodes[0] != right.nodes[0]

    def test_node_str_is_name(self) -> None:
        assert str(Node(id=0, name="core", label="Core")) == "core"


# ---------------------------------------------------------------------------
# add_edge_by_name
# ---------------------------------------------------------------------------

class TestAddEdge:
    def test_appends_in_order(self, forest: Graph) -> None:
        assert forest.children(forest.resolve("a")) == [1, 2]

    def test_parallel_edges_kept(self, forest: Graph) -> None:
        before = len(forest.adjacency[0])
        forest.add_edge_by_name("a", "b")
        assert len(forest.adjacency[0]) == before + 1
        assert forest.adjacency[0] == [1, 2, 1]

    def test_unknown_source(self, forest: Graph) -> None:
        with pytest.raises(UnresolvedNameError) as exc_info:
            forest.add_edge_by_name("missing", "b")
        assert exc_info.value.side == "source"
        assert exc_info.value.name == "missing"
        assert "missing not in graph" in str(exc_info.value)

    def test_unknown_target(self, forest: Graph) -> None:
        with pytest.raises(UnresolvedNameError) as exc_info:
            forest.add_edge_by_name("a", "missing")
        assert exc_info.value.side == "target"
        assert forest.adjacency[0] == [1, 2]

    def test_edges_iterates_pairs(self, forest: Graph) -> None:
        assert list(forest.edges()) == [(0, 1), (0, 2), (3, 4)]


# ---------------------------------------------------------------------------
# find_sources / add_root
# ---------------------------------------------------------------------------

class TestSources:
    def test_sources_absent_until_computed(self, forest: Graph) -> None:
        assert forest.sources is None

    def test_find_sources_returns_self(self, forest: Graph) -> None:
        assert forest.find_sources() is forest

    def test_source_iff_no_incoming_edge(self, forest: Graph) -> None:
        forest.find_sources()
        targets = {t for children in forest.adjacency.values() for t in children}
        for node in forest.nodes:
            assert (node.id in forest.sources) == (node.id not in targets)
        assert forest.sources == [0, 3, 5]

    def test_idempotent(self, forest: Graph) -> None:
        first = list(forest.find_sources().sources)
        second = list(forest.find_sources().sources)
        assert first == second

    def test_cache_not_invalidated_until_recomputed(self, forest: Graph) -> None:
        forest.find_sources()
        forest.add_edge_by_name("a", "d")
        assert forest.sources == [0, 3, 5]
        assert forest.current_sources() == [0, 5]
        assert forest.find_sources().sources == [0, 5]

    def test_add_root_collapses_forest(self, forest: Graph) -> None:
        prior = list(forest.find_sources().sources)
        root_id = forest.add_root("root")
        assert forest.sources == [root_id]
        assert forest.children(root_id) == prior
        assert forest.label_of(root_id) == "root"
        assert forest.find_sources().sources == [root_id]

    def test_add_root_requires_sources(self, forest: Graph) -> None:
        with pytest.raises(SourcesNotComputedError):
            forest.add_root("root")
        assert "root" not in forest


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class TestLookups:
    def test_resolve_and_name_of(self, forest: Graph) -> None:
        assert forest.resolve("e") == 4
        assert forest.name_of(4) == "e"
        assert forest.label_of(4) == "E"

    def test_resolve_unknown(self, forest: Graph) -> None:
        with pytest.raises(UnresolvedNameError) as exc_info:
            forest.resolve("zzz")
        assert exc_info.value.side == "lookup"

    def test_contains_and_len(self, forest: Graph) -> None:
        assert "a" in forest
        assert "zzz" not in forest
        assert len(forest) == 6


def test_graph_builder_protocol() -> None:
    class Chain:
        def build_graph(self) -> Graph:
            g = Graph()
            g.add_node("x")
            g.add_node("y")
            g.add_edge_by_name("x", "y")
            return g

    builder: GraphBuilder = Chain()
    g = builder.build_graph()
    assert g.find_sources().sources == [0]
