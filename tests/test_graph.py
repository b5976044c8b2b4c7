"""Tests for graph data model."""

import pytest

from graph.model import DependencyGraph, edge_key


class TestDependencyGraph:
    """Tests for DependencyGraph class."""

    def test_empty_graph(self):
        """Test empty graph initialization."""
        graph = DependencyGraph()
        assert len(graph) == 0
        assert graph.nodes == set()
        assert graph.edges == {}
        assert graph.edge_keys == []

    def test_add_edge(self):
        """Test adding edges."""
        graph = DependencyGraph()

        assert graph.add_edge("cmd", "pkg/util")

        assert len(graph) == 1
        assert graph.nodes == {"cmd", "pkg/util"}
        assert "pkg/util" in graph.get_targets("cmd")

    def test_add_edge_is_idempotent(self):
        """Test that adding an existing edge is a no-op."""
        graph = DependencyGraph()
        graph.add_edge("cmd", "pkg")

        assert not graph.add_edge("cmd", "pkg")
        assert len(graph) == 1

    def test_edge_direction_matters(self):
        """Test that A -> B and B -> A are distinct edges."""
        graph = DependencyGraph()
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")

        assert graph.edge_keys == ["a -> b", "b -> a"]

    def test_contains(self):
        """Test membership by edge text or tuple."""
        graph = DependencyGraph()
        graph.add_edge("cmd", "pkg")

        assert "cmd -> pkg" in graph
        assert ("cmd", "pkg") in graph
        assert ("pkg", "cmd") not in graph

    def test_get_roots(self):
        """Test getting directories that nothing imports."""
        graph = DependencyGraph()
        graph.add_edge("cmd/api", "internal/store")
        graph.add_edge("cmd/worker", "internal/store")
        graph.add_edge("internal/store", "internal/model")

        assert graph.get_roots() == {"cmd/api", "cmd/worker"}

    def test_get_sources(self):
        """Test getting directories that import a target."""
        graph = DependencyGraph()
        graph.add_edge("cmd/api", "internal/store")
        graph.add_edge("cmd/worker", "internal/store")

        assert graph.get_sources("internal/store") == {"cmd/api", "cmd/worker"}

    def test_edges_adjacency(self):
        """Test the adjacency list view."""
        graph = DependencyGraph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "c")
        graph.add_edge("b", "c")

        assert graph.edges == {"a": {"b", "c"}, "b": {"c"}}

    def test_iter_edges_insertion_order(self):
        """Test iterating over edges in the order they were found."""
        graph = DependencyGraph()
        edges = [("z", "a"), ("a", "z"), ("m", "a")]

        for source, target in edges:
            graph.add_edge(source, target)

        assert list(graph.iter_edges()) == edges

    def test_repr(self):
        """Test string representation."""
        graph = DependencyGraph()
        graph.add_edge("a", "b")

        assert "nodes=2" in repr(graph)
        assert "edges=1" in repr(graph)

    @pytest.mark.parametrize(
        "source, target, expected",
        [
            ("cmd", "pkg", "cmd -> pkg"),
            ("cmd/my-app", "pkg/util", "cmd/my-app -> pkg/util"),
        ],
    )
    def test_edge_key(self, source, target, expected):
        """Test the textual edge form."""
        assert edge_key(source, target) == expected
