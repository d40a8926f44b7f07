"""
Unit tests for the EdgeGraph adjacency store.
"""

from edgegraph import EdgeGraph


class TestConstruction:
    """Test adjacency construction."""

    def test_neighbor_order_follows_edge_arrival(self, triangle_graph):
        """Neighbor lists should keep edge-arrival order, unsorted."""
        assert triangle_graph.adjacency_list == {
            1: [2, 3],
            2: [1, 3, 4],
            3: [2, 1],
            4: [2],
        }

    def test_key_order_follows_first_appearance(self):
        """Nodes should be keyed in order of first appearance."""
        graph = EdgeGraph([(5, 3), (1, 5)])
        assert graph.get_nodes() == [5, 3, 1]

    def test_self_loop_recorded_twice(self):
        """A symmetric self-loop appears once per direction."""
        graph = EdgeGraph([(7, 7)])
        assert graph.get_neighbors(7) == [7, 7]
        assert graph.get_edge_count() == 1

    def test_parallel_edges_preserved(self):
        """Repeated pairs are not deduplicated."""
        graph = EdgeGraph([(1, 2), (1, 2)])
        assert graph.get_neighbors(1) == [2, 2]
        assert graph.get_degree(1) == 2

    def test_empty_graph(self):
        """No edges should give an empty graph."""
        graph = EdgeGraph([])
        assert len(graph) == 0
        assert list(graph.edges()) == []


class TestQueries:
    """Test basic graph queries."""

    def test_counts(self, triangle_graph):
        """Node and edge counts should reflect the input."""
        assert triangle_graph.get_node_count() == 4
        assert triangle_graph.get_edge_count() == 4

    def test_unknown_node_has_no_neighbors(self, triangle_graph):
        """Unknown nodes should report an empty neighbor list."""
        assert triangle_graph.get_neighbors(99) == []
        assert 99 not in triangle_graph

    def test_edges_yield_every_adjacency_entry(self, triangle_graph):
        """A symmetric graph yields each ingested edge in both directions."""
        edges = list(triangle_graph.edges())
        assert len(edges) == 8
        assert (2, 4) in edges and (4, 2) in edges

    def test_to_dict_is_a_copy(self, triangle_graph):
        """Mutating the exported mapping must not touch the graph."""
        exported = triangle_graph.to_dict()
        exported[1].append(42)
        assert triangle_graph.get_neighbors(1) == [2, 3]


class TestFromAdjacency:
    """Test wrapping a prebuilt adjacency mapping."""

    def test_order_is_preserved(self):
        """Key and neighbor order should be kept exactly."""
        graph = EdgeGraph.from_adjacency({3: [2, 1], 1: [3]})
        assert graph.get_nodes() == [3, 1]
        assert graph.get_neighbors(3) == [2, 1]

    def test_dangling_neighbor_is_known(self):
        """A neighbor without its own entry is still a known node."""
        graph = EdgeGraph.from_adjacency({1: [2]})
        assert graph.has_node(2)
        assert 2 not in graph.adjacency_list
        assert graph.get_all_nodes() == {1, 2}


class TestEdgeCount:
    """Test edge counting for both construction paths."""

    def test_symmetric_edge_counted_once(self):
        """An ingested edge counts once although it has two adjacency entries."""
        graph = EdgeGraph([(1, 2), (2, 3)])
        assert graph.get_edge_count() == 2
        assert len(list(graph.edges())) == 4

    def test_wrapped_adjacency_counts_entries(self):
        """A wrapped mapping counts each adjacency entry as one edge."""
        graph = EdgeGraph.from_adjacency({1: [2, 3], 2: [1], 3: []})
        assert graph.get_edge_count() == 3
