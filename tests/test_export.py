"""
Tests for the export module.

Tests conversion of adjgraph graphs to NetworkX.
"""

import networkx as nx

from adjgraph.graph import Graph
from adjgraph.export import to_networkx
from adjgraph.models import GraphKind
from adjgraph.sample import SAMPLE_EDGES, build_sample_graph


class TestToNetworkx:
    """Tests for to_networkx."""

    def test_directed_sample(self):
        """Test that the directed sample becomes an equivalent DiGraph."""
        result = to_networkx(build_sample_graph(GraphKind.DIRECTED))

        assert isinstance(result, nx.DiGraph)
        assert result.number_of_nodes() == 10
        assert set(result.edges()) == set(SAMPLE_EDGES)

    def test_undirected_sample(self):
        """Test that the undirected sample becomes a Graph."""
        result = to_networkx(build_sample_graph(GraphKind.UNDIRECTED))

        assert not result.is_directed()
        assert result.number_of_edges() == len(SAMPLE_EDGES)
        assert result.has_edge(8, 9)

    def test_node_attributes(self):
        """Test that nodes carry position and data index."""
        graph = Graph(2)
        graph.add_vertex(7, 4)
        graph.add_vertex(8, 3)

        result = to_networkx(graph)

        assert result.nodes[7] == {"position": 0, "data_index": 4}
        assert result.nodes[8] == {"position": 1, "data_index": 3}

    def test_networkx_algorithms_apply(self):
        """Test running a NetworkX algorithm on the sample."""
        result = to_networkx(build_sample_graph())

        assert nx.shortest_path(result, 1, 10) == [1, 2, 6, 7, 10]
        assert nx.has_path(result, 4, 1)
        assert not nx.has_path(result, 3, 1)

    def test_unregistered_slots_skipped(self):
        """Test that only registered vertices are exported."""
        graph = Graph(5)
        graph.add_vertex(1, 0)

        assert list(to_networkx(graph).nodes) == [1]
