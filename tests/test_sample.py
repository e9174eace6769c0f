"""
Tests for the sample module.

Tests the bundled data table and the end-to-end sample graph.
"""

from adjgraph.models import GraphKind, GraphState, Payload
from adjgraph.sample import SAMPLE_EDGES, build_sample_graph, build_sample_table
from tests.fixtures import SAMPLE_DIRECTED_NEIGHBORS, SAMPLE_UNDIRECTED_NEIGHBORS


class TestSampleTable:
    """Tests for build_sample_table."""

    def test_default_table(self):
        """Test that records run <1,A> to <10,J>."""
        table = build_sample_table()

        assert len(table) == 10
        assert table[0] == Payload(key=1, name="A")
        assert table[9] == Payload(key=10, name="J")

    def test_custom_size(self):
        """Test building a smaller table."""
        assert [record.name for record in build_sample_table(3)] == ["A", "B", "C"]


class TestSampleGraph:
    """Tests for the end-to-end sample scenario."""

    def test_vertices(self):
        """Test that keys 1..10 map to data indices 0..9."""
        graph = build_sample_graph()

        assert graph.size == 10
        assert graph.count == 10
        assert graph.state == GraphState.FULL
        for key in range(1, 11):
            assert graph.get_vertex(key).data_index == key - 1

    def test_directed_adjacency(self):
        """Test the neighbors of every vertex in the directed sample."""
        graph = build_sample_graph(GraphKind.DIRECTED)

        for key, expected in SAMPLE_DIRECTED_NEIGHBORS.items():
            assert graph.neighbor_keys(key) == expected, key

        assert graph.edge_count == len(SAMPLE_EDGES)

    def test_undirected_adjacency(self):
        """Test the neighbors of every vertex in the undirected sample."""
        graph = build_sample_graph(GraphKind.UNDIRECTED)

        for key, expected in SAMPLE_UNDIRECTED_NEIGHBORS.items():
            assert graph.neighbor_keys(key) == expected, key

        assert graph.edge_count == 2 * len(SAMPLE_EDGES)

    def test_cursor_walk_over_sample(self):
        """Test the cursor protocol on vertex 6 of the sample."""
        graph = build_sample_graph()
        vertex = graph.get_vertex(6)

        keys = []
        vertex.start()
        while not vertex.at_end():
            keys.append(graph.vertex_at(vertex.current()).key)
            vertex.advance()

        assert keys == [9, 7]

    def test_payload_lookup(self):
        """Test resolving sample records through the graph."""
        table = build_sample_table()
        graph = build_sample_graph(table=table)

        names = [graph.payload_for(key, table).name for key in graph.neighbor_keys(7)]

        assert names == ["J", "C"]
