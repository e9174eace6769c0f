"""
Sample data for adjgraph.

A ten-record data table (<1,A>, <2,B>, ... <10,J>) and a fixed sequence of
edges, used by the command line demo and the tests.
"""

from typing import Optional

from adjgraph.graph import Graph
from adjgraph.models import GraphKind, Payload

SAMPLE_SIZE = 10

# (start key, finish key), in insertion order
SAMPLE_EDGES: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 6),
    (4, 5),
    (5, 1),
    (5, 8),
    (6, 7),
    (6, 9),
    (7, 3),
    (7, 10),
    (8, 4),
    (9, 8),
)


def build_sample_table(size: int = SAMPLE_SIZE) -> list[Payload]:
    """
    Build a data table whose record i has key i + 1 and name chr(ord('A') + i).

    Args:
        size: Number of records

    Returns:
        The table, indexed by data index
    """
    return [Payload(key=i + 1, name=chr(ord("A") + i)) for i in range(size)]


def build_sample_graph(
    kind: GraphKind = GraphKind.DIRECTED,
    table: Optional[list[Payload]] = None,
) -> Graph:
    """
    Build the sample graph.

    One vertex per table record (key = record key, data index = record
    index), then SAMPLE_EDGES in order.

    Args:
        kind: Edge semantics
        table: Data table, build_sample_table() when omitted

    Returns:
        A FULL graph with the sample edges
    """
    if table is None:
        table = build_sample_table()

    graph = Graph(len(table), kind)
    for index, record in enumerate(table):
        graph.add_vertex(record.key, index)

    for start, finish in SAMPLE_EDGES:
        graph.add_edge(start, finish)

    return graph
