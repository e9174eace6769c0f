"""
NetworkX conversion for adjgraph

Builds a NetworkX graph mirroring an adjgraph Graph so that the NetworkX
algorithm library (shortest paths, cycles, components, ...) can be run on
it.

Mapping:
    - Each registered vertex becomes a node identified by its key, with
      `position` and `data_index` attributes
    - DIRECTED graphs become nx.DiGraph, UNDIRECTED graphs nx.Graph
    - Every adjacency entry becomes an edge
    - Vertices sharing a key collapse into one node (first registration's
      attributes are kept)
"""

from typing import Union

import networkx as nx

from adjgraph.graph import Graph
from adjgraph.models import GraphKind


def to_networkx(graph: Graph) -> Union[nx.DiGraph, nx.Graph]:
    """
    Convert a graph to NetworkX.

    Args:
        graph: The graph to convert

    Returns:
        nx.DiGraph for DIRECTED graphs, nx.Graph for UNDIRECTED ones

    Example:
        >>> from adjgraph.sample import build_sample_graph
        >>> nx_graph = to_networkx(build_sample_graph())
        >>> sorted(nx_graph.successors(6))
        [7, 9]
    """
    result: Union[nx.DiGraph, nx.Graph]
    if graph.kind is GraphKind.DIRECTED:
        result = nx.DiGraph()
    else:
        result = nx.Graph()

    for position, vertex in enumerate(graph.vertices()):
        if vertex.key in result:
            continue
        result.add_node(vertex.key, position=position, data_index=vertex.data_index)

    for vertex in graph.vertices():
        for position in vertex:
            result.add_edge(vertex.key, graph.vertex_at(position).key)

    return result
