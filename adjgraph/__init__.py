"""
adjgraph

A fixed-capacity, append-only adjacency-list graph whose vertices carry a
caller key and an index into an external data table.
"""

from adjgraph.graph import Graph, Node, Vertex, create_graph
from adjgraph.models import GraphKind, GraphState, GraphSummary, Payload

__all__ = [
    "Graph",
    "GraphKind",
    "GraphState",
    "GraphSummary",
    "Node",
    "Payload",
    "Vertex",
    "create_graph",
]
__version__ = "0.1.0"
