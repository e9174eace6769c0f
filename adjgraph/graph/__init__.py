"""
Graph module for adjgraph.

This module provides the fixed-capacity adjacency-list graph and its
vertices.
"""

from adjgraph.graph.graph import Graph, create_graph
from adjgraph.graph.vertex import Node, Vertex

__all__ = [
    "Graph",
    "Node",
    "Vertex",
    "create_graph",
]
