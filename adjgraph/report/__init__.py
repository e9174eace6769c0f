"""
Report module for adjgraph.

Text dump of a graph's vertices and adjacency lists.
"""

from adjgraph.report.printer import format_graph, print_graph

__all__ = [
    "format_graph",
    "print_graph",
]
