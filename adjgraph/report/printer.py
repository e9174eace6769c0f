"""
Diagnostic report for adjgraph graphs.

For every registered vertex, in position order:

    (blank line)
    === Vertex[ 0 ] ===
    <map.key:1, map.data_idx:0>
    Has neighbors

With depth >= 1 a line listing neighbor keys follows, most recently linked
first, e.g. " 9 -> 7 -> Nil". With depth >= 2 each key is followed by the
node's identity, e.g. " 9 (Node:0x7f...) -> Nil". The report ends with an
extra newline.
"""

import sys
from typing import Optional, TextIO

from adjgraph.graph import Graph


def format_graph(graph: Graph, depth: int = 0) -> str:
    """
    Build the diagnostic report of a graph.

    Args:
        graph: The graph to describe
        depth: Level of detail (0: headers only)

    Returns:
        The report text
    """
    out: list[str] = []

    for position, vertex in enumerate(graph.vertices()):
        out.append(f"\n=== Vertex[ {position} ] ===\n")
        out.append(f"<map.key:{vertex.key}, map.data_idx:{vertex.data_index}>\n")

        head = vertex.neighbors
        out.append("Has neighbors\n" if head is not None else "Has no neighbors\n")

        if depth > 0 and head is not None:
            for node in vertex.iter_nodes():
                out.append(f" {graph.vertex_at(node.position).key} ")
                if depth > 1:
                    out.append(f"(Node:{id(node):#x}) ")
                out.append("->")
            out.append(" Nil\n")

    out.append("\n")
    return "".join(out)


def print_graph(graph: Graph, depth: int = 0, file: Optional[TextIO] = None) -> None:
    """Write format_graph(graph, depth) to file (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(format_graph(graph, depth))
