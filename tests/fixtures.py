"""
Test fixtures for adjgraph.

This module provides expected adjacency lists and report text for the
bundled sample graph.
"""

# Neighbor keys per vertex key, in traversal order (most recent link first)
SAMPLE_DIRECTED_NEIGHBORS = {
    1: [2],
    2: [6],
    3: [],
    4: [5],
    5: [8, 1],
    6: [9, 7],
    7: [10, 3],
    8: [4],
    9: [8],
    10: [],
}

SAMPLE_UNDIRECTED_NEIGHBORS = {
    1: [5, 2],
    2: [6, 1],
    3: [7],
    4: [8, 5],
    5: [8, 1, 4],
    6: [9, 7, 2],
    7: [10, 3, 6],
    8: [9, 4, 5],
    9: [8, 6],
    10: [7],
}

SAMPLE_DIRECTED_REPORT_DEPTH_0 = """
=== Vertex[ 0 ] ===
<map.key:1, map.data_idx:0>
Has neighbors

=== Vertex[ 1 ] ===
<map.key:2, map.data_idx:1>
Has neighbors

=== Vertex[ 2 ] ===
<map.key:3, map.data_idx:2>
Has no neighbors

=== Vertex[ 3 ] ===
<map.key:4, map.data_idx:3>
Has neighbors

=== Vertex[ 4 ] ===
<map.key:5, map.data_idx:4>
Has neighbors

=== Vertex[ 5 ] ===
<map.key:6, map.data_idx:5>
Has neighbors

=== Vertex[ 6 ] ===
<map.key:7, map.data_idx:6>
Has neighbors

=== Vertex[ 7 ] ===
<map.key:8, map.data_idx:7>
Has neighbors

=== Vertex[ 8 ] ===
<map.key:9, map.data_idx:8>
Has neighbors

=== Vertex[ 9 ] ===
<map.key:10, map.data_idx:9>
Has no neighbors

"""

SAMPLE_DIRECTED_REPORT_DEPTH_1 = """
=== Vertex[ 0 ] ===
<map.key:1, map.data_idx:0>
Has neighbors
 2 -> Nil

=== Vertex[ 1 ] ===
<map.key:2, map.data_idx:1>
Has neighbors
 6 -> Nil

=== Vertex[ 2 ] ===
<map.key:3, map.data_idx:2>
Has no neighbors

=== Vertex[ 3 ] ===
<map.key:4, map.data_idx:3>
Has neighbors
 5 -> Nil

=== Vertex[ 4 ] ===
<map.key:5, map.data_idx:4>
Has neighbors
 8 -> 1 -> Nil

=== Vertex[ 5 ] ===
<map.key:6, map.data_idx:5>
Has neighbors
 9 -> 7 -> Nil

=== Vertex[ 6 ] ===
<map.key:7, map.data_idx:6>
Has neighbors
 10 -> 3 -> Nil

=== Vertex[ 7 ] ===
<map.key:8, map.data_idx:7>
Has neighbors
 4 -> Nil

=== Vertex[ 8 ] ===
<map.key:9, map.data_idx:8>
Has neighbors
 8 -> Nil

=== Vertex[ 9 ] ===
<map.key:10, map.data_idx:9>
Has no neighbors

"""
