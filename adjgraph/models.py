"""
Core Data Models for adjgraph

This module defines the plain data structures shared across the package:
- GraphKind: Whether edges are mirrored on insertion
- GraphState: Build phase of a graph, derived from count and capacity
- Payload: A caller-owned data record referenced by a vertex
- GraphSummary: Read-only statistics about a graph

The graph itself never stores Payload objects. Vertices keep a key and an
index into the caller's table; Payload only exists so callers (and the
bundled sample) have a concrete record type to keep in that table.
"""

from dataclasses import dataclass
from enum import Enum


class GraphKind(Enum):
    """
    Edge semantics of a graph.

    States:
        UNDIRECTED: add_edge(a, b) links a to b and b to a.
        DIRECTED: add_edge(a, b) links a to b only.
    """

    UNDIRECTED = "undirected"
    DIRECTED = "directed"


class GraphState(Enum):
    """
    Build phase of a graph.

    States:
        EMPTY: No vertex registered yet. Edges cannot be added.
        BUILDING: Some but not all slots are filled.
        FULL: Every slot is filled. Vertices cannot be added, edges can.
    """

    EMPTY = "empty"
    BUILDING = "building"
    FULL = "full"


@dataclass(frozen=True)
class Payload:
    """
    A record in the caller's data table.

    Attributes:
        key: Indexing field, copied into the vertex on registration
        name: Arbitrary payload value (a single letter in the sample)
    """

    key: int
    name: str


@dataclass(frozen=True)
class GraphSummary:
    """
    Point-in-time statistics of a graph.

    Attributes:
        kind: Edge semantics of the graph
        state: Build phase
        capacity: Number of preallocated vertex slots
        count: Number of registered vertices
        edge_count: Number of adjacency entries (undirected edges count twice)
    """

    kind: GraphKind
    state: GraphState
    capacity: int
    count: int
    edge_count: int

    @property
    def free_slots(self) -> int:
        """Vertex slots still available."""
        return self.capacity - self.count
