"""
Graph for adjgraph

This module provides a fixed-capacity, append-only graph whose vertices are
identified by caller-supplied integer keys and whose edges are stored as
per-vertex adjacency lists of positions.

Design Decisions:
    - All vertex slots are allocated up front and never resized
    - A vertex's position is the order in which it was registered
    - Keys resolve to positions through a dict; the first registration of a
      key wins, later duplicates are unreachable by key
    - Vertices and edges are never removed
    - Payload data stays in the caller's table; a vertex only keeps an index

Graph Properties:
    - DIRECTED: add_edge(a, b) links a -> b
    - UNDIRECTED: add_edge(a, b) links a -> b and b -> a
    - No duplicate neighbor in one adjacency list (add_edge is idempotent)
    - Self-loops are allowed
"""

import logging
from typing import Iterator, Optional, Sequence, TextIO, TypeVar

from adjgraph.exceptions import (
    CapacityExceededError,
    EmptyGraphError,
    GraphDestroyedError,
    InvalidCapacityError,
    InvalidKindError,
    InvalidPositionError,
    VertexNotFoundError,
)
from adjgraph.graph.vertex import Node, Vertex
from adjgraph.models import GraphKind, GraphState, GraphSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Graph:
    """
    A fixed-capacity adjacency-list graph.

    Attributes:
        size: Number of preallocated vertex slots
        count: Number of registered vertices
        kind: DIRECTED or UNDIRECTED

    Usage:
        with Graph(3, GraphKind.DIRECTED) as graph:
            graph.add_vertex(10, 0)
            graph.add_vertex(20, 1)
            graph.add_edge(10, 20)
            for position in graph.get_vertex(10):
                print(graph.vertex_at(position).key)
    """

    def __init__(self, capacity: int, kind: GraphKind = GraphKind.DIRECTED) -> None:
        """
        Create an empty graph.

        Args:
            capacity: Maximum number of vertices, fixed for the graph's lifetime
            kind: Edge semantics

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
            InvalidKindError: If kind is neither a GraphKind nor one of its values
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)
        try:
            kind = GraphKind(kind)
        except (ValueError, TypeError):
            raise InvalidKindError(kind) from None

        self._size = capacity
        self._kind = kind
        self._count = 0
        self._vertices: Optional[list[Vertex]] = [Vertex() for _ in range(capacity)]
        self._positions: dict[int, int] = {}

        logger.debug("created %s graph with %d slots", kind.value, capacity)

    def __repr__(self) -> str:
        if self._vertices is None:
            return "Graph(<destroyed>)"
        return f"Graph(size={self._size}, count={self._count}, kind={self._kind.name})"

    def __len__(self) -> int:
        return self.count

    def __enter__(self) -> "Graph":
        self._ensure_alive()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._vertices is not None:
            self.destroy()

    def _ensure_alive(self) -> list[Vertex]:
        if self._vertices is None:
            raise GraphDestroyedError("graph has been destroyed")
        return self._vertices

    @property
    def size(self) -> int:
        """Number of preallocated vertex slots."""
        self._ensure_alive()
        return self._size

    @property
    def count(self) -> int:
        """Number of registered vertices."""
        self._ensure_alive()
        return self._count

    @property
    def kind(self) -> GraphKind:
        return self._kind

    @property
    def is_destroyed(self) -> bool:
        return self._vertices is None

    @property
    def state(self) -> GraphState:
        """Build phase derived from count and size."""
        self._ensure_alive()
        if self._count == 0:
            return GraphState.EMPTY
        if self._count == self._size:
            return GraphState.FULL
        return GraphState.BUILDING

    @property
    def edge_count(self) -> int:
        """Number of adjacency entries; an undirected edge counts once per side."""
        return sum(vertex.degree for vertex in self.vertices())

    def add_vertex(self, key: int, data_index: int) -> Vertex:
        """
        Register a vertex in the next free slot.

        Duplicate keys are not detected; lookups by key return the first
        vertex registered with it.

        Args:
            key: Caller's identifier for the vertex
            data_index: Index of the vertex's record in the caller's data table

        Returns:
            The vertex now occupying position count - 1

        Raises:
            CapacityExceededError: If every slot is already taken
        """
        vertices = self._ensure_alive()
        if self._count >= self._size:
            raise CapacityExceededError(self._size)

        position = self._count
        vertex = vertices[position]
        vertex._assign(key, data_index)
        self._positions.setdefault(key, position)
        self._count += 1

        logger.debug("added vertex key=%d data_index=%d at position %d", key, data_index, position)
        return vertex

    def add_edge(self, start: int, finish: int) -> bool:
        """
        Link the vertex keyed start to the vertex keyed finish.

        For an UNDIRECTED graph the reverse link is added as well. Adding an
        existing edge again changes nothing.

        Args:
            start: Key of the source vertex
            finish: Key of the target vertex

        Returns:
            False if either key is unknown (nothing is added), True otherwise

        Raises:
            EmptyGraphError: If no vertex has been registered yet
        """
        vertices = self._ensure_alive()
        if self._count == 0:
            raise EmptyGraphError("cannot add an edge to a graph without vertices")

        start_position = self._positions.get(start)
        finish_position = self._positions.get(finish)

        logger.debug(
            "add_edge: from %d (position %s) to %d (position %s)",
            start, start_position, finish, finish_position,
        )

        if start_position is None or finish_position is None:
            return False

        vertices[start_position]._link(finish_position)

        if self._kind is GraphKind.UNDIRECTED:
            vertices[finish_position]._link(start_position)

        return True

    def get_vertex(self, key: int) -> Optional[Vertex]:
        """
        Retrieve the first vertex registered with key.

        Returns:
            The Vertex if found, None otherwise
        """
        vertices = self._ensure_alive()
        position = self._positions.get(key)
        if position is None:
            return None
        return vertices[position]

    def vertex_at(self, position: int) -> Vertex:
        """
        Retrieve the vertex at a position.

        Raises:
            InvalidPositionError: If position is outside [0, count)
        """
        vertices = self._ensure_alive()
        if not 0 <= position < self._count:
            raise InvalidPositionError(position, self._count)
        return vertices[position]

    def get_neighbors(self, key: int) -> Optional[Node]:
        """
        Return the head of a vertex's adjacency list.

        Returns:
            The first Node, or None if key is unknown or has no neighbors
        """
        vertex = self.get_vertex(key)
        if vertex is None:
            return None
        return vertex.neighbors

    def position_of(self, vertex: Vertex) -> int:
        """
        Recover a vertex's position by searching for its key.

        Raises:
            VertexNotFoundError: If no registered vertex has that key
        """
        self._ensure_alive()
        position = self._positions.get(vertex.key)
        if position is None:
            raise VertexNotFoundError(f"no vertex with key {vertex.key} in graph")
        return position

    def vertices(self) -> Iterator[Vertex]:
        """Yield registered vertices in position order."""
        vertices = self._ensure_alive()
        for position in range(self._count):
            yield vertices[position]

    def iter_neighbors(self, key: int) -> Iterator[Vertex]:
        """
        Yield the neighbor vertices of key in traversal order.

        The walk does not use the vertex's cursor, so several may run at once.
        Unknown keys yield nothing.
        """
        vertex = self.get_vertex(key)
        if vertex is None:
            return
        vertices = self._ensure_alive()
        for position in vertex:
            yield vertices[position]

    def neighbor_keys(self, key: int) -> list[int]:
        """Return the keys of key's neighbors, most recently linked first."""
        return [neighbor.key for neighbor in self.iter_neighbors(key)]

    def payload_for(self, key: int, table: Sequence[T]) -> Optional[T]:
        """
        Look up the caller's record for a vertex.

        Args:
            key: Vertex key
            table: The data table the vertex's data_index points into

        Returns:
            table[data_index], or None if key is unknown
        """
        vertex = self.get_vertex(key)
        if vertex is None:
            return None
        return table[vertex.data_index]

    def summary(self) -> GraphSummary:
        return GraphSummary(
            kind=self._kind,
            state=self.state,
            capacity=self._size,
            count=self._count,
            edge_count=self.edge_count,
        )

    def print(self, depth: int = 0, file: Optional[TextIO] = None) -> None:
        """
        Write the diagnostic report (see adjgraph.report) to file or stdout.

        Args:
            depth: 0 for vertex headers only, 1 adds neighbor keys,
                2 adds node identifiers
            file: Destination stream
        """
        from adjgraph.report import print_graph

        print_graph(self, depth, file=file)

    def destroy(self) -> None:
        """
        Release every adjacency node and the vertex slots.

        The graph is unusable afterwards; any further call raises
        GraphDestroyedError.
        """
        vertices = self._ensure_alive()
        for vertex in vertices:
            vertex._release()
        vertices.clear()
        self._positions.clear()
        self._vertices = None
        self._count = 0

        logger.debug("destroyed graph with %d slots", self._size)


def create_graph(capacity: int, kind: GraphKind = GraphKind.DIRECTED) -> Optional[Graph]:
    """
    Create a graph, reporting allocation failure instead of raising.

    Args:
        capacity: Maximum number of vertices
        kind: Edge semantics

    Returns:
        The new Graph, or None if its slots could not be allocated

    Raises:
        InvalidCapacityError: If capacity is not a positive integer
    """
    try:
        return Graph(capacity, kind)
    except MemoryError:
        logger.debug("could not allocate a graph with %d slots", capacity)
        return None
