"""
Vertex and adjacency list for adjgraph.

A Vertex keeps the caller's key, an opaque index into the caller's data
table, and a singly linked list of Node objects. Each Node stores the
position (not the key) of a neighbor within the owning graph.

Two ways of walking the list are offered:

    Cursor protocol, stored in the vertex (one traversal at a time):
        vertex.start()
        while not vertex.at_end():
            position = vertex.current()
            vertex.advance()

    Independent iterators, owned by the caller:
        for position in vertex:
            ...

New neighbors are prepended, so both walks yield the most recently
inserted neighbor first.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from adjgraph.exceptions import CursorError, GraphContractError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """
    One entry of an adjacency list.

    Attributes:
        position: Position of the neighbor vertex in the graph
        next: Following node, None at the tail
    """

    position: int
    next: Optional["Node"] = None


class Vertex:
    """
    A graph vertex with its outgoing adjacency list.

    Attributes:
        key: Caller-supplied identifier
        data_index: Index into the caller's data table, never interpreted here
        neighbors: Head node of the adjacency list, None when empty
    """

    def __init__(self, key: int = 0, data_index: int = 0) -> None:
        self._key = key
        self._data_index = data_index
        self._neighbors: Optional[Node] = None
        self._cursor: Optional[Node] = None
        self._degree = 0
        self._owned = False

    def __repr__(self) -> str:
        return f"Vertex(key={self._key}, data_index={self._data_index}, degree={self._degree})"

    @property
    def key(self) -> int:
        return self._key

    @property
    def data_index(self) -> int:
        return self._data_index

    @property
    def neighbors(self) -> Optional[Node]:
        return self._neighbors

    @property
    def degree(self) -> int:
        """Number of nodes in the adjacency list."""
        return self._degree

    def _assign(self, key: int, data_index: int) -> None:
        """Fill an empty graph slot with a key and data index. Called by Graph.add_vertex."""
        self._key = key
        self._data_index = data_index
        self._neighbors = None
        self._cursor = None
        self._degree = 0
        self._owned = True

    # Cursor protocol

    def start(self) -> None:
        """Place the cursor on the first neighbor (or at end if none)."""
        self._cursor = self._neighbors

    def at_end(self) -> bool:
        """Return True once the cursor has moved past the last neighbor."""
        return self._cursor is None

    def advance(self) -> None:
        """
        Move the cursor to the next neighbor.

        Raises:
            CursorError: If the cursor is already at the end
        """
        if self._cursor is None:
            raise CursorError(f"cannot advance past the end of vertex {self._key}")
        self._cursor = self._cursor.next

    def current(self) -> int:
        """
        Return the position of the neighbor under the cursor.

        Raises:
            CursorError: If the cursor is at the end
        """
        if self._cursor is None:
            raise CursorError(f"cursor of vertex {self._key} is at the end")
        return self._cursor.position

    # Adjacency list

    def has_neighbor(self, position: int) -> bool:
        """Check whether position is already in the adjacency list."""
        node = self._neighbors
        while node is not None:
            if node.position == position:
                return True
            node = node.next
        return False

    def insert_neighbor(self, position: int) -> bool:
        """
        Prepend position to the adjacency list unless it is already there.

        Only standalone vertices accept direct insertion. A vertex that
        belongs to a graph is linked through Graph.add_edge, which checks
        that position refers to a registered vertex.

        Args:
            position: Position of the neighbor vertex

        Returns:
            True if a node was added, False if position was already present

        Raises:
            GraphContractError: If the vertex belongs to a graph
        """
        if self._owned:
            raise GraphContractError(
                f"vertex {self._key} belongs to a graph; use Graph.add_edge"
            )
        return self._link(position)

    def _link(self, position: int) -> bool:
        if self.has_neighbor(position):
            logger.debug("vertex %d: duplicated neighbor position %d", self._key, position)
            return False

        self._neighbors = Node(position=position, next=self._neighbors)
        self._degree += 1
        logger.debug("vertex %d: inserted neighbor position %d", self._key, position)
        return True

    def iter_nodes(self) -> Iterator[Node]:
        """Yield the adjacency nodes from head to tail."""
        node = self._neighbors
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        for node in self.iter_nodes():
            yield node.position

    def neighbor_positions(self) -> list[int]:
        """Return neighbor positions in traversal order."""
        return list(self)

    def _release(self) -> None:
        """Unlink every node of the adjacency list. Called by Graph.destroy."""
        node = self._neighbors
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self._neighbors = None
        self._cursor = None
        self._degree = 0
