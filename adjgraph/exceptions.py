"""
Exception hierarchy for adjgraph.

Contract violations (programmer errors) derive from GraphContractError and
are raised before any state is touched. Expected misses, such as an unknown
key passed to Graph.add_edge, are not exceptions: they are reported through
False / None return values.
"""


class AdjGraphError(Exception):
    """Base exception for adjgraph errors."""


class GraphContractError(AdjGraphError):
    """A precondition of a graph operation was violated."""


class InvalidCapacityError(GraphContractError, ValueError):
    """Raised when a graph is created with a non-positive capacity."""

    def __init__(self, capacity: object) -> None:
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class CapacityExceededError(GraphContractError):
    """Raised when a vertex is added to a full graph."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"graph is full ({capacity} vertices)")
        self.capacity = capacity


class EmptyGraphError(GraphContractError):
    """Raised when an edge is added before any vertex exists."""


class CursorError(GraphContractError):
    """Raised when the traversal cursor is read or advanced past the end."""


class InvalidPositionError(GraphContractError, IndexError):
    """Raised for a vertex position outside [0, count)."""

    def __init__(self, position: int, count: int) -> None:
        super().__init__(f"position {position} out of range [0, {count})")
        self.position = position
        self.count = count


class VertexNotFoundError(GraphContractError, LookupError):
    """Raised when a vertex does not belong to the graph it is looked up in."""


class GraphDestroyedError(GraphContractError):
    """Raised when a graph is used after destroy()."""


class InvalidKindError(GraphContractError, ValueError):
    """Raised when a graph is created with an unknown kind."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"kind must be a GraphKind, got {kind!r}")
        self.kind = kind
