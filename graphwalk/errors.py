"""Graph error taxonomy raised by the store and the walks."""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all graph errors."""


class VertexNotFound(GraphError):
    """Raised when a walk is started from a vertex which is not in the graph."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Vertex {key!r} not found in the graph")
        self.key = key


class NoPathExists(GraphError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source: Any, dest: Any) -> None:
        super().__init__(f"No path exists between {source!r} and {dest!r}")
        self.source = source
        self.dest = dest


class DestinationNotFound(VertexNotFound, NoPathExists):
    """Raised when the destination of a shortest-path walk is not in the graph."""

    def __init__(self, source: Any, dest: Any) -> None:
        GraphError.__init__(
            self, f"Destination vertex {dest!r} not found, no path from {source!r}"
        )
        self.key = dest
        self.source = source
        self.dest = dest


class NotDirectedGraph(GraphError):
    """Raised when a directed-only algorithm is run on an undirected graph."""

    def __init__(self) -> None:
        super().__init__("Graph is not directed")


class CycleDetected(GraphError):
    """Raised when a topological walk meets a vertex still in progress."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Cycle detected at vertex {key!r}")
        self.key = key


class EdgeNotFound(GraphError):
    """Raised when an edge expected by an algorithm is missing."""

    def __init__(self, from_id: Any, to_id: Any) -> None:
        super().__init__(f"No edge exists between {from_id!r} and {to_id!r}")
        self.from_id = from_id
        self.to_id = to_id
