"""Topological sort: post-order DFS finishing order with cycle detection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from graphwalk.errors import CycleDetected, NotDirectedGraph
from graphwalk.logger import logger
from graphwalk.model import Color, Vertex
from graphwalk.visitor import dispatch

if TYPE_CHECKING:
    from graphwalk.graph import Graph
    from graphwalk.visitor import Visitor


def _finish_order(graph: Graph, source: Vertex) -> Iterator[Vertex]:
    """Yield the unfinished vertices reachable from *source* as they turn black.

    Only one white neighbour is descended into at a time, so the stack is
    exactly the active path and a gray neighbour always closes a cycle.
    """
    if source.color == Color.BLACK:
        return

    source.color = Color.GRAY
    stack: list[tuple[Vertex, Iterator[Vertex]]] = [
        (source, iter(graph.neighbour_vertices(source.value)))
    ]

    while stack:
        v, pending = stack[-1]
        for u in pending:
            if u.color == Color.GRAY:
                logger.debug("Cycle detected: %r -> %r", v.value, u.value)
                raise CycleDetected(u.value)
            if u.color == Color.WHITE:
                u.color = Color.GRAY
                u.distance = v.distance + 1
                u.parent = v.value
                stack.append((u, iter(graph.neighbour_vertices(u.value))))
                break
        else:
            stack.pop()
            v.color = Color.BLACK
            yield v


def walk_topo_order(graph: Graph, visitor: Visitor) -> None:
    """Visit the vertices of a directed acyclic graph, sinks first.

    Every vertex is visited exactly once, in DFS finishing order, starting
    a new DFS from each vertex not yet finished in insertion order. Raises
    CycleDetected if the graph has a cycle; the vertices on the offending
    path are left gray.
    """
    if not graph.directed:
        raise NotDirectedGraph()

    graph.reset_attributes()
    logger.debug("Topological walk over %d vertices", len(graph))

    for source in graph.vertices():
        # A sub-walk is only handed to the visitor once it is known acyclic.
        finished = list(_finish_order(graph, source))
        for v in finished:
            if dispatch(visitor, v):
                logger.debug("Topological walk stopped at %r", v.value)
                return
