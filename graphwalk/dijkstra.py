"""Shortest-path engine: Dijkstra walk and path reconstruction."""

from __future__ import annotations

import math
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphwalk.errors import DestinationNotFound, EdgeNotFound, NoPathExists, VertexNotFound
from graphwalk.logger import logger
from graphwalk.model import Color, Vertex
from graphwalk.pqueue import PriorityQueue
from graphwalk.visitor import Signal, dispatch

if TYPE_CHECKING:
    from graphwalk.graph import Graph
    from graphwalk.visitor import Visitor


def _initialize(graph: Graph, source: Hashable) -> None:
    """Reset run state, with every tentative distance at infinity but the source."""
    src = graph.get_vertex(source)
    if src is None:
        raise VertexNotFound(source)

    graph.reset_attributes()
    for v in graph.vertices():
        v.distance = math.inf
    src.distance = 0.0


def _relax(graph: Graph, from_v: Vertex, to_v: Vertex) -> bool:
    """Try to improve the distance of *to_v* via *from_v*. Returns True on change."""
    edge = graph.get_edge(from_v.value, to_v.value)
    if edge is None:
        raise EdgeNotFound(from_v.value, to_v.value)

    alt = from_v.distance + edge.weight
    if alt < to_v.distance:
        to_v.distance = alt
        to_v.parent = from_v.value
        return True
    return False


def walk_dijkstra(graph: Graph, source: Hashable, visitor: Visitor) -> None:
    """Walk the graph in order of increasing distance from *source*.

    Each vertex is visited once its distance is final, after the edges
    leaving it have been relaxed. Vertices unreachable from *source* come
    last, with an infinite distance. Edge weights must be non-negative.
    """
    _initialize(graph, source)
    logger.debug("Dijkstra walk from %r", source)

    queue = PriorityQueue()
    for v in graph.vertices():
        queue.put(v.value, v.distance)

    while not queue.is_empty():
        key, _ = queue.get()
        v = graph.get_vertex(key)
        v.color = Color.GRAY

        for u in graph.neighbour_vertices(key):
            if _relax(graph, v, u) and u.value in queue:
                queue.update(u.value, u.distance)

        if dispatch(visitor, v):
            logger.debug("Dijkstra walk stopped at %r", key)
            return

        v.color = Color.BLACK


def shortest_path(graph: Graph, source: Hashable, dest: Hashable) -> list[Vertex]:
    """Run Dijkstra until *dest* is settled and return the path, source first."""
    if not graph.vertex_exists(source):
        raise VertexNotFound(source)
    if not graph.vertex_exists(dest):
        raise DestinationNotFound(source, dest)

    def _stop_at_dest(v: Vertex) -> Signal:
        return Signal.STOP if v.value == dest else Signal.CONTINUE

    walk_dijkstra(graph, source, _stop_at_dest)

    path: list[Vertex] = []
    v = graph.get_vertex(dest)
    while True:
        path.append(v)
        if v.value == source:
            break
        parent = graph.parent_of(v)
        if parent is None:
            logger.debug("No path from %r to %r", source, dest)
            raise NoPathExists(source, dest)
        v = parent

    path.reverse()
    return path


def walk_shortest_path(
    graph: Graph, source: Hashable, dest: Hashable, visitor: Visitor
) -> None:
    """Visit the vertices of the shortest path from *source* to *dest*, in order."""
    for v in shortest_path(graph, source, dest):
        if dispatch(visitor, v):
            return
