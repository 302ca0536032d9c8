"""Reachability walks: BFS, pre/post-order DFS and unreachable vertices."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphwalk.errors import VertexNotFound
from graphwalk.logger import logger
from graphwalk.model import Color, Vertex
from graphwalk.visitor import dispatch, noop

if TYPE_CHECKING:
    from graphwalk.graph import Graph
    from graphwalk.visitor import Visitor


def _start(graph: Graph, source: Hashable, name: str) -> Vertex:
    """Check the source, reset run state and paint the source gray."""
    src = graph.get_vertex(source)
    if src is None:
        raise VertexNotFound(source)

    logger.debug("%s walk from %r", name, source)
    graph.reset_attributes()
    src.color = Color.GRAY
    return src


def _discover(vertex: Vertex, parent: Vertex) -> None:
    vertex.color = Color.GRAY
    vertex.distance = parent.distance + 1
    vertex.parent = parent.value


def walk_bfs(graph: Graph, source: Hashable, visitor: Visitor) -> None:
    """Breadth-first walk from *source*, visiting vertices in level order."""
    src = _start(graph, source, "BFS")
    queue: deque[Vertex] = deque([src])

    while queue:
        v = queue.popleft()
        for u in graph.neighbour_vertices(v.value):
            if u.color == Color.WHITE:
                _discover(u, v)
                queue.append(u)

        if dispatch(visitor, v):
            logger.debug("BFS walk stopped at %r", v.value)
            return

        v.color = Color.BLACK


def walk_preorder_dfs(graph: Graph, source: Hashable, visitor: Visitor) -> None:
    """Depth-first walk from *source*, visiting a vertex before its descendants."""
    src = _start(graph, source, "Pre-order DFS")
    stack: deque[Vertex] = deque([src])

    while stack:
        v = stack.popleft()
        for u in graph.neighbour_vertices(v.value):
            if u.color == Color.WHITE:
                _discover(u, v)
                stack.appendleft(u)

        if dispatch(visitor, v):
            logger.debug("Pre-order DFS walk stopped at %r", v.value)
            return

        v.color = Color.BLACK


def walk_postorder_dfs(graph: Graph, source: Hashable, visitor: Visitor) -> None:
    """Depth-first walk from *source*, visiting a vertex after its descendants.

    The top of the stack is only popped once none of its neighbours is
    white; otherwise the white neighbours are pushed on top of it and it is
    looked at again later.
    """
    src = _start(graph, source, "Post-order DFS")
    stack: deque[Vertex] = deque([src])

    while stack:
        v = stack[0]

        ready = True
        for u in graph.neighbour_vertices(v.value):
            if u.color == Color.WHITE:
                ready = False
                _discover(u, v)
                stack.appendleft(u)

        if not ready:
            continue

        stack.popleft()
        if dispatch(visitor, v):
            logger.debug("Post-order DFS walk stopped at %r", v.value)
            return

        v.color = Color.BLACK


def walk_unreachable(graph: Graph, source: Hashable, visitor: Visitor) -> None:
    """Visit every vertex which cannot be reached from *source*.

    Vertices are yielded in insertion order.
    """
    walk_preorder_dfs(graph, source, noop)

    for v in graph.vertices():
        if v.color != Color.WHITE:
            continue
        if dispatch(visitor, v):
            logger.debug("Unreachable walk stopped at %r", v.value)
            return
