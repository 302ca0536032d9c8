"""Graph store: vertices, edges, adjacency index and degree bookkeeping."""

from __future__ import annotations

from collections.abc import Hashable

from graphwalk.model import Edge, GraphKind, Vertex
from graphwalk.visitor import Collector

_EdgeKey = tuple[Hashable, Hashable] | frozenset[Hashable]


class Graph:
    """A directed or undirected graph keyed by hashable vertex values.

    Undirected edges are stored once per vertex pair; ``(u, v)`` and
    ``(v, u)`` name the same edge. Duplicate insertions and deletions of
    absent vertices or edges are no-ops.

    The ``color``, ``distance`` and ``parent`` fields of each vertex are
    scratch state owned by whichever walk ran last. Two walks must not run
    against the same instance at once; clone the graph per concurrent run.
    """

    def __init__(self, kind: GraphKind = GraphKind.UNDIRECTED) -> None:
        self._kind = GraphKind(kind)
        self._vertices: dict[Hashable, Vertex] = {}
        self._edges: dict[_EdgeKey, Edge] = {}
        self._adjacency: dict[Hashable, list[Hashable]] = {}
        self._next_vertex_id = 1
        self._next_edge_id = 1

    @property
    def kind(self) -> GraphKind:
        return self._kind

    @property
    def directed(self) -> bool:
        return self._kind == GraphKind.DIRECTED

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __repr__(self) -> str:
        return (
            f"Graph(kind={self._kind.value}, vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, key: Hashable) -> Vertex:
        """Add a vertex, or return the existing one for *key*."""
        existing = self._vertices.get(key)
        if existing is not None:
            return existing
        if key is None:
            raise ValueError("None cannot be used as a vertex key")

        vertex = Vertex(value=key, id=self._next_vertex_id)
        self._next_vertex_id += 1
        self._vertices[key] = vertex
        self._adjacency[key] = []
        return vertex

    def get_vertex(self, key: Hashable) -> Vertex | None:
        return self._vertices.get(key)

    def vertex_exists(self, key: Hashable) -> bool:
        return key in self._vertices

    def vertices(self) -> list[Vertex]:
        """All vertices, in insertion order."""
        return list(self._vertices.values())

    def vertex_values(self) -> list[Hashable]:
        return list(self._vertices)

    def delete_vertex(self, key: Hashable) -> None:
        """Delete a vertex together with every edge touching it."""
        if key not in self._vertices:
            return

        incident = [e for e in self._edges.values() if key in (e.from_id, e.to_id)]
        for e in incident:
            self.delete_edge(e.from_id, e.to_id)

        del self._vertices[key]
        del self._adjacency[key]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def _edge_key(self, from_id: Hashable, to_id: Hashable) -> _EdgeKey:
        if self.directed:
            return (from_id, to_id)
        return frozenset((from_id, to_id))

    def add_edge(self, from_id: Hashable, to_id: Hashable) -> Edge:
        """Connect *from_id* and *to_id*, creating missing endpoints.

        Adding an edge which already exists returns it unchanged.
        """
        if from_id is None or to_id is None:
            raise ValueError("None cannot be used as a vertex key")

        key = self._edge_key(from_id, to_id)
        existing = self._edges.get(key)
        if existing is not None:
            return existing

        from_v = self.add_vertex(from_id)
        to_v = self.add_vertex(to_id)

        edge = Edge(from_id=from_id, to_id=to_id, id=self._next_edge_id)
        self._next_edge_id += 1
        self._edges[key] = edge

        self._adjacency[from_id].append(to_id)
        from_v.degree.out += 1
        to_v.degree.in_ += 1
        # A self-loop is listed and counted once, whatever the kind.
        if not self.directed and from_id != to_id:
            self._adjacency[to_id].append(from_id)
            to_v.degree.out += 1
            from_v.degree.in_ += 1

        return edge

    def add_weighted_edge(self, from_id: Hashable, to_id: Hashable, weight: float) -> Edge:
        """Add an edge carrying *weight*.

        An existing edge keeps its original weight.
        """
        if self.edge_exists(from_id, to_id):
            return self._edges[self._edge_key(from_id, to_id)]
        edge = self.add_edge(from_id, to_id)
        edge.weight = float(weight)
        return edge

    def get_edge(self, from_id: Hashable, to_id: Hashable) -> Edge | None:
        return self._edges.get(self._edge_key(from_id, to_id))

    def edge_exists(self, from_id: Hashable, to_id: Hashable) -> bool:
        return self._edge_key(from_id, to_id) in self._edges

    def edges(self) -> list[Edge]:
        """All edges, in insertion order."""
        return list(self._edges.values())

    def delete_edge(self, from_id: Hashable, to_id: Hashable) -> None:
        """Delete an edge, reversing exactly what ``add_edge`` did."""
        key = self._edge_key(from_id, to_id)
        edge = self._edges.pop(key, None)
        if edge is None:
            return

        # Undo relative to the stored orientation, not the caller's.
        src, dst = edge.from_id, edge.to_id
        src_v = self._vertices[src]
        dst_v = self._vertices[dst]

        self._adjacency[src].remove(dst)
        src_v.degree.out -= 1
        dst_v.degree.in_ -= 1
        if not self.directed and src != dst:
            self._adjacency[dst].remove(src)
            dst_v.degree.out -= 1
            src_v.degree.in_ -= 1

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def neighbours(self, key: Hashable) -> list[Hashable]:
        """Keys adjacent to *key*, in edge insertion order."""
        return list(self._adjacency.get(key, ()))

    def neighbour_vertices(self, key: Hashable) -> list[Vertex]:
        return [self._vertices[k] for k in self._adjacency.get(key, ())]

    def parent_of(self, vertex: Vertex) -> Vertex | None:
        """Resolve the parent link of *vertex* through this graph."""
        if vertex.parent is None:
            return None
        return self._vertices.get(vertex.parent)

    # ------------------------------------------------------------------
    # Run state and copies
    # ------------------------------------------------------------------

    def reset_attributes(self) -> None:
        """Reset color, distance and parent on every vertex."""
        for v in self._vertices.values():
            v.reset()

    def new_collector(self) -> Collector:
        return Collector()

    def clone(self) -> Graph:
        """Return an independent deep copy of the graph.

        Parent links are keys, so in the copy they resolve to the copy's
        own vertices.
        """
        g = Graph(self._kind)
        # Keys are shared, everything else is copied.
        g._vertices = {
            k: v.model_copy(update={"value": v.value, "parent": v.parent}, deep=True)
            for k, v in self._vertices.items()
        }
        g._edges = {
            k: e.model_copy(update={"from_id": e.from_id, "to_id": e.to_id}, deep=True)
            for k, e in self._edges.items()
        }
        g._adjacency = {k: list(adj) for k, adj in self._adjacency.items()}
        g._next_vertex_id = self._next_vertex_id
        g._next_edge_id = self._next_edge_id
        return g
