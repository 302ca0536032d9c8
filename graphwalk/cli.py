"""CLI entry point: build a graph from --edge options and walk it."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from graphwalk.config import load_config
from graphwalk.dijkstra import walk_shortest_path
from graphwalk.dot import render_dot
from graphwalk.errors import GraphError
from graphwalk.graph import Graph
from graphwalk.model import GraphKind, Vertex
from graphwalk.toposort import walk_topo_order
from graphwalk.walk import walk_bfs, walk_postorder_dfs, walk_preorder_dfs, walk_unreachable

app = typer.Typer(no_args_is_help=True)

EdgeOpt = Annotated[
    list[str], typer.Option("--edge", help="Edge as FROM:TO or FROM:TO:WEIGHT (repeatable)")
]
DirectedOpt = Annotated[bool, typer.Option("--directed", help="Build a directed graph")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


class DfsOrder(StrEnum):
    PRE = "pre"
    POST = "post"


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """graphwalk: graph traversal toolkit."""


def _setup(verbose: bool) -> None:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


def _parse_edge(value: str) -> tuple[str, str, float | None]:
    parts = value.split(":")
    if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
        typer.echo(f"Error: invalid edge '{value}'. Expected FROM:TO[:WEIGHT].", err=True)
        raise SystemExit(2)
    weight: float | None = None
    if len(parts) == 3:
        try:
            weight = float(parts[2])
        except ValueError:
            typer.echo(f"Error: invalid weight in edge '{value}'.", err=True)
            raise SystemExit(2)  # noqa: B904
        if weight < 0:
            typer.echo(f"Error: negative weight in edge '{value}'.", err=True)
            raise SystemExit(2)
    return parts[0], parts[1], weight


def _build_graph(edges: list[str], directed: bool) -> Graph:
    g = Graph(GraphKind.DIRECTED if directed else GraphKind.UNDIRECTED)
    for raw in edges:
        from_id, to_id, weight = _parse_edge(raw)
        if weight is None:
            g.add_edge(from_id, to_id)
        else:
            g.add_weighted_edge(from_id, to_id, weight)
    return g


def _print_vertex(v: Vertex) -> None:
    typer.echo(f"{v.value}\t{v.distance:g}")


def _fail(e: GraphError) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise SystemExit(2)


@app.command()
def bfs(
    source: Annotated[str, typer.Option("--source", help="Vertex to start from")],
    edge: EdgeOpt,
    directed: DirectedOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Breadth-first walk, printing each vertex and its hop distance."""
    _setup(verbose)
    g = _build_graph(edge, directed)
    try:
        walk_bfs(g, source, _print_vertex)
    except GraphError as e:
        _fail(e)


@app.command()
def dfs(
    source: Annotated[str, typer.Option("--source", help="Vertex to start from")],
    edge: EdgeOpt,
    order: Annotated[DfsOrder, typer.Option("--order", help="Visit order")] = DfsOrder.PRE,
    directed: DirectedOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Depth-first walk in pre- or post-order."""
    _setup(verbose)
    g = _build_graph(edge, directed)
    walk = walk_preorder_dfs if order == DfsOrder.PRE else walk_postorder_dfs
    try:
        walk(g, source, _print_vertex)
    except GraphError as e:
        _fail(e)


@app.command()
def unreachable(
    source: Annotated[str, typer.Option("--source", help="Vertex to start from")],
    edge: EdgeOpt,
    directed: DirectedOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """List the vertices which cannot be reached from the source."""
    _setup(verbose)
    g = _build_graph(edge, directed)
    try:
        walk_unreachable(g, source, lambda v: typer.echo(str(v.value)))
    except GraphError as e:
        _fail(e)


@app.command("shortest-path")
def shortest_path(
    source: Annotated[str, typer.Option("--source", help="Path start")],
    dest: Annotated[str, typer.Option("--dest", help="Path end")],
    edge: EdgeOpt,
    directed: DirectedOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Print the shortest path with cumulative distances."""
    _setup(verbose)
    g = _build_graph(edge, directed)
    try:
        walk_shortest_path(g, source, dest, _print_vertex)
    except GraphError as e:
        _fail(e)


@app.command()
def toposort(
    edge: EdgeOpt,
    verbose: VerboseOpt = False,
) -> None:
    """Print the vertices of a directed graph in topological (finishing) order."""
    _setup(verbose)
    g = _build_graph(edge, directed=True)
    try:
        walk_topo_order(g, lambda v: typer.echo(str(v.value)))
    except GraphError as e:
        _fail(e)


@app.command()
def dot(
    edge: EdgeOpt,
    directed: DirectedOpt = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to graphwalk.yml")
    ] = None,
    out: Annotated[
        Path | None, typer.Option("--out", help="Write to this file instead of stdout")
    ] = None,
    verbose: VerboseOpt = False,
) -> None:
    """Export the graph in Graphviz dot format."""
    _setup(verbose)
    cfg = load_config(config_path)
    g = _build_graph(edge, directed)
    text = render_dot(g, cfg.dot)
    if out is None:
        typer.echo(text, nl=False)
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote graph (DOT): {out.resolve()}")
