"""Graphviz output: strict graph/digraph text from vertex and edge attributes."""

from __future__ import annotations

import io
import re
from typing import TYPE_CHECKING, TextIO

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from graphwalk.graph import Graph

_DOT_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class DotStyle(BaseModel):
    """Default node and edge attributes written at the top of the output."""

    node_attributes: dict[str, str] = Field(
        default_factory=lambda: {
            "color": "lightblue",
            "fillcolor": "lightblue",
            "fontcolor": "black",
            "shape": "record",
            "style": "filled, rounded",
        }
    )
    edge_attributes: dict[str, str] = Field(default_factory=lambda: {"color": "black"})

    @field_validator("node_attributes", "edge_attributes")
    @classmethod
    def validate_attribute_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Attribute names are written unquoted, so each must be a DOT identifier."""
        for name in v:
            if not _DOT_ID.fullmatch(name):
                raise ValueError(f"invalid DOT attribute name {name!r}")
        return v


def _quote(value: str) -> str:
    """Quote *value* as a DOT string. Only backslash and double quote are escaped."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_attributes(items: dict[str, str]) -> str:
    return " ".join(f"{k}={_quote(str(v))}" for k, v in items.items())


def write_dot(graph: Graph, stream: TextIO, style: DotStyle | None = None) -> None:
    """Write *graph* to *stream* in Graphviz dot format.

    Vertices are identified by their ``id`` and labelled with their value
    unless a ``label`` attribute is set.
    """
    style = style or DotStyle()
    if graph.directed:
        header, arrow = "digraph", "->"
    else:
        header, arrow = "graph", "--"

    stream.write(f"strict {header} {{\n")
    stream.write(f"\tnode [{format_attributes(style.node_attributes)}]\n")
    stream.write(f"\tedge [{format_attributes(style.edge_attributes)}]\n")

    for v in graph.vertices():
        attrs = {"label": str(v.value), **v.attributes}
        stream.write(f"\t{v.id} [{format_attributes(attrs)}]\n")

    for e in graph.edges():
        from_v = graph.get_vertex(e.from_id)
        to_v = graph.get_vertex(e.to_id)
        stream.write(f"\t{from_v.id} {arrow} {to_v.id} [{format_attributes(e.attributes)}]\n")

    stream.write("}\n")


def render_dot(graph: Graph, style: DotStyle | None = None) -> str:
    buf = io.StringIO()
    write_dot(graph, buf, style)
    return buf.getvalue()
