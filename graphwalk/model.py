"""Canonical model: vertices, edges, colors, graph kinds."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Color(StrEnum):
    """Run-scoped discovery state of a vertex."""

    WHITE = "white"  # not seen yet
    GRAY = "gray"  # discovered, still in progress
    BLACK = "black"  # fully explored


class GraphKind(StrEnum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Degree(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    in_: int = Field(default=0, alias="in")
    out: int = 0


class Vertex(BaseModel):
    value: Any
    id: int = 0  # stable export id, assigned by the owning graph
    color: Color = Color.WHITE
    distance: float = 0.0
    parent: Any = None  # key of the parent vertex in the same graph
    degree: Degree = Field(default_factory=Degree)
    attributes: dict[str, str] = Field(default_factory=dict)

    def reset(self) -> None:
        self.color = Color.WHITE
        self.distance = 0.0
        self.parent = None


class Edge(BaseModel):
    from_id: Any
    to_id: Any
    id: int = 0
    weight: float = 0.0
    attributes: dict[str, str] = Field(default_factory=dict)
