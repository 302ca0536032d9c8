"""Visitor protocol shared by every walk.

A visitor is called once per vertex and answers with one of three outcomes:

* continue: return ``None`` or ``Signal.CONTINUE``
* stop: return ``Signal.STOP``; the walk ends successfully right away
* fail: return ``Fail(error)``, return an exception instance, or raise;
  the error reaches the caller as is

Any other return value is a programming error and raises TypeError.

Neither stop nor fail rolls back run state already written to the graph.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from graphwalk.model import Vertex


class Signal(StrEnum):
    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Fail:
    """Outcome carrying an error to raise from the walk."""

    error: BaseException


Outcome = Signal | Fail | BaseException | None
Visitor = Callable[[Vertex], Outcome]


def dispatch(visitor: Visitor, vertex: Vertex) -> bool:
    """Call *visitor* on *vertex*. Returns True if the walk must stop."""
    outcome = visitor(vertex)
    if isinstance(outcome, Fail):
        raise outcome.error
    if isinstance(outcome, BaseException):
        raise outcome
    if outcome is None or outcome is Signal.CONTINUE:
        return False
    if outcome is Signal.STOP:
        return True
    raise TypeError(f"unsupported visitor outcome {outcome!r}")


def noop(vertex: Vertex) -> None:
    return None


class Collector:
    """Visitor which records every vertex it is called with."""

    def __init__(self) -> None:
        self._items: list[Vertex] = []

    def __call__(self, vertex: Vertex) -> None:
        self._items.append(vertex)

    def get(self) -> list[Vertex]:
        return self._items

    def values(self) -> list[object]:
        return [v.value for v in self._items]

    def reset(self) -> None:
        self._items = []
