"""Minimum priority queue with key updates, backed by ``heapq``."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable
from typing import Any

_REMOVED = object()


class PriorityQueue:
    """Binary min-heap of hashable items.

    ``update`` does not re-heapify in place: the old entry is marked stale
    and a fresh one is pushed, stale entries being skipped by ``get``. Items
    with equal keys come out in the order they were (re)inserted.
    """

    def __init__(self) -> None:
        self._heap: list[list[Any]] = []
        self._entries: dict[Hashable, list[Any]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def put(self, item: Hashable, key: float) -> None:
        """Insert *item* with priority *key*, replacing any previous key."""
        if item in self._entries:
            self._discard(item)
        entry = [key, next(self._counter), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def update(self, item: Hashable, key: float) -> None:
        if item not in self._entries:
            raise KeyError(item)
        self.put(item, key)

    def get(self) -> tuple[Hashable, float]:
        """Remove and return the item with the smallest key.

        Raises IndexError when the queue is empty.
        """
        while self._heap:
            key, _, item = heapq.heappop(self._heap)
            if item is not _REMOVED:
                del self._entries[item]
                return item, key
        raise IndexError("get from an empty priority queue")

    def _discard(self, item: Hashable) -> None:
        entry = self._entries.pop(item)
        entry[-1] = _REMOVED
