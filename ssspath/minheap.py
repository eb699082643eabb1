"""Binary min-heap of (vertex, key) pairs with optional operation tracing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


class HeapFullError(Exception):
    """Raised when inserting into a heap that has reached its capacity."""


@dataclass
class _Entry:
    vertex: int
    key: float


class MinHeap:
    """A bounded min-heap keyed by float, holding vertex numbers.

    When an operation is called with ``verbose`` set, a line describing it is
    written to ``trace`` (standard output when ``trace`` is None).
    """

    def __init__(self, size: int, trace: TextIO | None = None) -> None:
        if size < 0:
            raise ValueError("heap size must not be negative")
        self.size = size
        self._trace = trace
        self._items: list[_Entry] = []

    def _emit(self, text: str) -> None:
        stream = self._trace if self._trace is not None else sys.stdout
        stream.write(text)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]

    def _swim(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[parent].key > items[index].key:
                break
            self._swap(parent, index)
            index = parent

    def _sink(self, index: int) -> None:
        items = self._items
        count = len(items)
        while 2 * index + 1 < count:
            child = 2 * index + 1
            if child + 1 < count and items[child].key > items[child + 1].key:
                child += 1
            if not items[index].key > items[child].key:
                break
            self._swap(index, child)
            index = child

    def insert(self, vertex: int, key: float, verbose: bool = False) -> None:
        """Add ``vertex`` with ``key``; raise HeapFullError when at capacity."""
        if len(self._items) >= self.size:
            raise HeapFullError(f"heap of size {self.size} is full")
        if verbose:
            self._emit(f"Insert vertex {vertex}, key={key:12.4f}\n")
        self._items.append(_Entry(vertex, float(key)))
        self._swim(len(self._items) - 1)

    def peek(self) -> int:
        """Return the vertex with the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0].vertex

    def remove_min(self, verbose: bool = False) -> int:
        """Remove and return the vertex with the smallest key."""
        if not self._items:
            raise IndexError("remove from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sink(0)
        if verbose:
            self._emit(f"Delete vertex {top.vertex}, key={top.key:12.4f}\n")
        return top.vertex

    def decrease_key(self, vertex: int, new_key: float, verbose: bool = False) -> bool:
        """Set the key of the first entry for ``vertex``; return whether it was found."""
        for index, entry in enumerate(self._items):
            if entry.vertex == vertex:
                old_key = entry.key
                entry.key = float(new_key)
                self._swim(index)
                if verbose:
                    self._emit(
                        f"Decrease key of vertex {vertex}, "
                        f"from {old_key:12.4f} to {new_key:12.4f}\n"
                    )
                return True
        return False