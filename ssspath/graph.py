"""Weighted graph with adjacency lists and a resumable shortest-path search."""

from __future__ import annotations

from collections import deque
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, TextIO, TypeVar

from .minheap import HeapFullError, MinHeap

_T = TypeVar("_T")

# A vertex whose key is this close to zero is treated as not yet reached.
_UNREACHED_EPSILON = 0.01


@dataclass(frozen=True)
class Edge:
    """One entry of an adjacency list."""

    edge_id: int
    destination: int
    weight: float


class Graph:
    """A graph on vertices 1..num_vertices.

    ``find`` runs Dijkstra's algorithm from a source, stopping once the
    destination is extracted; ``describe_path`` reports on the last search.
    """

    def __init__(self, num_vertices: int, directed: bool = True, trace: TextIO | None = None) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.directed = directed
        self.trace = trace
        self._adjacency: list[deque[Edge]] = [deque() for _ in range(num_vertices + 1)]
        self._pi = [-1] * (num_vertices + 1)
        self._key = [0.0] * (num_vertices + 1)
        self._extracted = [0] * (num_vertices + 1)
        self._count = 0
        self._heap: MinHeap | None = None

    def add_edge(self, edge_id: int, source: int, destination: int, weight: float) -> bool:
        """Add an edge; edges touching unknown vertices are ignored and False is returned."""
        if not (self.contains_vertex(source) and self.contains_vertex(destination)):
            return False
        self._adjacency[source].appendleft(Edge(edge_id, destination, float(weight)))
        if not self.directed:
            self._adjacency[destination].appendleft(Edge(edge_id, source, float(weight)))
        return True

    def edge_exists(self, source: int, destination: int) -> bool:
        if not (self.contains_vertex(source) and self.contains_vertex(destination)):
            return False
        return any(edge.destination == destination for edge in self._adjacency[source])

    def contains_vertex(self, vertex: int) -> bool:
        return 1 <= vertex <= self.num_vertices

    def find(self, source: int, destination: int, verbose: bool = False) -> None:
        """Search shortest paths from ``source`` until ``destination`` is extracted."""
        if not self.contains_vertex(source):
            raise ValueError(f"vertex {source} is not in the graph")
        heap = MinHeap(self.num_vertices, self.trace)
        heap.insert(source, 0.0, verbose)
        size = self.num_vertices + 1
        pi = self._pi = [-1] * size
        key = self._key = [0.0] * size
        extracted = self._extracted = [0] * size
        self._heap = heap

        while heap:
            u = heap.remove_min(verbose)
            self._count += 1
            extracted[u] = self._count
            if u == destination:
                break
            for edge in self._adjacency[u]:
                v = edge.destination
                if extracted[v]:
                    continue
                candidate = key[u] + edge.weight
                if abs(key[v]) < _UNREACHED_EPSILON:
                    key[v] = candidate
                    pi[v] = u
                    with suppress(HeapFullError):
                        heap.insert(v, candidate, verbose)
                elif key[v] > candidate:
                    key[v] = candidate
                    pi[v] = u
                    heap.decrease_key(v, candidate, verbose)

    def describe_path(self, source: int, destination: int) -> str:
        """Return the report on the path to ``destination`` from the last search."""
        if not self.contains_vertex(destination):
            raise ValueError(f"vertex {destination} is not in the graph")
        if self._pi[destination] == -1:
            if self._heap is not None and not self._heap:
                return f"No {source}-{destination} path exists.\n"
            return f"No {source}-{destination} path has been computed.\n"

        path = [destination]
        node = self._pi[destination]
        while node != -1:
            path.append(node)
            node = self._pi[node]
        path.reverse()

        if self._extracted[destination]:
            heading = "Shortest Path"
        else:
            heading = "Path not known to be shortest"
        vertices = ", ".join(str(vertex) for vertex in path)
        return (
            f"{heading}: <{vertices}>\n"
            f"The path weight is:{self._key[destination]:12.4f}\n"
        )

    def __str__(self) -> str:
        lines = []
        for vertex in range(1, self.num_vertices + 1):
            neighbours = "".join(f"{edge.destination} " for edge in self._adjacency[vertex])
            lines.append(f"{vertex}: {neighbours}\n")
        return "".join(lines)


def _take(tokens: Iterator[str], convert: Callable[[str], _T], what: str) -> _T:
    try:
        return convert(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError(f"malformed graph file: expected {what}") from exc


def read_graph(path: str | Path, directed: bool = True, trace: TextIO | None = None) -> Graph:
    """Read a graph: ``n m`` followed by ``m`` lines of ``id u v weight``."""
    with open(path, encoding="utf-8") as handle:
        tokens = iter(handle.read().split())
    num_vertices = _take(tokens, int, "vertex count")
    num_edges = _take(tokens, int, "edge count")
    graph = Graph(num_vertices, directed, trace)
    for _ in range(num_edges):
        edge_id = _take(tokens, int, "edge id")
        source = _take(tokens, int, "source vertex")
        destination = _take(tokens, int, "destination vertex")
        weight = _take(tokens, float, "edge weight")
        graph.add_edge(edge_id, source, destination, weight)
    return graph