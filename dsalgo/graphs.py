"""Graph traversal over adjacency matrices and single-source shortest paths."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["NoPathError", "WeightedGraph", "breadth_first", "depth_first"]


def _prepare(
    labels: Iterable[Any], matrix: Iterable[Sequence[Any]], start: Any
) -> tuple[list[Any], list[list[Any]], int]:
    names = list(labels)
    rows = [list(row) for row in matrix]
    if len(rows) != len(names) or any(len(row) != len(names) for row in rows):
        raise ValueError("adjacency matrix must be square with one row per label")
    try:
        origin = names.index(start)
    except ValueError:
        raise ValueError(f"unknown start vertex {start!r}") from None
    return names, rows, origin


def breadth_first(
    labels: Iterable[Any], matrix: Iterable[Sequence[Any]], start: Any
) -> list[Any]:
    """Return the labels reached from ``start`` in breadth-first order.

    A non-zero matrix cell marks an edge; neighbours are taken in label order.
    Vertices that cannot be reached are left out.
    """
    names, rows, origin = _prepare(labels, matrix, start)
    visited = {origin}
    order = [origin]
    queue = deque([origin])
    while queue:
        vertex = queue.popleft()
        for neighbour, cell in enumerate(rows[vertex]):
            if cell and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return [names[i] for i in order]


def depth_first(
    labels: Iterable[Any], matrix: Iterable[Sequence[Any]], start: Any
) -> list[Any]:
    """Return the labels reached from ``start`` in depth-first order.

    A non-zero matrix cell marks an edge; neighbours are taken in label order.
    Vertices that cannot be reached are left out.
    """
    names, rows, origin = _prepare(labels, matrix, start)
    visited = {origin}
    order = [origin]
    stack = [iter(enumerate(rows[origin]))]
    while stack:
        for neighbour, cell in stack[-1]:
            if cell and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(enumerate(rows[neighbour])))
                break
        else:
            stack.pop()
    return [names[i] for i in order]


class NoPathError(LookupError):
    """Raised when the destination cannot be reached from the source."""


class WeightedGraph:
    """A directed graph on vertices ``0 .. vertex_count - 1`` with non-negative weights.

    A weight of zero means no edge, so adding one removes the edge.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 1:
            raise ValueError(f"vertex_count must be positive, got {vertex_count}")
        self.vertex_count = vertex_count
        self._edges: dict[int, dict[int, int]] = {}

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Set the weight of the edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")
        if weight == 0:
            self._edges.get(u, {}).pop(v, None)
        else:
            self._edges.setdefault(u, {})[v] = weight

    def shortest_paths(self, source: int) -> tuple[dict[int, int], dict[int, int]]:
        """Run Dijkstra's algorithm from ``source``.

        Returns the distance to every reachable vertex and the predecessor of
        every reachable vertex other than ``source``. Among vertices at equal
        distance the lowest-numbered one is settled first.
        """
        self._check(source)
        distances = {source: 0}
        predecessors: dict[int, int] = {}
        settled: set[int] = set()
        heap = [(0, source)]
        while heap:
            distance, vertex = heapq.heappop(heap)
            if vertex in settled:
                continue
            settled.add(vertex)
            for neighbour, weight in sorted(self._edges.get(vertex, {}).items()):
                if neighbour == vertex or neighbour in settled:
                    continue
                candidate = distance + weight
                best = distances.get(neighbour)
                if best is None or candidate < best:
                    distances[neighbour] = candidate
                    predecessors[neighbour] = vertex
                    heapq.heappush(heap, (candidate, neighbour))
        return distances, predecessors

    def path(self, source: int, destination: int) -> list[int]:
        """Return the vertices of a shortest path from ``source`` to ``destination``."""
        self._check(destination)
        distances, predecessors = self.shortest_paths(source)
        if destination not in distances:
            raise NoPathError(f"no path from {source} to {destination}")
        route = [destination]
        while route[-1] != source:
            route.append(predecessors[route[-1]])
        route.reverse()
        return route