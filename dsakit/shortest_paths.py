"""Single-source shortest paths (Dijkstra) and all-pairs shortest paths (Floyd-Warshall)."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Any


def _square(matrix: Sequence[Sequence[Any]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def dijkstra(
    costs: Sequence[Sequence[float]], source: int
) -> tuple[list[float], list[int | None]]:
    """Return ``(distances, predecessors)`` of shortest paths from ``source``.

    ``costs[u][v]`` is the cost of the edge from ``u`` to ``v``; a zero entry
    means there is no edge. Unreachable vertices have distance ``math.inf``
    and predecessor None, as does the source itself.
    """
    size = _square(costs)
    if not 0 <= source < size:
        raise IndexError(f"source vertex {source} out of range")

    def weight(cost: float) -> float:
        return math.inf if cost == 0 else cost

    distances = [weight(cost) for cost in costs[source]]
    predecessors: list[int | None] = [
        source if distance < math.inf else None for distance in distances
    ]
    distances[source] = 0
    predecessors[source] = None
    visited = [False] * size
    visited[source] = True

    while True:
        candidates = [
            vertex
            for vertex, seen in enumerate(visited)
            if not seen and distances[vertex] < math.inf
        ]
        if not candidates:
            break
        current = min(candidates, key=distances.__getitem__)
        visited[current] = True
        for vertex, cost in enumerate(costs[current]):
            candidate = distances[current] + weight(cost)
            if candidate < distances[vertex]:
                distances[vertex] = candidate
                predecessors[vertex] = current
    return distances, predecessors


def path_to(predecessors: Sequence[int | None], source: int, target: int) -> list[int]:
    """Follow ``predecessors`` back from ``target`` and return the path from ``source``."""
    path = [target]
    while path[-1] != source:
        previous = predecessors[path[-1]]
        if previous is None:
            raise ValueError(f"vertex {target} is not reachable from {source}")
        path.append(previous)
        if len(path) > len(predecessors):
            raise ValueError("predecessor links form a cycle")
    path.reverse()
    return path


def floyd_warshall_steps(matrix: Sequence[Sequence[float]]) -> Iterator[list[list[float]]]:
    """Yield the distance matrix after each intermediate vertex has been considered.

    Entries are taken as given; use ``math.inf`` for a missing edge.
    """
    size = _square(matrix)
    distances = [list(row) for row in matrix]
    for via in range(size):
        through = distances[via]
        for row in distances:
            to_via = row[via]
            for target, onward in enumerate(through):
                if to_via + onward < row[target]:
                    row[target] = to_via + onward
        yield [list(row) for row in distances]


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    _square(matrix)
    result = [list(row) for row in matrix]
    for step in floyd_warshall_steps(matrix):
        result = step
    return result