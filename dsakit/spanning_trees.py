"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("cost matrix must be square")
    return size


def kruskal(costs: Sequence[Sequence[float]]) -> tuple[list[tuple[int, int, float]], float]:
    """Return ``(edges, total_cost)`` of a minimum spanning tree.

    A zero entry in ``costs`` means no edge. Edges are ``(u, v, cost)`` in the
    order they join the tree; among equal costs the first in row order wins.
    """
    size = _square(costs)
    candidates = sorted(
        (
            (cost, u, v)
            for u, row in enumerate(costs)
            for v, cost in enumerate(row)
            if cost != 0
        ),
        key=lambda edge: edge[0],
    )
    parent = list(range(size))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    edges: list[tuple[int, int, float]] = []
    total: float = 0
    for cost, u, v in candidates:
        if len(edges) >= size - 1:
            break
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_v] = root_u
            edges.append((u, v, cost))
            total += cost
    if len(edges) < size - 1:
        raise ValueError("graph is not connected")
    return edges, total


def prim(
    costs: Sequence[Sequence[float]], source: int
) -> tuple[list[tuple[int, int, float]], float]:
    """Return ``(edges, total_cost)`` of a minimum spanning tree grown from ``source``.

    Entries are taken as given; use ``math.inf`` for a missing edge. Edges are
    ``(parent, vertex, cost)`` in the order the vertices join the tree.
    """
    size = _square(costs)
    if not 0 <= source < size:
        raise IndexError(f"source vertex {source} out of range")
    best = list(costs[source])
    parent = [source] * size
    visited = [False] * size
    visited[source] = True
    edges: list[tuple[int, int, float]] = []
    total: float = 0
    for _ in range(size - 1):
        remaining = [vertex for vertex, seen in enumerate(visited) if not seen]
        current = min(remaining, key=best.__getitem__)
        if best[current] == math.inf:
            raise ValueError("graph is not connected")
        visited[current] = True
        total += best[current]
        edges.append((parent[current], current, best[current]))
        for vertex, cost in enumerate(costs[current]):
            if not visited[vertex] and cost < best[vertex]:
                best[vertex] = cost
                parent[vertex] = current
    return edges, total