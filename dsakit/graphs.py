"""Graph representations and traversals over adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class AdjacencyList:
    """Graph over nodes ``0..node_count-1`` with ordered neighbour lists."""

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("node count must not be negative")
        self._neighbours: list[list[int]] = [[] for _ in range(node_count)]

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._neighbours):
            raise IndexError(f"node {node} out of range")

    def add_neighbour(self, node: int, neighbour: int) -> None:
        """Append ``neighbour`` to the neighbour list of ``node``."""
        self._check(node)
        self._neighbours[node].append(neighbour)

    def neighbours(self, node: int) -> list[int]:
        self._check(node)
        return list(self._neighbours[node])

    def __len__(self) -> int:
        return len(self._neighbours)

    def __iter__(self) -> Iterator[tuple[int, list[int]]]:
        """Iterate over ``(node, neighbours)`` pairs."""
        for node, neighbours in enumerate(self._neighbours):
            yield node, list(neighbours)


def vertex_label(index: int) -> str:
    """Letter naming a vertex: 0 is ``A``, 1 is ``B`` and so on."""
    return chr(index + ord("A"))


def _validate(matrix: Sequence[Sequence[int]], start: int) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} out of range")
    return size


def breadth_first_search(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return vertices in breadth-first order; an edge is an entry equal to 1."""
    size = _validate(matrix, start)
    visited = [False] * size
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge == 1 and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def depth_first_search(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return vertices in depth-first order; an edge is any non-zero entry."""
    size = _validate(matrix, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack = [start]
    while stack:
        vertex = stack[-1]
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(neighbour)
                break
        else:
            stack.pop()
    return order


def incidence_matrix(incident_edges: Iterable[Iterable[int]], edge_count: int) -> list[list[int]]:
    """Build a node-by-edge 0/1 matrix from each node's list of incident edges."""
    if edge_count < 0:
        raise ValueError("edge count must not be negative")
    matrix: list[list[int]] = []
    for node, edges in enumerate(incident_edges):
        row = [0] * edge_count
        for edge in edges:
            if not 0 <= edge < edge_count:
                raise IndexError(f"edge {edge} of node {node} out of range")
            row[edge] = 1
        matrix.append(row)
    return matrix