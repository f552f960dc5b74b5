"""Backtracking searches: Hamiltonian cycles and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def hamiltonian_cycle(matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Return a Hamiltonian cycle starting and ending at vertex 0, or None.

    Any non-zero entry is an edge along the path; the edge closing the cycle
    must be exactly 1. Vertices are tried in increasing order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return None
    path = [0]
    used = {0}

    def extend() -> bool:
        if len(path) == size:
            return matrix[path[-1]][path[0]] == 1
        for vertex in range(1, size):
            if vertex not in used and matrix[path[-1]][vertex]:
                path.append(vertex)
                used.add(vertex)
                if extend():
                    return True
                path.pop()
                used.remove(vertex)
        return False

    if not extend():
        return None
    return path + [path[0]]


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    columns: list[int] = []

    def safe(column: int) -> bool:
        row = len(columns)
        return all(
            other != column and abs(other - column) != row - other_row
            for other_row, other in enumerate(columns)
        )

    def place() -> Iterator[tuple[int, ...]]:
        if len(columns) == n:
            yield tuple(columns)
            return
        for column in range(n):
            if safe(column):
                columns.append(column)
                yield from place()
                columns.pop()

    return place()


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each placement gives the queen's column for each row; placements come
    in lexicographic order.
    """
    if n < 0:
        raise ValueError("number of queens must not be negative")
    return _placements(n)


def render_board(placement: Sequence[int]) -> str:
    """Draw a placement as rows of ``Q`` and ``.`` separated by spaces."""
    size = len(placement)
    for column in placement:
        if not 0 <= column < size:
            raise ValueError(f"column {column} outside a board of size {size}")
    return "\n".join(
        " ".join("Q" if cell == column else "." for cell in range(size))
        for column in placement
    )