"""Dynamic programming: 0/1 knapsack and matrix-chain multiplication."""

from __future__ import annotations

from collections.abc import Iterable


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the largest total value of items, each taken whole or not at all."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def matrix_chain_order(dimensions: Iterable[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")
    count = len(dims) - 1
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for first in range(count - length + 1):
            last = first + length - 1
            cost[first][last] = min(
                cost[first][split] + cost[split + 1][last] + dims[first] * dims[split + 1] * dims[last + 1]
                for split in range(first, last)
            )
    return cost[0][count - 1]