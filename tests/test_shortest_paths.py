import copy
import math

import pytest

from dsakit.shortest_paths import dijkstra, floyd_warshall, floyd_warshall_steps, path_to

EDGES = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 5)]


def _zero_matrix(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for u, v, w in edges:
        matrix[u][v] = w
        matrix[v][u] = w
    return matrix


def _inf_matrix(size, edges):
    matrix = [[0 if i == j else math.inf for j in range(size)] for i in range(size)]
    for u, v, w in edges:
        matrix[u][v] = w
        matrix[v][u] = w
    return matrix


def test_dijkstra_worked_example():
    distances, predecessors = dijkstra(_zero_matrix(4, EDGES), 0)
    assert distances == [0, 3, 1, 8]
    assert path_to(predecessors, 0, 1) == [0, 2, 1]


def test_paths_cost_their_distance():
    costs = _zero_matrix(4, EDGES)
    distances, predecessors = dijkstra(costs, 0)
    for target in range(4):
        path = path_to(predecessors, 0, target)
        assert path[0] == 0
        assert path[-1] == target
        assert sum(costs[a][b] for a, b in zip(path, path[1:])) == distances[target]


def test_distances_satisfy_triangle_inequality():
    for source in range(4):
        distances, _ = dijkstra(_zero_matrix(4, EDGES), source)
        for u, v, w in EDGES:
            assert distances[v] <= distances[u] + w
            assert distances[u] <= distances[v] + w


def test_source_is_its_own_path():
    distances, predecessors = dijkstra(_zero_matrix(4, EDGES), 2)
    assert distances[2] == 0
    assert predecessors[2] is None
    assert path_to(predecessors, 2, 2) == [2]


def test_unreachable_vertex():
    distances, predecessors = dijkstra(_zero_matrix(3, [(0, 1, 7)]), 0)
    assert distances[2] == math.inf
    assert predecessors[2] is None
    with pytest.raises(ValueError):
        path_to(predecessors, 0, 2)


def test_dijkstra_rejects_bad_input():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)
    with pytest.raises(IndexError):
        dijkstra(_zero_matrix(3, EDGES[:1]), 3)


def test_floyd_warshall_agrees_with_dijkstra():
    result = floyd_warshall(_inf_matrix(4, EDGES))
    for source in range(4):
        assert result[source] == dijkstra(_zero_matrix(4, EDGES), source)[0]


def test_floyd_warshall_steps():
    matrix = _inf_matrix(4, EDGES)
    original = copy.deepcopy(matrix)
    steps = list(floyd_warshall_steps(matrix))
    assert len(steps) == 4
    assert steps[-1] == floyd_warshall(matrix)
    assert matrix == original
    for before, after in zip([original] + steps, steps):
        for row_before, row_after in zip(before, after):
            assert all(a <= b for a, b in zip(row_after, row_before))


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1, 2], [1, 0, 3]])