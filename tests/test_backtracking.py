import pytest

from dsakit.backtracking import hamiltonian_cycle, n_queens, render_board


def _valid(placement):
    for row, column in enumerate(placement):
        for other_row, other in enumerate(placement[:row]):
            if other == column or abs(other - column) == row - other_row:
                return False
    return True


def test_four_queens():
    solutions = list(n_queens(4))
    assert len(solutions) == 2
    assert all(_valid(solution) for solution in solutions)


def test_eight_queens():
    solutions = list(n_queens(8))
    assert len(solutions) == 92
    assert all(_valid(solution) and len(solution) == 8 for solution in solutions)
    assert len(set(solutions)) == len(solutions)
    assert solutions == sorted(solutions)


def test_small_boards():
    assert list(n_queens(1)) == [(0,)]
    assert list(n_queens(2)) == []
    assert list(n_queens(3)) == []


def test_negative_board():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_render_board():
    placement = next(n_queens(6))
    lines = render_board(placement).splitlines()
    assert len(lines) == 6
    for line, column in zip(lines, placement):
        cells = line.split()
        assert len(cells) == 6
        assert cells[column] == "Q"
        assert cells.count("Q") == 1


def test_render_board_rejects_bad_column():
    with pytest.raises(ValueError):
        render_board((0, 3, 1))


def test_hamiltonian_complete_graph():
    complete = [[0 if i == j else 1 for j in range(4)] for i in range(4)]
    assert hamiltonian_cycle(complete) == [0, 1, 2, 3, 0]


def test_hamiltonian_cycle_is_valid():
    order = [0, 3, 1, 4, 2]
    matrix = [[0] * 5 for _ in range(5)]
    for a, b in zip(order, order[1:] + order[:1]):
        matrix[a][b] = matrix[b][a] = 1
    cycle = hamiltonian_cycle(matrix)
    assert cycle[0] == cycle[-1] == 0
    assert sorted(cycle[:-1]) == list(range(5))
    assert all(matrix[a][b] == 1 for a, b in zip(cycle, cycle[1:]))


def test_no_cycle_with_pendant_vertex():
    matrix = [
        [0, 1, 1, 1],
        [1, 0, 1, 0],
        [1, 1, 0, 0],
        [1, 0, 0, 0],
    ]
    assert hamiltonian_cycle(matrix) is None


def test_degenerate_graphs():
    assert hamiltonian_cycle([]) is None
    assert hamiltonian_cycle([[1]]) == [0, 0]
    assert hamiltonian_cycle([[0]]) is None
    with pytest.raises(ValueError):
        hamiltonian_cycle([[0, 1], [1]])