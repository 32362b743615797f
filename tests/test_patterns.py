import pytest

from algokit.patterns import butterfly, n_queens


def test_butterfly_one():
    assert butterfly(1) == ["* * ", "* * "]


@pytest.mark.parametrize("n", [2, 3, 5])
def test_butterfly_shape(n):
    lines = butterfly(n)
    assert len(lines) == 2 * n
    assert lines == lines[::-1]
    assert all(len(line) == 4 * n for line in lines)
    assert [line.count("*") for line in lines[:n]] == [2 * k for k in range(1, n + 1)]


def test_butterfly_middle_row_is_full():
    assert butterfly(3)[2] == "* " * 6


def test_n_queens_four():
    assert n_queens(4) == [(0, 1), (1, 3), (2, 0), (3, 2)]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_no_solution(n):
    assert n_queens(n) is None


@pytest.mark.parametrize("n", [5, 6, 8])
def test_n_queens_valid(n):
    placement = n_queens(n)
    assert [row for row, _ in placement] == list(range(n))
    columns = [column for _, column in placement]
    assert sorted(columns) == list(range(n))
    assert len({row - column for row, column in placement}) == n
    assert len({row + column for row, column in placement}) == n


def test_n_queens_zero():
    assert n_queens(0) is None