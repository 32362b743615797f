"""Printable star patterns and the n-queens placement."""

from __future__ import annotations

from typing import Optional


def butterfly(n: int) -> list[str]:
    """Return the lines of a butterfly of stars with ``n`` rows per wing."""
    def row(stars: int) -> str:
        wing = "* " * stars
        return wing + "  " * (2 * n - 2 * stars) + wing

    upper = [row(stars) for stars in range(1, n + 1)]
    return upper + upper[::-1]


def n_queens(n: int) -> Optional[list[tuple[int, int]]]:
    """Return the first placement of ``n`` non-attacking queens as (row, column) pairs.

    Rows are filled top to bottom, trying columns left to right; None means
    no placement exists.
    """
    if n < 1:
        return None
    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for column in range(n):
            if (
                column in used_columns
                or row - column in used_diagonals
                or row + column in used_antidiagonals
            ):
                continue
            columns.append(column)
            used_columns.add(column)
            used_diagonals.add(row - column)
            used_antidiagonals.add(row + column)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(column)
            used_diagonals.discard(row - column)
            used_antidiagonals.discard(row + column)
        return False

    if not place(0):
        return None
    return list(enumerate(columns))