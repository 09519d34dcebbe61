"""Matrix arithmetic, magic squares and Pascal's triangle."""

from __future__ import annotations

from collections.abc import Sequence

from .numbers import factorial

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("rows must all have the same length")
    return rows, cols


def add(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same number of rows and columns")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product; the column count of ``first`` must equal the row count of ``second``."""
    _, c1 = _shape(first)
    r2, _ = _shape(second)
    if c1 != r2:
        raise ValueError("Matrix multiplication not possible.")
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in first]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rows become columns and columns become rows."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def is_magic_square(matrix: Sequence[Sequence[int]]) -> bool:
    """True when every row, column and both diagonals share the first row's sum."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("a magic square must have as many columns as rows")
    if n == 0:
        return True
    target = sum(matrix[0])
    lines = [
        *matrix,
        *zip(*matrix),
        [matrix[i][i] for i in range(n)],
        [matrix[i][n - 1 - i] for i in range(n)],
    ]
    return all(sum(line) == target for line in lines)


def binomial(n: int, k: int) -> int:
    """The binomial coefficient ``n choose k`` computed from factorials."""
    if not 0 <= k <= n:
        raise ValueError(f"k must lie between 0 and n, got n={n}, k={k}")
    return factorial(n) // (factorial(k) * factorial(n - k))


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    return [[binomial(i, j) for j in range(i + 1)] for i in range(rows)]


def format_pascal(rows: int) -> str:
    """Pascal's triangle centred with two spaces per level and four-wide numbers."""
    lines = (
        "  " * (rows - i - 1) + "".join(f"{value:4d}" for value in row)
        for i, row in enumerate(pascal_triangle(rows))
    )
    return "".join(line + "\n" for line in lines)