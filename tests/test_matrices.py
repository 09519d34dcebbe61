import pytest

from classicprogs.matrices import (
    add,
    binomial,
    format_pascal,
    is_magic_square,
    multiply,
    pascal_triangle,
    transpose,
)

A = [[1, 2], [3, 4]]
B = [[5, 6], [7, 8]]
MAGIC = [[2, 7, 6], [9, 5, 1], [4, 3, 8]]


def test_add_worked_example():
    assert add(A, B) == [[6, 8], [10, 12]]


def test_add_is_commutative():
    assert add(A, B) == add(B, A)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add(A, [[1, 2, 3], [4, 5, 6]])


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        add([[1, 2], [3]], [[1, 2], [3]])


def test_multiply_worked_example():
    assert multiply(A, B) == [[19, 22], [43, 50]]


def test_multiply_by_identity():
    identity = [[1, 0], [0, 1]]
    assert multiply(A, identity) == A
    assert multiply(identity, B) == B


def test_multiply_incompatible():
    with pytest.raises(ValueError, match="not possible"):
        multiply([[1, 2, 3]], [[1, 2, 3]])


def test_multiply_rectangular_shape():
    result = multiply([[1, 2, 3], [4, 5, 6]], [[1], [2], [3]])
    assert len(result) == 2
    assert all(len(row) == 1 for row in result)


def test_transpose_worked_example():
    assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_transpose_twice_is_identity():
    m = [[1, 2, 3], [4, 5, 6]]
    assert transpose(transpose(m)) == m


def test_transpose_of_product():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_magic_square_example():
    assert is_magic_square(MAGIC) is True


def test_not_magic_after_swap():
    broken = [[2, 7, 6], [9, 5, 1], [4, 8, 3]]
    assert is_magic_square(broken) is False


def test_magic_square_requires_square():
    with pytest.raises(ValueError):
        is_magic_square([[1, 2, 3], [4, 5, 6]])


def test_pascal_triangle_five_rows():
    assert pascal_triangle(5) == [
        [1],
        [1, 1],
        [1, 2, 1],
        [1, 3, 3, 1],
        [1, 4, 6, 4, 1],
    ]


def test_pascal_rows_are_symmetric():
    for row in pascal_triangle(8):
        assert row == row[::-1]


def test_binomial_symmetry():
    for n in range(8):
        for k in range(n + 1):
            assert binomial(n, k) == binomial(n, n - k)


def test_binomial_out_of_range():
    with pytest.raises(ValueError):
        binomial(3, 4)


def test_format_pascal_layout():
    lines = format_pascal(5).splitlines()
    assert [line.strip() for line in lines] == [
        "1",
        "1   1",
        "1   2   1",
        "1   3   3   1",
        "1   4   6   4   1",
    ]
    assert lines[0] == " " * 8 + "   1"
    assert lines[-1] == "   1   4   6   4   1"


def test_format_pascal_empty():
    assert format_pascal(0) == ""