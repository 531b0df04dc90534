# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from fractions import Fraction

import numpy as np
import pytest

from smallmat.errors import (
    DimensionError,
    DimensionMismatchError,
    LengthError,
    NotSquareError,
    OutOfBoundsError,
)
from smallmat.matrix import Matrix


def test_build_rejects_wrong_length():
    with pytest.raises(DimensionError):
        Matrix.build(2, 3, [1, 2, 3, 4, 5])


def test_build_rejects_non_numeric():
    with pytest.raises(TypeError):
        Matrix.build(1, 2, ["a", "b"])
    with pytest.raises(TypeError):
        Matrix.build(1, 2, [True, False])


def test_build_empty_is_zero_filled():
    m = Matrix.build_empty(3, 3, dtype=int)
    assert m.data.tolist() == [0] * 9
    assert m.shape == (3, 3)


@pytest.mark.parametrize("r,c", [(1, 1), (2, 3), (4, 2), (5, 5)])
def test_get_matches_row_major_layout(r, c):
    rng = np.random.default_rng(seed=r * 10 + c)
    data = rng.integers(-50, 50, size=r * c).tolist()
    m = Matrix.build(r, c, data)
    for p in range(r):
        for q in range(c):
            assert m.get(p, q) == data[p * c + q]
            assert m[p, q] == data[p * c + q]


def test_get_out_of_bounds():
    m = Matrix.build(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert m.get(1, 2) == 6
    with pytest.raises(OutOfBoundsError):
        m.get(3, 2)
    with pytest.raises(OutOfBoundsError):
        m.get(2, 3)
    with pytest.raises(OutOfBoundsError):
        m.get(-1, 0)
    # still an IndexError for callers that expect one
    with pytest.raises(IndexError):
        m.get(0, 9)


def test_set_elements():
    m = Matrix.build_empty(2, 2, dtype=int)
    m.set(0, 0, 1)
    m.set(0, 1, 2)
    m[1, 0] = 3
    m[1, 1] = 4
    assert m.data.tolist() == [1, 2, 3, 4]
    with pytest.raises(OutOfBoundsError):
        m.set(2, 0, 5)


def test_set_promotes_instead_of_truncating():
    m = Matrix.build(1, 2, [1, 2])
    m.set(0, 1, 2.5)
    assert m.get(0, 1) == 2.5
    assert np.issubdtype(m.dtype, np.floating)


def test_construction_copies_input():
    data = np.array([1, 2, 3, 4])
    m = Matrix.build(2, 2, data)
    data[0] = 100
    assert m.get(0, 0) == 1


def test_rows_and_columns():
    a = Matrix.build(3, 3, [1, 4, -2, 0, 1, 1, -3, 2, 5])
    assert a.get_row(0).tolist() == [1, 4, -2]
    assert a.get_row(1).tolist() == [0, 1, 1]
    assert a.get_row(2).tolist() == [-3, 2, 5]
    with pytest.raises(OutOfBoundsError):
        a.get_row(3)

    b = Matrix.build(3, 3, [3, 0, 1, -2, 1, 5, 2, 3, 8])
    assert b.get_column(0).tolist() == [3, -2, 2]
    assert b.get_column(1).tolist() == [0, 1, 3]
    assert b.get_column(2).tolist() == [1, 5, 8]
    with pytest.raises(OutOfBoundsError):
        b.get_column(3)


def test_row_copy_does_not_alias():
    m = Matrix.build(2, 2, [1, 2, 3, 4])
    row = m.get_row(0)
    row[0] = 99
    assert m.get(0, 0) == 1


def test_append_row():
    m = Matrix.build(2, 2, [1, 2, 3, 4])
    m.append_row([5, 6])
    assert m.rows == 3
    assert m.data.tolist() == [1, 2, 3, 4, 5, 6]
    with pytest.raises(LengthError):
        m.append_row([1, 2, 3])


def test_append_column():
    m = Matrix.build(2, 2, [1, 2, 3, 4])
    m.append_column([5, 6])
    assert m.columns == 3
    assert m.data.tolist() == [1, 2, 5, 3, 4, 6]
    assert m.get_column(2).tolist() == [5, 6]
    with pytest.raises(LengthError):
        m.append_column([1, 2, 3])


def test_append_column_to_empty_columns():
    m = Matrix.build_empty(3, 0, dtype=int)
    m.append_column([1, 2, 3])
    assert m.shape == (3, 1)
    assert m.data.tolist() == [1, 2, 3]


def test_trace():
    m = Matrix.build(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert m.trace() == 15
    with pytest.raises(NotSquareError):
        Matrix.build(2, 3, [1, 2, 3, 4, 5, 6]).trace()


def test_add_and_subtract():
    m1 = Matrix.build(2, 3, [1, 5, -3, 4, 0, 8])
    m2 = Matrix.build(2, 3, [5, 1, 3, -1, 4, 7])
    assert m1.add(m2).data.tolist() == [6, 6, 0, 3, 4, 15]
    assert m1.subtract(m2).data.tolist() == [-4, 4, -6, 5, -4, 1]
    assert m1 + m2 == m1.add(m2)
    assert m1 - m2 == m1.subtract(m2)

    with pytest.raises(DimensionMismatchError):
        m1.add(Matrix.build(3, 2, [1, 2, 3, 4, 5, 6]))
    with pytest.raises(DimensionMismatchError):
        m1.subtract(Matrix.build(2, 2, [1, 2, 3, 4]))


def test_scalar_multiply():
    m = Matrix.build(2, 3, [1, -5, 3, 4, 1, 0])
    assert m.scalar_multiply(4).data.tolist() == [4, -20, 12, 16, 4, 0]
    assert m.scalar_multiply(-3).data.tolist() == [-3, 15, -9, -12, -3, 0]
    assert 4 * m == m * 4


def test_multiply():
    a = Matrix.build(3, 3, [1, 4, -2, 0, 1, 1, -3, 2, 5])
    b = Matrix.build(3, 3, [3, 0, 1, -2, 1, 5, 2, 3, 8])
    assert a.multiply(b).data.tolist() == [-9, -2, 5, 0, 4, 13, -3, 17, 47]
    assert a @ b == a.multiply(b)


def test_multiply_rectangular_matches_numpy():
    rng = np.random.default_rng(3)
    A = rng.standard_normal((4, 2))
    B = rng.standard_normal((2, 5))
    C = Matrix.from_array(A) @ Matrix.from_array(B)
    assert C.shape == (4, 5)
    np.testing.assert_allclose(C.to_array(), A @ B)

    with pytest.raises(DimensionMismatchError):
        Matrix.from_array(A).multiply(Matrix.from_array(A))


def test_fraction_entries_stay_exact():
    m = Matrix.build(2, 2, [Fraction(1, 2), 1, 2, Fraction(1, 3)])
    assert m.dtype == object
    assert m.trace() == Fraction(5, 6)


def test_from_array_requires_2d():
    with pytest.raises(DimensionError):
        Matrix.from_array([1, 2, 3])
    m = Matrix.from_array([[1, 2], [3, 4]])
    assert m.tolist() == [[1, 2], [3, 4]]


def test_copy_is_independent():
    m = Matrix.build(2, 2, [1, 2, 3, 4])
    clone = m.copy()
    clone.set(0, 0, 9)
    clone.append_row([5, 6])
    assert m == Matrix.build(2, 2, [1, 2, 3, 4])
    assert clone != m


def test_object_entries_must_be_real_numbers():
    with pytest.raises(TypeError):
        Matrix.build(1, 2, [None, 1])
    with pytest.raises(TypeError):
        Matrix.build(1, 2, [Fraction(1, 2), "x"])
    m = Matrix.build(1, 2, [Fraction(1, 2), 1])
    with pytest.raises(TypeError):
        m.set(0, 0, None)


def test_integer_arithmetic_does_not_wrap():
    a = Matrix.build(1, 1, [2**62])
    total = a + a
    assert total.get(0, 0) == 2**63
    assert total.dtype == object

    product = Matrix.build(1, 1, [2**40]) @ Matrix.build(1, 1, [2**40])
    assert product.get(0, 0) == 2**80
    assert (a * 4).get(0, 0) == 2**64

    # results that fit keep the integer dtype
    small = Matrix.build(2, 2, [1, 2, 3, 4])
    assert (small @ small).dtype == small.dtype
    assert (small - small).dtype == small.dtype


def test_trace_does_not_wrap():
    m = Matrix.build(2, 2, [2**62, 0, 0, 2**62])
    assert m.trace() == 2**63


def test_is_integral():
    assert Matrix.build(1, 2, [1, 2]).is_integral
    assert Matrix.build(1, 2, [2**70, 1]).is_integral
    assert not Matrix.build(1, 2, [Fraction(1, 2), 1]).is_integral
    assert not Matrix.build(1, 2, [1.0, 2.0]).is_integral
