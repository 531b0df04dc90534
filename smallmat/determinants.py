# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinants, minors and cofactors
"""

import logging

import numpy as np

from .errors import NotSquareError, OutOfBoundsError
from .matrix import Matrix
from .utils import LAPLACE_WARN_SIZE

logger = logging.getLogger(__name__)


def submatrix(A: Matrix, row: int, column: int) -> Matrix:
    """
    Return A without the given row and column.

    The remaining rows and columns keep their relative order; A itself
    is never modified.
    """
    if not 0 <= row < A.rows:
        raise OutOfBoundsError(f"Row {row} is out of bounds for {A.rows} rows")
    if not 0 <= column < A.columns:
        raise OutOfBoundsError(
            f"Column {column} is out of bounds for {A.columns} columns"
        )
    M = A.to_array()
    sub = M[np.arange(A.rows) != row][:, np.arange(A.columns) != column]
    return Matrix(A.rows - 1, A.columns - 1, sub.ravel())


def main_diagonal_product(A: Matrix, column: int):
    """
    Product of the diagonal that starts at (0, column) and runs down
    and to the right, wrapping around to column 0 at the right edge.
    """
    if not 0 <= column < A.columns:
        raise OutOfBoundsError(
            f"Column {column} is out of bounds for {A.columns} columns"
        )
    A = A.exact()
    prod = A.one()
    for i in range(A.rows):
        prod = prod * A.get(i, (column + i) % A.columns)
    return prod


def side_diagonal_product(A: Matrix, column: int):
    """
    Product of the diagonal that starts at (rows - 1, column) and runs up
    and to the right, wrapping around to column 0 at the right edge.
    """
    if not 0 <= column < A.columns:
        raise OutOfBoundsError(
            f"Column {column} is out of bounds for {A.columns} columns"
        )
    A = A.exact()
    prod = A.one()
    for step, i in enumerate(reversed(range(A.rows))):
        prod = prod * A.get(i, (column + step) % A.columns)
    return prod


def det(A: Matrix):
    """
    Determinant of a square matrix.

    2x2 and 3x3 use the diagonal rules (the 3x3 case is Sarrus's rule),
    larger matrices are expanded recursively along their last column.
    The expansion is O(n!) so this is meant for small matrices. Integer
    matrices are expanded in Python ints, the result never overflows.
    """
    if not A.is_square:
        raise NotSquareError(
            f"The determinant is undefined for a {A.rows}x{A.columns} matrix"
        )
    n = A.rows
    if n >= LAPLACE_WARN_SIZE:
        logger.warning("det(): Laplace expansion of a %dx%d matrix is O(n!)", n, n)
    return _det(A.exact())


def _det(A: Matrix):
    n = A.rows
    if n == 0:
        return A.one()
    if n == 1:
        return A.get(0, 0)
    if n == 2:
        return main_diagonal_product(A, 0) - side_diagonal_product(A, 0)
    if n == 3:
        main = A.zero()
        side = A.zero()
        for k in range(n):
            main = main + main_diagonal_product(A, k)
            side = side + side_diagonal_product(A, k)
        return main - side

    last = n - 1
    total = A.zero()
    for i in range(n):
        entry = A.get(i, last)
        if entry == 0:
            continue
        total = total + entry * ((-1) ** (i + last)) * _det(submatrix(A, i, last))
    return total


def minor(A: Matrix, row: int, column: int):
    """Determinant of A with the given row and column removed."""
    return det(submatrix(A, row, column))


def cofactor(A: Matrix, row: int, column: int):
    return ((-1) ** (row + column)) * minor(A, row, column)
