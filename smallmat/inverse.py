# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .determinants import cofactor, det
from .errors import InexactDivisionError, NotSquareError, SingularMatrixError
from .matrix import Matrix, narrow_integers

logger = logging.getLogger(__name__)


def _cofactor_transpose(A: Matrix) -> Matrix:
    n = A.rows
    C = Matrix.build_empty(n, n, dtype=A.dtype)
    for i in range(n):
        for k in range(n):
            C.set(k, i, cofactor(A, i, k))
    return C


def adj(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix A.

    The cofactor C[i, k] is written straight to position (k, i), which
    builds the transposed cofactor matrix without a separate transpose.
    Every cofactor is a determinant call, so this is O(n * n * (n-1)!).
    """
    if not A.is_square:
        raise NotSquareError(
            f"The adjugate is undefined for a {A.rows}x{A.columns} matrix"
        )
    C = _cofactor_transpose(A.exact())
    return Matrix(A.rows, A.columns, narrow_integers(C.data, A.dtype))


def inverse(A: Matrix) -> Matrix:
    """
    Inverse of a square matrix by the adjugate method, A^-1 = adj(A) / det(A).

    Integer matrices (integer dtype, or object buffers of Python ints) are
    inverted exactly: the result stays integral when every adjugate entry is
    divisible by the determinant, otherwise an InexactDivisionError is raised
    instead of truncating. Convert to float (or to Fraction entries) to
    invert such matrices.

    Raises
    ------
    NotSquareError      : A is not square
    SingularMatrixError : det(A) == 0
    InexactDivisionError: integer A whose inverse is not integral
    """
    if not A.is_square:
        raise NotSquareError(
            f"The inverse is undefined for a {A.rows}x{A.columns} matrix"
        )
    E = A.exact()
    d = det(E)
    if d == 0:
        raise SingularMatrixError("The matrix is singular (determinant is zero)")

    adjugate = _cofactor_transpose(E)
    if A.is_integral:
        if np.any(adjugate.data % d != 0):
            raise InexactDivisionError(
                f"The inverse of this integer matrix is not integral (det = {d}); "
                "use float or Fraction entries instead"
            )
        data = narrow_integers(adjugate.data // d, A.dtype)
    else:
        data = adjugate.data / d

    logger.debug("inverse(): %dx%d matrix, det = %s", A.rows, A.columns, d)
    return Matrix(A.rows, A.columns, data)
