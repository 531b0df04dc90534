# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for matrix and linear-system operations.

Every error derives from MatrixError, itself a ValueError, so code that
already guards numpy-style calls with ``except ValueError`` keeps working.
"""


class MatrixError(ValueError):
    """Base class, carries a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DimensionError(MatrixError):
    """Data length does not match rows * columns."""


class OutOfBoundsError(MatrixError, IndexError):
    """A row or column index lies outside the matrix."""


class LengthError(MatrixError):
    """An appended row/column has the wrong number of entries."""


class NotSquareError(MatrixError):
    """The operation is only defined for square matrices."""


class DimensionMismatchError(MatrixError):
    """The operands of a binary operation have incompatible shapes."""


class SingularMatrixError(MatrixError):
    """The matrix has a zero determinant and cannot be inverted."""


class InexactDivisionError(MatrixError):
    """An integer inverse would require truncating division."""


class RankUndefinedError(MatrixError):
    """No square window with a nonzero determinant was found."""


class UnsolvableError(MatrixError):
    """The linear system has no solution or infinitely many."""
