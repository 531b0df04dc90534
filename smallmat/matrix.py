# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrix store
==================

A ``Matrix`` keeps its entries in a flat, row-major numpy buffer together
with explicit ``rows`` / ``columns`` counts. The dtype of the buffer is the
scalar type of the matrix: integers stay integers, floats stay floats and
``object`` buffers carry exact scalars such as ``fractions.Fraction``.

Writes never truncate: if a value needs a wider dtype than the buffer
(``2.5`` into an integer matrix) the whole buffer is promoted first.
Integer arithmetic is carried out in Python ints and only cast back to the
buffer dtype when every result fits, so fixed-width overflow never wraps.
"""

import logging
import numbers
import operator
from typing import Tuple

import numpy as np

from .errors import (
    DimensionError,
    DimensionMismatchError,
    LengthError,
    NotSquareError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)

# integers, floats and object (Python ints, Fraction, ...)
NUMERIC_KINDS = "iufO"


def _is_real(x) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


def _as_numeric(values) -> np.ndarray:
    arr = np.array(values)
    if arr.dtype.kind == "u":
        # cofactor signs need negative values
        arr = arr.astype(np.int64)
    if arr.dtype.kind not in NUMERIC_KINDS:
        raise TypeError(f"Matrix entries must be real numbers, got dtype {arr.dtype}")
    if arr.dtype.kind == "O":
        for x in arr.ravel():
            if not _is_real(x):
                raise TypeError(f"Matrix entries must be real numbers, got {x!r}")
    return arr


def _is_integer_array(arr: np.ndarray) -> bool:
    return np.issubdtype(arr.dtype, np.integer)


def narrow_integers(data: np.ndarray, dtype) -> np.ndarray:
    """
    Cast an object array of Python ints back to the integer `dtype` when
    every value fits, otherwise keep the exact object array.
    """
    if data.dtype != object or not np.issubdtype(dtype, np.integer):
        return data
    info = np.iinfo(dtype)
    if all(info.min <= x <= info.max for x in data.ravel()):
        return data.astype(dtype)
    logger.debug("integer result exceeds %s, keeping Python ints", np.dtype(dtype))
    return data


def _exact(op, a: np.ndarray, b) -> np.ndarray:
    """Apply op elementwise, in Python ints when both operands are integers."""
    b_arr = np.asarray(b)
    if _is_integer_array(a) and _is_integer_array(b_arr):
        dtype = np.result_type(a, b_arr)
        return narrow_integers(op(a.astype(object), b_arr.astype(object)), dtype)
    return op(a, b)


class Matrix:
    rows: int
    columns: int
    data: np.ndarray

    def __init__(self, rows: int, columns: int, data):
        if rows < 0 or columns < 0:
            raise DimensionError(
                f"Dimensions must be non-negative, got {rows}x{columns}"
            )
        data = _as_numeric(data).ravel()
        if data.size != rows * columns:
            raise DimensionError(
                "Vector is not the same length as the product of rows and columns "
                f"({data.size} != {rows} * {columns})"
            )
        self.rows = rows
        self.columns = columns
        self.data = data

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def build(cls, rows: int, columns: int, data) -> "Matrix":
        return cls(rows, columns, data)

    @classmethod
    def build_empty(cls, rows: int, columns: int, dtype=float) -> "Matrix":
        """Zero-filled rows-by-columns matrix."""
        if rows < 0 or columns < 0:
            raise DimensionError(
                f"Dimensions must be non-negative, got {rows}x{columns}"
            )
        return cls(rows, columns, np.zeros(rows * columns, dtype=dtype))

    @classmethod
    def from_array(cls, A) -> "Matrix":
        """Build from a 2-D array-like (nested lists or an ndarray)."""
        A = _as_numeric(A)
        if A.ndim != 2:
            raise DimensionError(f"Expected a 2-D array, got {A.ndim} dimension(s)")
        m, n = A.shape
        return cls(m, n, A.ravel())

    def copy(self) -> "Matrix":
        return Matrix(self.rows, self.columns, self.data.copy())

    # -----------------------------------------------------------------
    # Views and conversions
    # -----------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    @property
    def is_integral(self) -> bool:
        """True for integer buffers and object buffers holding only integers."""
        if _is_integer_array(self.data):
            return True
        if self.data.dtype == object:
            return all(isinstance(x, numbers.Integral) for x in self.data)
        return False

    def exact(self) -> "Matrix":
        """
        Copy with a Python-int object buffer if the matrix is integer,
        otherwise the matrix itself.
        """
        if _is_integer_array(self.data):
            return Matrix(self.rows, self.columns, self.data.astype(object))
        return self

    def zero(self):
        """Additive identity of the scalar type."""
        return self.data.dtype.type(0)

    def one(self):
        """Multiplicative identity of the scalar type."""
        return self.data.dtype.type(1)

    def to_array(self) -> np.ndarray:
        return self.data.reshape(self.rows, self.columns).copy()

    def tolist(self) -> list:
        return self.to_array().tolist()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rows}, {self.columns}, {self.data.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    # -----------------------------------------------------------------
    # Element access
    # -----------------------------------------------------------------
    def _check_row(self, row: int):
        if not 0 <= row < self.rows:
            raise OutOfBoundsError(f"Row {row} is out of bounds for {self.rows} rows")

    def _check_column(self, column: int):
        if not 0 <= column < self.columns:
            raise OutOfBoundsError(
                f"Column {column} is out of bounds for {self.columns} columns"
            )

    def _promote(self, values: np.ndarray):
        """Widen the buffer dtype so `values` can be stored without loss."""
        dtype = np.result_type(self.data, values)
        if dtype != self.data.dtype:
            logger.debug("promoting matrix buffer from %s to %s", self.data.dtype, dtype)
            self.data = self.data.astype(dtype)

    def get(self, row: int, column: int):
        self._check_row(row)
        self._check_column(column)
        return self.data[row * self.columns + column]

    def set(self, row: int, column: int, value):
        self._check_row(row)
        self._check_column(column)
        self._promote(_as_numeric(value))
        self.data[row * self.columns + column] = value

    def __getitem__(self, index):
        row, column = index
        return self.get(row, column)

    def __setitem__(self, index, value):
        row, column = index
        self.set(row, column, value)

    def get_row(self, row: int) -> np.ndarray:
        self._check_row(row)
        start = row * self.columns
        return self.data[start : start + self.columns].copy()

    def get_column(self, column: int) -> np.ndarray:
        self._check_column(column)
        return self.data[column :: self.columns].copy()

    # -----------------------------------------------------------------
    # Growth
    # -----------------------------------------------------------------
    def append_row(self, row):
        """Append a row at the bottom of the matrix."""
        row = _as_numeric(row).ravel()
        if row.size != self.columns:
            raise LengthError(f"Row must have {self.columns} columns, got {row.size}")
        self._promote(row)
        self.data = np.concatenate([self.data, row.astype(self.data.dtype)])
        self.rows += 1

    def append_column(self, column):
        """
        Append a column at the right-hand side of the matrix.

        One value is inserted after the end of every row, so in the new
        buffer the appended entries sit every ``columns + 1`` positions.
        """
        column = _as_numeric(column).ravel()
        if column.size != self.rows:
            raise LengthError(f"Column must have {self.rows} rows, got {column.size}")
        self._promote(column)
        positions = [(i + 1) * self.columns for i in range(self.rows)]
        self.data = np.insert(self.data, positions, column.astype(self.data.dtype))
        self.columns += 1

    # -----------------------------------------------------------------
    # Algebra
    # -----------------------------------------------------------------
    def trace(self):
        if not self.is_square:
            raise NotSquareError(
                f"The trace is undefined for a {self.rows}x{self.columns} matrix"
            )
        E = self.exact()
        total = E.zero()
        for i in range(E.rows):
            total = total + E.get(i, i)
        return total

    def _check_same_shape(self, other: "Matrix", op: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot {op} a {self.rows}x{self.columns} and a "
                f"{other.rows}x{other.columns} matrix"
            )

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "add")
        return Matrix(self.rows, self.columns, _exact(operator.add, self.data, other.data))

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "subtract")
        return Matrix(self.rows, self.columns, _exact(operator.sub, self.data, other.data))

    def scalar_multiply(self, scalar) -> "Matrix":
        return Matrix(self.rows, self.columns, _exact(operator.mul, self.data, scalar))

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self @ other.

        Each entry (i, k) is the dot product of row i of self and
        column k of other.
        """
        if self.columns != other.rows:
            raise DimensionMismatchError(
                "Matrix A must have the same number of columns as Matrix B has "
                f"number of rows ({self.columns} != {other.rows})"
            )
        A = self.data.reshape(self.rows, self.columns)
        B = other.data.reshape(other.rows, other.columns)
        return Matrix(self.rows, other.columns, _exact(operator.matmul, A, B).ravel())

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__
