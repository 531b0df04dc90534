# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
smallmat
========

A small dense-matrix toolkit built on closed-form formulas: determinants by
the diagonal rules and Laplace expansion, inverses by the adjugate, rank by
searching square minors and linear systems by Gauss-Jordan elimination.
Integer and Fraction matrices are handled exactly; everything is meant for
small matrices (the expansions are O(n!)).

Public API
~~~~~~~~~~
- Storage and algebra
    - `Matrix`
- Determinants
    - `det`, `submatrix`, `minor`, `cofactor`,
      `main_diagonal_product`, `side_diagonal_product`
- Inversion
    - `adj`, `inverse`
- Rank
    - `rank`
- Linear systems
    - `Solvable`, `is_solvable`, `solve`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import smallmat as sm
>>> A = sm.Matrix.build(2, 2, [4, 7, -3, 8])
>>> int(sm.det(A))
53
"""

from importlib.metadata import version as _pkg_version

from .determinants import (
    cofactor,
    det,
    main_diagonal_product,
    minor,
    side_diagonal_product,
    submatrix,
)
from .elimination import solve
from .errors import (
    DimensionError,
    DimensionMismatchError,
    InexactDivisionError,
    LengthError,
    MatrixError,
    NotSquareError,
    OutOfBoundsError,
    RankUndefinedError,
    SingularMatrixError,
    UnsolvableError,
)
from .inverse import adj, inverse
from .matrix import Matrix
from .rank import rank
from .systems import Solvable, is_solvable

__all__ = [
    "Matrix",
    "det",
    "submatrix",
    "minor",
    "cofactor",
    "main_diagonal_product",
    "side_diagonal_product",
    "adj",
    "inverse",
    "rank",
    "Solvable",
    "is_solvable",
    "solve",
    "MatrixError",
    "DimensionError",
    "OutOfBoundsError",
    "LengthError",
    "NotSquareError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "InexactDivisionError",
    "RankUndefinedError",
    "UnsolvableError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show smallmat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
