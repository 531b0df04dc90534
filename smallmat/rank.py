# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Iterator

from .determinants import det
from .errors import RankUndefinedError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def square_windows(A: Matrix, p: int) -> Iterator[Matrix]:
    """
    Yield every contiguous p-by-p block of A, sliding the window
    left to right, then top to bottom.
    """
    M = A.to_array()
    for i in range(A.rows - p + 1):
        for k in range(A.columns - p + 1):
            yield Matrix(p, p, M[i : i + p, k : k + p].ravel())


def rank(A: Matrix, strict: bool = False) -> int:
    """
    Size of the largest contiguous square block with a nonzero determinant.

    Only contiguous windows are searched, so a matrix whose independent
    rows/columns are spread apart can report less than its algebraic rank,
    e.g. [[1, 0, 0], [0, 0, 0], [0, 0, 1]] reports 1.

    Parameters
    ----------
    A : Matrix
    strict : bool
        If True, raise RankUndefinedError when no block has a nonzero
        determinant (all-zero or empty matrix) instead of returning 0.
    """
    p_max = min(A.rows, A.columns)
    for p in range(p_max, 0, -1):
        for window in square_windows(A, p):
            if det(window) != 0:
                logger.debug("rank(): %dx%d matrix has rank %d", A.rows, A.columns, p)
                return p

    if strict:
        raise RankUndefinedError("Could not calculate rank of matrix")
    logger.debug("rank(): no nonzero minor in %dx%d matrix", A.rows, A.columns)
    return 0
