# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Tuple

import numpy as np

from .errors import LengthError, UnsolvableError
from .matrix import Matrix
from .systems import Solvable, is_solvable
from .utils import scale_tol

logger = logging.getLogger(__name__)


def shuffle(A: Matrix, c) -> Tuple[np.ndarray, np.ndarray]:
    """
    Reorder the equations of A x = c so that zero pivots are unlikely.

    For each column in turn the first row not chosen yet with a nonzero
    entry in that column is taken. Rows left over afterwards follow in
    their original order, rows that are entirely zero are dropped.

    Returns
    -------
    rows   : (k, n) ndarray      reordered rows of A, original dtype
    consts : (k,) ndarray        constants in the same order
    """
    c = np.asarray(c).ravel()
    if c.size != A.rows:
        raise LengthError(f"Constant vector must have {A.rows} entries, got {c.size}")

    M = A.to_array()
    order = []
    for k in range(A.columns):
        for i in range(A.rows):
            if i not in order and M[i, k] != 0:
                order.append(i)
                break

    leftover = [i for i in range(A.rows) if i not in order and np.any(M[i] != 0)]
    order.extend(leftover)
    logger.debug("shuffle(): row order %s", order)
    return M[order], c[order]


def reduce_row(M: np.ndarray, s: np.ndarray, k: int):
    """Scale row k (and s[k]) so its pivot M[k, k] becomes 1. No-op on a zero pivot."""
    pivot = M[k, k]
    if pivot == 0.0:
        return
    M[k] /= pivot
    s[k] /= pivot


def add_gaussian(M: np.ndarray, s: np.ndarray, k: int, targets: slice):
    """
    Clear column k in the target rows using the (normalised) pivot row k:

        row_i <- (-row_i[k]) * row_k + row_i
        s_i   <- (-row_i[k]) * s_k + s_i
    """
    factors = -M[targets, k]
    M[targets] += factors[:, None] * M[k]
    s[targets] += factors * s[k]


def forward_eliminate(M: np.ndarray, s: np.ndarray, columns: int):
    """
    In-place forward pass on the float rows M and constants s.

    A zero pivot sends its row to the end of the working set; each of the
    remaining rows gets one chance to take its place. If all of them have a
    zero in the pivot column the pivot stays zero and the row is left as is.
    """
    m = M.shape[0]
    for k in range(columns):
        attempts = m - k - 1
        while M[k, k] == 0.0 and attempts > 0:
            logger.debug("forward_eliminate(): zero pivot in column %d, rotating rows", k)
            M[k:] = np.roll(M[k:], -1, axis=0)
            s[k:] = np.roll(s[k:], -1)
            attempts -= 1

        reduce_row(M, s, k)
        add_gaussian(M, s, k, slice(k + 1, m))
    return M, s


def back_eliminate(M: np.ndarray, s: np.ndarray, columns: int):
    """In-place backward pass, clears the entries above every pivot."""
    for k in reversed(range(columns)):
        add_gaussian(M, s, k, slice(0, k))
    return M, s


def solve(A: Matrix, c) -> Tuple[np.ndarray, np.ndarray]:
    """
    Solve A x = c by Gauss-Jordan elimination in float64.

    Parameters
    ----------
    A : Matrix      (m, n), m >= n
    c : array-like  (m,) or (m, 1)

    Returns
    -------
    U : (n, n) ndarray
        Reduced rows, the identity matrix for a successful solve.
    x : (n,) ndarray
        The solution.

    Raises
    ------
    UnsolvableError : the system has no solution or infinitely many.
    LengthError     : len(c) != m
    """
    verdict = is_solvable(A, c)
    if verdict is not Solvable.ONE_SOLUTION:
        raise UnsolvableError(
            f"The linear system is not uniquely solvable ({verdict.value})"
        )

    rows, consts = shuffle(A, c)
    M = rows.astype(float)
    s = consts.astype(float)

    n = A.columns
    forward_eliminate(M, s, n)
    back_eliminate(M, s, n)

    if M.shape[0] > n:
        # consistent overdetermined system, the extra equations reduce to 0 = 0
        logger.debug("solve(): dropping %d redundant equation(s)", M.shape[0] - n)
    U, x = M[:n], s[:n]

    if not np.allclose(U, np.eye(n), rtol=0.0, atol=scale_tol(U)):
        logger.warning("solve(): rows did not reduce to the identity\n%s", U)
    return U, x
