# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12

# Laplace expansion costs O(n!), warn from this size upwards
LAPLACE_WARN_SIZE: int = 8


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    A = np.asarray(A, dtype=float)
    if A.size == 0:
        return EPS
    return EPS * max(1.0, np.linalg.norm(np.atleast_2d(A), ord=np.inf))


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # replace any accidental zeros on the diagonal
    diag = rng.uniform(low if low != 0 else 1, high, size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)


def random_integer_matrix(m, n, low=-9, high=10, seed=None) -> np.ndarray:
    """Random (m, n) matrix of small integers, handy for exact determinants."""
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=(m, n))
