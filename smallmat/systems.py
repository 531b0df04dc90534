# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Classification of linear systems A x = c
"""

import enum
import logging

from .determinants import det
from .matrix import Matrix
from .rank import rank

logger = logging.getLogger(__name__)


class Solvable(enum.Enum):
    ONE_SOLUTION = "one solution"
    INFINITE_SOLUTIONS = "infinite solutions"
    NO_SOLUTION = "no solution"


def augment(A: Matrix, c) -> Matrix:
    """Return A with the constants c appended as a last column."""
    Ac = A.copy()
    Ac.append_column(c)
    return Ac


def is_solvable(A: Matrix, c) -> Solvable:
    """
    Classify A x = c by comparing rank(A) with the rank of the
    augmented matrix [A | c] (Rouché–Capelli). Square systems with a
    nonzero determinant are decided without any rank search.
    """
    Ac = augment(A, c)

    if A.is_square and det(A) != 0:
        verdict = Solvable.ONE_SOLUTION
    else:
        r_a = rank(A)
        r_ac = rank(Ac)
        if r_a != r_ac:
            verdict = Solvable.NO_SOLUTION
        elif not A.is_square and r_a == A.columns:
            verdict = Solvable.ONE_SOLUTION
        else:
            verdict = Solvable.INFINITE_SOLUTIONS

    logger.debug("is_solvable(): %dx%d system has %s", A.rows, A.columns, verdict.value)
    return verdict
