#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Timing of the cofactor-based kernels against numpy.linalg.

    python -m smallmat.benchmark
"""

import time

import numpy as np
import pandas as pd

from .determinants import det
from .elimination import solve
from .inverse import inverse
from .matrix import Matrix
from .rank import rank

REPEATS = 5  # best of 5 runs
SIZES = range(2, 8)


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def best(f, *args):
    return min(wall(f, *args) for _ in range(REPEATS))


def run(sizes=SIZES, seed=0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    records = []
    for n in sizes:
        arr = rng.standard_normal((n, n))
        b = rng.standard_normal(n)
        A = Matrix.from_array(arr)

        t_np = best(np.linalg.det, arr)
        t_det = best(det, A)
        err = abs(det(A) - np.linalg.det(arr))
        records.append(("det", f"{n}x{n}", t_det, t_det / t_np, err))

        t_np = best(np.linalg.inv, arr)
        t_inv = best(inverse, A)
        err = np.linalg.norm(inverse(A).to_array() - np.linalg.inv(arr), np.inf)
        records.append(("inverse", f"{n}x{n}", t_inv, t_inv / t_np, err))

        t_np = best(np.linalg.matrix_rank, arr)
        t_rank = best(rank, A)
        records.append(("rank", f"{n}x{n}", t_rank, t_rank / t_np, 0.0))

        t_np = best(np.linalg.solve, arr, b)
        t_solve = best(solve, A, b)
        _U, x = solve(A, b)
        err = np.linalg.norm(arr @ x - b, np.inf)
        records.append(("solve", f"{n}x{n}", t_solve, t_solve / t_np, err))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "error"],
    )


def main():
    df = run()
    print(df.to_string(index=False))
    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
