# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit


@njit(cache=True, error_model="numpy")
def thomas_solve(a, b, c, d):
    """Solve tridiagonal system Ax = d using the Thomas algorithm.

    A zero pivot yields inf/nan entries rather than an exception.

    Args:
        a: lower diagonal, length N. a[0] is unused.
        b: main diagonal, length N.
        c: upper diagonal, length N. c[-1] is unused.
        d: right-hand side, length N.

    Returns:
        x: solution, length N.
    """
    N = len(b)
    cp = np.empty(N)
    dp = np.empty(N)
    cp[0] = c[0] / b[0]
    dp[0] = d[0] / b[0]
    for i in range(1, N):
        denom = b[i] - a[i] * cp[i - 1]
        cp[i] = c[i] / denom
        dp[i] = (d[i] - a[i] * dp[i - 1]) / denom
    return _back_substitute(cp, dp)


@njit(cache=True, error_model="numpy")
def _back_substitute(cp, dp):
    """y[-1] = dp[-1]; y[k] = dp[k] - cp[k] * y[k+1]. cp may be one shorter than dp."""
    N = len(dp)
    x = np.empty(N)
    x[N - 1] = dp[N - 1]
    for i in range(N - 2, -1, -1):
        x[i] = dp[i] - cp[i] * x[i + 1]
    return x


def thomas_solve_rows(rows):
    """Solve a tridiagonal system streamed as (lower, main, upper, rhs) rows.

    The first row has ``lower=None`` and the last row ``upper=None``; a
    single-row system has neither. The length is not needed up front: the
    forward sweep runs as rows arrive, then back substitution runs once the
    iterable is exhausted.

    Args:
        rows: iterable of 4-tuples in row order.

    Returns:
        y: float64 solution, one entry per row. Empty input gives an
        empty array. Singular systems give non-finite entries.
    """
    cp = []
    dp = []
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for lower, main, upper, rhs in rows:
            main = np.float64(main)
            rhs = np.float64(rhs)
            if lower is None:
                denom = main
                dp.append(rhs / denom)
            else:
                lower = np.float64(lower)
                denom = main - lower * cp[-1]
                dp.append((rhs - lower * dp[-1]) / denom)
            if upper is not None:
                cp.append(np.float64(upper) / denom)

    if not dp:
        return np.empty(0)
    return _back_substitute(np.array(cp, dtype=np.float64), np.array(dp, dtype=np.float64))


def rows_to_bands(rows):
    """Materialise row tuples into (a, b, c, d) band arrays for ``thomas_solve``.

    Absent neighbours are stored as 0.0, so a[0] and c[-1] are zero.
    """
    a, b, c, d = [], [], [], []
    for lower, main, upper, rhs in rows:
        a.append(0.0 if lower is None else lower)
        b.append(main)
        c.append(0.0 if upper is None else upper)
        d.append(rhs)
    return (
        np.array(a, dtype=np.float64),
        np.array(b, dtype=np.float64),
        np.array(c, dtype=np.float64),
        np.array(d, dtype=np.float64),
    )
