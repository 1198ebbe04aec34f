# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Accuracy checks for tridiagonal solves and discretised BVP solutions."""

import logging

import numpy as np

from secondorder.grid import UniformGrid
from secondorder.models.linear_bvp import solve_ode

logger = logging.getLogger(__name__)


def residual_inf_norm(rows, y):
    """||A y - d||_inf for a system given as (lower, main, upper, rhs) rows."""
    rows = list(rows)
    n = len(rows)
    worst = 0.0
    for k, (lower, main, upper, rhs) in enumerate(rows):
        r = main * y[k] - rhs
        if lower is not None:
            r += lower * y[k - 1]
        if upper is not None and k + 1 < n:
            r += upper * y[k + 1]
        worst = max(worst, abs(r))
    return worst


def count_nonfinite(y):
    return int(np.count_nonzero(~np.isfinite(y)))


def max_abs_error(y, exact, grid):
    """Max |y - exact(x)| over the interior nodes of ``grid``."""
    expected = np.array([exact(x) for x in grid.x_interior])
    return float(np.max(np.abs(np.asarray(y) - expected)))


def convergence_study(second_deriv_coef, first_deriv_coef, fn_coef, alpha, beta,
                      x_min, x_max, num_steps_list, exact):
    """Solve on successively finer grids and record the max error of each.

    Returns:
        list of dicts with num_steps, dx, max_error, in input order.
    """
    study = []
    for n in num_steps_list:
        grid = UniformGrid(x_min, x_max, n)
        y = solve_ode(second_deriv_coef, first_deriv_coef, fn_coef,
                      alpha, beta, x_min, x_max, n)
        err = max_abs_error(y, exact, grid)
        logger.info("num_steps=%d dx=%.4e max_error=%.4e", n, grid.dx, err)
        study.append({"num_steps": n, "dx": grid.dx, "max_error": err})
    return study


def observed_order(study):
    """Least-squares slope of log(max_error) against log(dx)."""
    if len(study) < 2:
        raise ValueError(f"Need at least 2 grid levels to estimate an order, got {len(study)}")
    log_dx = np.log([s["dx"] for s in study])
    log_err = np.log([s["max_error"] for s in study])
    slope, _ = np.polyfit(log_dx, log_err, 1)
    return float(slope)
