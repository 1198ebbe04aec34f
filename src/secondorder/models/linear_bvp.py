# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging
import numbers

import numpy as np

from secondorder.grid import UniformGrid
from secondorder.solvers.finite_difference import iter_rows, assemble_bands
from secondorder.solvers.tridiagonal import thomas_solve_rows

logger = logging.getLogger(__name__)


class LinearBVP:
    """Linear second-order boundary value problem with Dirichlet BCs.

        A(x) f'' + B(x) f' + C(x) f = 0,   f(x_min) = alpha, f(x_max) = beta

    Discretised with centred differences on a uniform grid and solved with
    the Thomas algorithm.

    Parameters
    ----------
    second_deriv_coef, first_deriv_coef, fn_coef : callable(float) -> float
        A, B and C above.
    params : dict
        ``alpha`` (0.0), ``beta`` (0.0), ``x_min`` (0.0), ``x_max`` (1.0),
        ``num_steps`` (100, number of interior nodes).
    """

    def __init__(self, second_deriv_coef, first_deriv_coef, fn_coef, params=None):
        params = params or {}
        num_steps = params.get("num_steps", 100)
        if isinstance(num_steps, bool) or not isinstance(num_steps, numbers.Integral):
            raise ValueError(f"num_steps must be an integer, got {num_steps!r}")

        self.params = params
        self.second_deriv_coef = second_deriv_coef
        self.first_deriv_coef = first_deriv_coef
        self.fn_coef = fn_coef
        self.alpha = params.get("alpha", 0.0)
        self.beta = params.get("beta", 0.0)

        self.grid = UniformGrid(
            x_min=params.get("x_min", 0.0),
            x_max=params.get("x_max", 1.0),
            num_steps=int(num_steps),
        )

    def rows(self):
        """Lazy (lower, main, upper, rhs) row stream."""
        return iter_rows(
            self.second_deriv_coef, self.first_deriv_coef, self.fn_coef,
            self.alpha, self.beta, self.grid,
        )

    def bands(self):
        return assemble_bands(
            self.second_deriv_coef, self.first_deriv_coef, self.fn_coef,
            self.alpha, self.beta, self.grid,
        )

    def solve(self):
        """Solution at the interior nodes ``self.grid.x_interior``.

        Non-finite entries (singular or badly conditioned system) are
        logged and returned as-is.
        """
        g = self.grid
        logger.debug(
            "Solving BVP: num_steps=%d, x=[%s, %s], dx=%.6g",
            g.num_steps, g.x_min, g.x_max, g.dx,
        )
        y = thomas_solve_rows(self.rows())

        n_bad = int(np.count_nonzero(~np.isfinite(y)))
        if n_bad:
            logger.warning(
                "Solution has %d non-finite value(s) out of %d; "
                "the tridiagonal system is likely singular", n_bad, len(y),
            )
        return y


def solve_ode(second_deriv_coef, first_deriv_coef, fn_coef,
              alpha, beta, x_min, x_max, num_steps):
    """Solve A(x) f'' + B(x) f' + C(x) f = 0 with f(x_min)=alpha, f(x_max)=beta.

    Returns the approximate f at the ``num_steps`` interior nodes
    x_min + k*dx, k = 1..num_steps, with dx = (x_max - x_min)/(num_steps + 1).
    Boundary values are not included.
    """
    problem = LinearBVP(
        second_deriv_coef, first_deriv_coef, fn_coef,
        dict(alpha=alpha, beta=beta, x_min=x_min, x_max=x_max, num_steps=num_steps),
    )
    return problem.solve()
