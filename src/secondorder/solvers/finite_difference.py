# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

from secondorder.grid import compute_x
from secondorder.solvers.tridiagonal import rows_to_bands


class CentredCoefficients:
    """Centred second-order stencil weights for a(x) f'' + b(x) f' + c(x) f.

    At node i:
        lower(i) = a(x_i)/dx^2 - b(x_i)/(2 dx)    multiplies f_{i-1}
        main(i)  = c(x_i) - 2 a(x_i)/dx^2         multiplies f_i
        upper(i) = a(x_i)/dx^2 + b(x_i)/(2 dx)    multiplies f_{i+1}
    """

    def __init__(self, second_deriv_coef, first_deriv_coef, fn_coef, grid):
        self.second_deriv_coef = second_deriv_coef
        self.first_deriv_coef = first_deriv_coef
        self.fn_coef = fn_coef
        self.grid = grid
        self.dx_sq = grid.dx ** 2
        self.dx2 = grid.dx * 2.0

    def _x(self, index):
        return compute_x(index, self.grid.dx, self.grid.x_min)

    def lower(self, index):
        x = self._x(index)
        return self.second_deriv_coef(x) / self.dx_sq - self.first_deriv_coef(x) / self.dx2

    def main(self, index):
        x = self._x(index)
        return self.fn_coef(x) - self.second_deriv_coef(x) * 2.0 / self.dx_sq

    def upper(self, index):
        x = self._x(index)
        return self.second_deriv_coef(x) / self.dx_sq + self.first_deriv_coef(x) / self.dx2


def iter_rows(second_deriv_coef, first_deriv_coef, fn_coef, alpha, beta, grid):
    """Lazily yield the (lower, main, upper, rhs) rows of the discretised BVP.

    Rows run over interior nodes k = 1..num_steps. The off-diagonal entry in
    column k-1 (k+1) is evaluated at node k-1 (k+1), the node of the unknown
    it multiplies. Boundary values are moved to the right-hand side: the
    first row carries -alpha * lower(1), the last row -beta * upper(num_steps).
    With a single interior node the row has no neighbours and its rhs is
    -alpha * lower(1) - beta * upper(2).
    """
    coef = CentredCoefficients(second_deriv_coef, first_deriv_coef, fn_coef, grid)
    n = grid.num_steps

    if n == 1:
        yield (None, coef.main(1), None, -alpha * coef.lower(1) - beta * coef.upper(2))
        return

    for k in range(1, n + 1):
        if k == 1:
            yield (None, coef.main(k), coef.upper(k + 1), -alpha * coef.lower(k))
        elif k == n:
            yield (coef.lower(k - 1), coef.main(k), None, -beta * coef.upper(k))
        else:
            yield (coef.lower(k - 1), coef.main(k), coef.upper(k + 1), 0.0)


def assemble_bands(second_deriv_coef, first_deriv_coef, fn_coef, alpha, beta, grid):
    """Band arrays (a, b, c, d) of the discretised BVP, for ``thomas_solve``."""
    return rows_to_bands(
        iter_rows(second_deriv_coef, first_deriv_coef, fn_coef, alpha, beta, grid)
    )
