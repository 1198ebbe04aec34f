# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np


def compute_dx(n, lo, hi):
    """Spacing of n uniformly spaced nodes on [lo, hi]. Requires n >= 2."""
    return (hi - lo) / (n - 1)


def compute_x(i, dx, lo):
    """Coordinate of node i. No bounds checking."""
    return lo + i * dx


class UniformGrid:
    """1D uniform grid with Dirichlet boundary nodes at both ends.

    Node 0 sits at x_min and node n_total-1 at x_max; nodes 1..num_steps
    are the interior nodes where the solution is computed.

    Attributes:
        x_min, x_max: domain endpoints
        num_steps: number of interior nodes
        n_total: num_steps + 2 (boundary nodes included)
        dx: node spacing
        x: all node coordinates, shape (n_total,)
        x_interior: interior node coordinates, shape (num_steps,)
    """

    def __init__(self, x_min, x_max, num_steps):
        if num_steps < 1:
            raise ValueError(f"num_steps must be >= 1 (need at least one interior node), got {num_steps}")
        if not x_max > x_min:
            raise ValueError(f"x_max must be greater than x_min, got x_min={x_min}, x_max={x_max}")

        self.x_min = x_min
        self.x_max = x_max
        self.num_steps = num_steps
        self.n_total = num_steps + 2
        self.dx = compute_dx(self.n_total, x_min, x_max)

        self.x = np.array([compute_x(i, self.dx, x_min) for i in range(self.n_total)])
        self.x_interior = self.x[1:-1]

    def x_at(self, i):
        return compute_x(i, self.dx, self.x_min)
