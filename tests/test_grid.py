# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from secondorder.grid import UniformGrid, compute_dx, compute_x

def test_compute_dx():
    """n nodes on [lo, hi] are (hi - lo)/(n - 1) apart."""
    assert compute_dx(11, 0.0, 1.0) == 0.1
    assert compute_dx(2, -1.0, 3.0) == 4.0

def test_compute_x():
    assert compute_x(0, 0.25, 1.0) == 1.0
    assert compute_x(4, 0.25, 1.0) == 2.0

def test_grid_endpoints():
    """Grid should span [x_min, x_max] with num_steps + 2 nodes."""
    g = UniformGrid(x_min=0.0, x_max=2.0, num_steps=9)
    assert g.n_total == 11
    assert g.x[0] == 0.0
    assert np.isclose(g.x[-1], 2.0)
    assert np.isclose(g.dx, 0.2)

def test_interior_nodes():
    """Interior nodes exclude both boundaries."""
    g = UniformGrid(x_min=0.0, x_max=1.0, num_steps=100)
    assert g.x_interior.shape == (100,)
    assert np.isclose(g.x_interior[0], g.dx)
    assert np.isclose(g.x_interior[-1], 1.0 - g.dx)
    assert np.allclose(np.diff(g.x), g.dx)

def test_single_interior_node():
    g = UniformGrid(x_min=0.0, x_max=1.0, num_steps=1)
    assert g.dx == 0.5
    assert np.array_equal(g.x_interior, [0.5])
    assert g.x_at(2) == 1.0
