# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest


@pytest.fixture
def damped_coefficients():
    """1.5 f'' + 5 f' + 1.5 f = 0, characteristic roots -1/3 and -3."""
    return (lambda x: 1.5), (lambda x: 5.0), (lambda x: 1.5)


@pytest.fixture
def damped_exact():
    """Analytic solution of the damped problem with f(0) = 0, f(1) = 1."""
    r1 = -1.0 / 3.0
    r2 = -3.0
    c2 = 1.0 / (np.exp(r1) - np.exp(r2))
    c1 = -c2

    def f(x):
        return c1 * np.exp(r2 * x) + c2 * np.exp(r1 * x)

    return f
