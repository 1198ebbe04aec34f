# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling secondorder hot paths.

Provides micro-benchmarks (tridiagonal kernels, row assembly) and a
macro-benchmark (full solve_ode) with timing and optional cProfile output.
"""

import time
import cProfile
import pstats
import io
import numpy as np


def _constant_coefficients():
    return (lambda x: 1.5), (lambda x: 5.0), (lambda x: 1.5)


def _make_test_system(N=128, seed=0):
    """Random diagonally dominant tridiagonal bands."""
    rng = np.random.default_rng(seed)
    a = rng.standard_normal(N)
    b = rng.standard_normal(N) + 5.0  # diag dominant
    c = rng.standard_normal(N)
    d = rng.standard_normal(N)
    a[0] = 0.0
    c[-1] = 0.0
    return a, b, c, d


def _bands_to_rows(a, b, c, d):
    N = len(b)
    return [
        (None if i == 0 else a[i], b[i], None if i == N - 1 else c[i], d[i])
        for i in range(N)
    ]


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_thomas_solve(N=128, n_iter=500):
    """Benchmark the compiled band kernel."""
    from secondorder.solvers.tridiagonal import thomas_solve
    a, b, c, d = _make_test_system(N)
    return _time_fn(thomas_solve, args=(a, b, c, d), n_iter=n_iter)


def bench_thomas_solve_rows(N=128, n_iter=500):
    """Benchmark the streamed row-tuple solver."""
    from secondorder.solvers.tridiagonal import thomas_solve_rows
    rows = _bands_to_rows(*_make_test_system(N))
    return _time_fn(thomas_solve_rows, args=(rows,), n_iter=n_iter)


def bench_iter_rows(N=128, n_iter=500):
    """Benchmark row assembly from coefficient callables."""
    from secondorder.grid import UniformGrid
    from secondorder.solvers.finite_difference import iter_rows
    grid = UniformGrid(0.0, 1.0, N)
    A, B, C = _constant_coefficients()

    def build():
        return list(iter_rows(A, B, C, 0.0, 1.0, grid))

    return _time_fn(build, n_iter=n_iter)


def bench_solve_ode(N=1000):
    """Time a full solve_ode (macro benchmark)."""
    from secondorder.models.linear_bvp import solve_ode
    A, B, C = _constant_coefficients()
    solve_ode(A, B, C, 0.0, 1.0, 0.0, 1.0, 8)  # JIT warmup
    t0 = time.perf_counter()
    y = solve_ode(A, B, C, 0.0, 1.0, 0.0, 1.0, N)
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "num_steps": len(y),
    }


def profile_solve_ode(N=10000):
    """Run cProfile on solve_ode, return stats as string."""
    from secondorder.models.linear_bvp import solve_ode
    A, B, C = _constant_coefficients()
    pr = cProfile.Profile()
    pr.enable()
    solve_ode(A, B, C, 0.0, 1.0, 0.0, 1.0, N)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(N=128, verbose=True):
    """Run all micro and macro benchmarks. Returns dict of results."""
    results = {}

    benches = [
        ("thomas_solve", bench_thomas_solve),
        ("thomas_solve_rows", bench_thomas_solve_rows),
        ("iter_rows", bench_iter_rows),
    ]

    for name, fn in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(N=N)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    if verbose:
        print(f"  solve_ode (N={8 * N})...", end="", flush=True)
    r = bench_solve_ode(N=8 * N)
    results["solve_ode"] = r
    if verbose:
        print(f" {r['elapsed_s'] * 1e3:.2f} ms")

    return results


def compare_results(before, after):
    """Print a comparison table of two benchmark result sets."""
    print(f"\n{'Benchmark':<22} {'Before':>10} {'After':>10} {'Speedup':>10}")
    print("-" * 55)
    for key in before:
        if key == "solve_ode":
            b = before[key]["elapsed_s"]
            a = after[key]["elapsed_s"]
            speedup = b / a if a > 0 else float("inf")
            print(f"{key:<22} {b:>9.4f}s {a:>9.4f}s {speedup:>9.1f}x")
        else:
            b = before[key]["median_ms"]
            a = after[key]["median_ms"]
            speedup = b / a if a > 0 else float("inf")
            print(f"{key:<22} {b:>8.3f}ms {a:>8.3f}ms {speedup:>9.1f}x")


if __name__ == "__main__":
    print("=" * 55)
    print("secondorder Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of solve_ode (N=10000):")
    print(profile_solve_ode())

    print("Micro-benchmarks (N=128):")
    run_all_benchmarks(N=128)
