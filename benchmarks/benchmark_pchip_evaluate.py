"""Benchmark PCHIP evaluation on uniform and irregular grids.

Compares direct interval lookup (uniform grids) against binary search
(irregular grids) across different numbers of samples.
"""

import time

import torch

from torchpchip import Interpolator, pchip_evaluate, pchip_fit


def benchmark_evaluate(
    n_points: int,
    n_queries: int = 100_000,
    n_iterations: int = 10,
    uniform: bool = True,
) -> float:
    """Benchmark evaluation for a given grid size.

    Parameters
    ----------
    n_points : int
        Number of samples in the grid.
    n_queries : int
        Number of query points per evaluation.
    n_iterations : int
        Number of iterations for timing.
    uniform : bool
        Use direct lookup (True) or binary search (False).

    Returns
    -------
    float
        Average time per evaluation in milliseconds.
    """
    x = torch.linspace(0, 1, n_points, dtype=torch.float64)
    fitted = pchip_fit(x, torch.sin(8 * x))

    spline = Interpolator(
        xs=fitted.xs,
        ys=fitted.ys,
        ds=fitted.ds,
        extrapolate=False,
        uniform=uniform,
        batch_size=[],
    )

    t = torch.rand(n_queries, dtype=torch.float64)

    # Warmup
    for _ in range(3):
        _ = pchip_evaluate(spline, t)

    # Benchmark
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = pchip_evaluate(spline, t)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run evaluation benchmarks across grid sizes."""
    sizes = [16, 256, 4096, 65536, 1048576]

    print("PCHIP Evaluation Benchmark")
    print("=" * 50)
    print(f"{'Points':>10} {'Uniform (ms)':>18} {'Search (ms)':>18}")
    print("-" * 50)

    for n_points in sizes:
        ms_uniform = benchmark_evaluate(n_points, uniform=True)
        ms_search = benchmark_evaluate(n_points, uniform=False)

        print(f"{n_points:>10} {ms_uniform:>18.3f} {ms_search:>18.3f}")

    print("=" * 50)


if __name__ == "__main__":
    main()
