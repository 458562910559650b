"""Benchmarks for biquad design and application.

Compares torchrta biquad functions against scipy baselines where scipy has
an equivalent.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import signal as scipy_signal

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchrta.filter import biquad_filter
from torchrta.filter_analysis import (
    biquad_frequency_response,
    biquad_response,
)
from torchrta.filter_design import (
    biquad_coefficients,
    biquad_design,
    biquad_lowpass,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Timing statistics in seconds under 'mean', 'std', 'min' and 'max'.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    rta_time: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchrta: {format_time(rta_time['mean'])} "
        f"+/- {format_time(rta_time['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:    {format_time(scipy_time['mean'])} "
            f"+/- {format_time(scipy_time['std'])}"
        )
        speedup = scipy_time["mean"] / rta_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:  {speedup:.2f}x faster")
        else:
            print(f"  Speedup:  {1 / speedup:.2f}x slower")


class BenchBiquad:
    """Benchmarks for biquad design, analysis and filtering."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_design(self) -> None:
        """Benchmark a lowpass design against scipy.signal.butter."""
        rta_time = self._bench(biquad_lowpass, 0.3, 1 / np.sqrt(2))

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(scipy_signal.butter, 2, 0.3)

        print_comparison("lowpass design", rta_time, scipy_time)

    def bench_coefficients(self) -> None:
        """Benchmark the type-dispatched design into preallocated storage."""
        b = np.empty(3)
        a = np.empty(2)

        for filter_type in ("notch", "peaking", "highshelf"):
            rta_time = self._bench(
                biquad_coefficients, filter_type, b, a, 0.3, 2.0, 1.5
            )
            print_comparison(f"biquad_coefficients ({filter_type})", rta_time)

    def bench_frequency_response(self, n_points: int = 4096) -> None:
        """Benchmark the frequency response against scipy.signal.freqz.

        Parameters
        ----------
        n_points : int, optional
            Number of frequency points. Default is 4096.
        """
        b, a = biquad_design("peaking", 0.2, 2.0, 4.0, dtype=torch.float64)

        rta_time = self._bench(
            biquad_frequency_response, b, a, frequencies=n_points
        )

        scipy_time = None
        if SCIPY_AVAILABLE:
            b_np = b.numpy()
            a_np = np.concatenate([[1.0], a.numpy()])
            scipy_time = self._bench(
                scipy_signal.freqz, b_np, a_np, worN=n_points
            )

        print_comparison(
            f"frequency response (n_points={n_points})",
            rta_time,
            scipy_time,
        )

    def bench_single_frequency_response(self) -> None:
        """Benchmark scalar evaluation at one frequency."""
        coefficients = biquad_lowpass(0.3, 1 / np.sqrt(2))

        rta_time = self._bench(
            biquad_response, coefficients.b, coefficients.a, 0.5
        )

        print_comparison("single-frequency response", rta_time)

    def bench_filter(
        self, signal_length: int = 10000, batch_size: int = 1
    ) -> None:
        """Benchmark biquad_filter vs scipy.signal.lfilter.

        Parameters
        ----------
        signal_length : int, optional
            Length of input signal. Default is 10000.
        batch_size : int, optional
            Number of signals filtered at once. Default is 1.
        """
        b, a = biquad_design("lowpass", 0.3, 0.707, dtype=torch.float64)
        x = torch.randn(batch_size, signal_length, dtype=torch.float64)

        rta_time = self._bench(biquad_filter, b, a, x)

        scipy_time = None
        if SCIPY_AVAILABLE:
            b_np = b.numpy()
            a_np = np.concatenate([[1.0], a.numpy()])
            scipy_time = self._bench(
                scipy_signal.lfilter, b_np, a_np, x.numpy(), axis=-1
            )

        print_comparison(
            f"biquad_filter (length={signal_length}, batch={batch_size})",
            rta_time,
            scipy_time,
        )

    def run_all(self) -> None:
        """Run all biquad benchmarks."""
        print("=" * 60)
        print("BIQUAD BENCHMARKS")
        print("=" * 60)

        print("\n--- Design ---")
        self.bench_design()
        self.bench_coefficients()

        print("\n--- Analysis ---")
        self.bench_frequency_response()
        self.bench_single_frequency_response()

        print("\n--- Filtering ---")
        self.bench_filter()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Signal Length Scaling ---")
        for length in [1000, 10000, 100000]:
            self.bench_filter(signal_length=length)

        print("\n--- Batch Size Scaling ---")
        for batch_size in [1, 8, 32, 128]:
            self.bench_filter(batch_size=batch_size)


if __name__ == "__main__":
    bench = BenchBiquad(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
