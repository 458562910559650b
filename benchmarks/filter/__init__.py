"""Benchmarks for biquad functions.

This module provides benchmarking utilities and benchmark classes for
comparing torchrta biquad functions against scipy baselines.
"""

from .bench_biquad import BenchBiquad

__all__ = [
    "BenchBiquad",
]
