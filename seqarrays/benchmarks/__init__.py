"""Benchmark harness: list adapter, timing runner, scaling analysis and plots.

The plotting module is not imported here so the harness runs without
loading matplotlib.
"""

from seqarrays.benchmarks.adapters import ListAdapter
from seqarrays.benchmarks.analysis import ScalingFit, fit_scaling_exponent, format_summary, summarize
from seqarrays.benchmarks.harness import (
    BenchmarkResult,
    build_structure,
    run_benchmark,
    time_insert_front,
    time_push,
)

__all__ = [
    "ListAdapter",
    "BenchmarkResult",
    "build_structure",
    "run_benchmark",
    "time_push",
    "time_insert_front",
    "ScalingFit",
    "fit_scaling_exponent",
    "summarize",
    "format_summary",
]
