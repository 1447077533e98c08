"""Scaling analysis of benchmark timings.

Fits t = c * n**k on a log-log scale; k near 1 means linear total cost
for n operations (amortized O(1) each), k near 2 means quadratic.
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np
from scipy.stats import linregress

from seqarrays.benchmarks.harness import BenchmarkResult

# Timings are clipped to this floor before taking logarithms
_MIN_SECONDS = 1e-12


@dataclass
class ScalingFit:
    """Log-log least squares fit.

    Attributes:
        exponent: Slope k of log10(t) against log10(n)
        intercept: log10(c)
        r_value: Correlation coefficient of the fit
    """
    exponent: float
    intercept: float
    r_value: float


def fit_scaling_exponent(sizes: np.ndarray, seconds: np.ndarray) -> ScalingFit:
    """Fit seconds ~ c * sizes**k.

    Args:
        sizes: Sequence sizes (> 0)
        seconds: Timings, same length as sizes

    Returns:
        ScalingFit

    Raises:
        ValueError: If fewer than two distinct sizes are given or shapes differ
    """
    sizes = np.asarray(sizes, dtype=np.float64)
    seconds = np.asarray(seconds, dtype=np.float64)

    if sizes.shape != seconds.shape:
        raise ValueError(f"sizes shape {sizes.shape} != seconds shape {seconds.shape}")
    if len(np.unique(sizes)) < 2:
        raise ValueError("At least two distinct sizes are required for a scaling fit")
    if np.any(sizes <= 0):
        raise ValueError("sizes must be positive")

    fit = linregress(np.log10(sizes), np.log10(np.maximum(seconds, _MIN_SECONDS)))
    return ScalingFit(
        exponent=float(fit.slope),
        intercept=float(fit.intercept),
        r_value=float(fit.rvalue),
    )


def summarize(result: BenchmarkResult) -> Dict[str, ScalingFit]:
    """Scaling fit per structure (empty if fewer than two sizes were timed)."""
    if len(np.unique(result.sizes)) < 2:
        return {}
    return {
        name: fit_scaling_exponent(result.sizes, times)
        for name, times in result.seconds.items()
    }


def format_summary(result: BenchmarkResult) -> str:
    """Plain-text table of timings and fitted exponents."""
    fits = summarize(result)
    header = f"{'structure':<18}" + "".join(f"{f'n={n}':>14}" for n in result.sizes)
    if fits:
        header += f"{'exponent':>10}"

    lines = [f"operation: {result.operation.value}", header, "-" * len(header)]
    for name, times in result.seconds.items():
        line = f"{name:<18}" + "".join(f"{t:>14.6f}" for t in times)
        if fits:
            line += f"{fits[name].exponent:>10.2f}"
        lines.append(line)
    return "\n".join(lines)
