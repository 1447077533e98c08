"""Plots of benchmark timings."""

import logging

import matplotlib.pyplot as plt

from seqarrays.benchmarks.harness import BenchmarkResult

logger = logging.getLogger(__name__)


def plot_timings(
    result: BenchmarkResult,
    title: str = None,
    save_path: str = None,
):
    """Log-log plot of time against sequence size, one line per structure.

    Args:
        result: Benchmark timings
        title: Plot title (default: names the timed operation)
        save_path: If provided, save to file instead of showing
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    for name, times in result.seconds.items():
        ax.loglog(result.sizes, times, marker='o', linewidth=2, label=name)

    ax.set_xlabel('n [elements]')
    ax.set_ylabel('time [s]')
    ax.set_title(title or f'{result.operation.value}: best-of-repeats timings')
    ax.grid(True, which='both', alpha=0.3)
    ax.legend()

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info(f"Saved: {save_path}")
    else:
        plt.show()

    plt.close(fig)
