"""Timing harness for every implementation of the sequence contract.

Each (structure, size) pair is timed `repeats` times on a fresh
structure and the fastest run is kept. All structures see the same
values for a given size.

Import Policy:
    from seqarrays.benchmarks.harness import run_benchmark, BenchmarkResult
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from seqarrays.benchmarks.adapters import ListAdapter
from seqarrays.config.enums import BenchmarkOperation, GrowthPolicy, StructureKind
from seqarrays.config.sequence_config import SuiteConfig, create_default_config
from seqarrays.config.validation import validate_and_warn
from seqarrays.core.buffer import create_buffer
from seqarrays.core.contract import SequenceArray
from seqarrays.structures.blocked import create_blocked_sequence
from seqarrays.structures.sparse import create_sparse_sequence

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Best-of-repeats timings.

    Attributes:
        operation: Timed operation
        sizes: Sequence sizes [n_sizes]
        seconds: Structure name -> best time per size [n_sizes]
    """
    operation: BenchmarkOperation
    sizes: np.ndarray
    seconds: Dict[str, np.ndarray] = field(default_factory=dict)

    @property
    def structures(self) -> List[str]:
        return list(self.seconds.keys())

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "operation": self.operation.value,
            "sizes": self.sizes.tolist(),
            "seconds": {name: times.tolist() for name, times in self.seconds.items()},
        }


def build_structure(kind: StructureKind, config: SuiteConfig) -> SequenceArray:
    """Create an empty structure of the given kind from the suite config."""
    if kind == StructureKind.LIST:
        return ListAdapter()
    if kind == StructureKind.INCREMENT_ONE:
        return create_buffer(config.buffer, policy=GrowthPolicy.INCREMENT_ONE)
    if kind == StructureKind.INCREMENT_BLOCK:
        return create_buffer(config.buffer, policy=GrowthPolicy.INCREMENT_BLOCK)
    if kind == StructureKind.DOUBLING:
        return create_buffer(config.buffer, policy=GrowthPolicy.DOUBLING)
    if kind == StructureKind.BLOCKED:
        return create_blocked_sequence(config.blocked)
    if kind == StructureKind.SPARSE:
        return create_sparse_sequence(config.sparse)
    raise ValueError(f"Unknown structure kind: {kind!r}")


def time_push(seq: SequenceArray, values: list) -> float:
    """Seconds taken to push every value."""
    start = time.perf_counter()
    for v in values:
        seq.push(v)
    return time.perf_counter() - start


def time_insert_front(seq: SequenceArray, values: list) -> float:
    """Seconds taken to insert every value at index 0."""
    start = time.perf_counter()
    for v in values:
        seq.insert(v, 0)
    return time.perf_counter() - start


_TIMERS: Dict[BenchmarkOperation, Callable[[SequenceArray, list], float]] = {
    BenchmarkOperation.PUSH: time_push,
    BenchmarkOperation.INSERT_FRONT: time_insert_front,
}


def run_benchmark(config: Optional[SuiteConfig] = None) -> BenchmarkResult:
    """Time the configured operation for every structure and size.

    Args:
        config: Suite configuration (default: create_default_config())

    Returns:
        BenchmarkResult with one timing array per structure

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config = validate_and_warn(config or create_default_config())
    bench = config.benchmark
    timer = _TIMERS[bench.operation]

    rng = np.random.default_rng(bench.seed)
    sizes = np.asarray(bench.sizes, dtype=np.int64)
    # non-zero values so the sparse sequence materializes what it is given
    values_per_size = [rng.integers(1, 2**31, size=n).tolist() for n in bench.sizes]

    result = BenchmarkResult(operation=bench.operation, sizes=sizes)
    for kind in bench.structures:
        times = np.empty(len(sizes), dtype=np.float64)
        for k, values in enumerate(values_per_size):
            best = np.inf
            for _ in range(bench.repeats):
                seq = build_structure(kind, config)
                best = min(best, timer(seq, values))
            times[k] = best
            logger.info(f"{kind.value}: n = {len(values)}, complete in {best:.6f} s")
        result.seconds[kind.value] = times

    return result
