"""Sequence Configuration

Central configuration dataclasses for the buffers, the compound
structures and the benchmark harness. Every factory in the package
takes one of these.

Import Policy:
    from seqarrays.config.sequence_config import SuiteConfig, BufferConfig, BlockedConfig

DO NOT use: from seqarrays.config.sequence_config import *
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from seqarrays.config.defaults import (
    DEFAULT_BENCHMARK_OPERATION,
    DEFAULT_BENCHMARK_REPEATS,
    DEFAULT_BENCHMARK_SEED,
    DEFAULT_BENCHMARK_SIZES,
    DEFAULT_BENCHMARK_STRUCTURES,
    DEFAULT_BLOCK_CAPACITY,
    DEFAULT_DTYPE,
    DEFAULT_GROWTH_BLOCK,
    DEFAULT_GROWTH_POLICY,
    DEFAULT_MAX_CAPACITY,
    DEFAULT_SPARSE_VALUE,
)
from seqarrays.config.enums import BenchmarkOperation, GrowthPolicy, StructureKind


def _check_dtype(dtype: Any, owner: str) -> list[str]:
    """Return errors for a dtype that numpy cannot build or that has zero size."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        return [f"{owner}.dtype {dtype!r} is not a valid numpy dtype: {e}"]
    if resolved.itemsize == 0:
        return [f"{owner}.dtype {dtype!r} has zero itemsize"]
    return []


@dataclass
class BufferConfig:
    """Growable Buffer configuration.

    Attributes:
        policy: Growth policy applied when the buffer is full
        block: Slots added per growth by INCREMENT_BLOCK
        dtype: Element dtype of the backing storage
        max_capacity: Capacity ceiling; growing past it raises AllocationFailure

    """

    policy: GrowthPolicy = GrowthPolicy(DEFAULT_GROWTH_POLICY)
    block: int = DEFAULT_GROWTH_BLOCK
    dtype: str = DEFAULT_DTYPE
    max_capacity: int = DEFAULT_MAX_CAPACITY

    def validate(self) -> list[str]:
        """Validate buffer configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        if not isinstance(self.policy, GrowthPolicy):
            errors.append(f"policy must be a GrowthPolicy, got {self.policy!r}")
        if self.block <= 0:
            errors.append(f"block must be > 0, got {self.block}")
        if self.max_capacity <= 0:
            errors.append(f"max_capacity must be > 0, got {self.max_capacity}")
        errors.extend(_check_dtype(self.dtype, "buffer"))

        return errors


@dataclass
class BlockedConfig:
    """Blocked Sequence configuration.

    Attributes:
        block_capacity: Elements per full block
        dtype: Element dtype of every block

    """

    block_capacity: int = DEFAULT_BLOCK_CAPACITY
    dtype: str = DEFAULT_DTYPE

    def validate(self) -> list[str]:
        errors = []

        if self.block_capacity <= 0:
            errors.append(f"block_capacity must be > 0, got {self.block_capacity}")
        errors.extend(_check_dtype(self.dtype, "blocked"))

        return errors


@dataclass
class SparseConfig:
    """Sparse Sequence configuration.

    Attributes:
        default_value: Value of every position without an explicit entry
        dtype: Dtype of the stored entry values

    """

    default_value: Any = DEFAULT_SPARSE_VALUE
    dtype: str = DEFAULT_DTYPE

    def validate(self) -> list[str]:
        return _check_dtype(self.dtype, "sparse")


@dataclass
class BenchmarkConfig:
    """Benchmark harness configuration.

    Attributes:
        structures: Structures to time, in report order
        sizes: Sequence sizes to time
        repeats: Timings per (structure, size); the fastest is kept
        operation: Operation to time
        seed: Seed for the pushed values

    """

    structures: list[StructureKind] = field(
        default_factory=lambda: [StructureKind(s) for s in DEFAULT_BENCHMARK_STRUCTURES],
    )
    sizes: list[int] = field(default_factory=lambda: list(DEFAULT_BENCHMARK_SIZES))
    repeats: int = DEFAULT_BENCHMARK_REPEATS
    operation: BenchmarkOperation = BenchmarkOperation(DEFAULT_BENCHMARK_OPERATION)
    seed: int = DEFAULT_BENCHMARK_SEED

    def validate(self) -> list[str]:
        errors = []

        if not self.structures:
            errors.append("structures must not be empty")
        if not self.sizes:
            errors.append("sizes must not be empty")
        for n in self.sizes:
            if n <= 0:
                errors.append(f"sizes must be > 0, got {n}")
        if self.repeats <= 0:
            errors.append(f"repeats must be > 0, got {self.repeats}")

        return errors


@dataclass
class SuiteConfig:
    """Complete configuration for the package.

    Example:
        >>> config = SuiteConfig()
        >>> errors = config.validate()
        >>> if errors:
        ...     for err in errors:
        ...         print(f"Configuration error: {err}")

    Attributes:
        buffer: Growable Buffer configuration
        blocked: Blocked Sequence configuration
        sparse: Sparse Sequence configuration
        benchmark: Benchmark harness configuration

    """

    buffer: BufferConfig = field(default_factory=BufferConfig)
    blocked: BlockedConfig = field(default_factory=BlockedConfig)
    sparse: SparseConfig = field(default_factory=SparseConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    def validate(self) -> list[str]:
        """Validate every sub-configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        errors.extend(self.buffer.validate())
        errors.extend(self.blocked.validate())
        errors.extend(self.sparse.validate())
        errors.extend(self.benchmark.validate())

        return errors

    def to_dict(self) -> dict:
        """Convert configuration to a plain dictionary (enums as values).

        Returns:
            Dictionary representation of configuration

        """
        return {
            "buffer": {
                "policy": self.buffer.policy.value,
                "block": self.buffer.block,
                "dtype": self.buffer.dtype,
                "max_capacity": self.buffer.max_capacity,
            },
            "blocked": {
                "block_capacity": self.blocked.block_capacity,
                "dtype": self.blocked.dtype,
            },
            "sparse": {
                "default_value": self.sparse.default_value,
                "dtype": self.sparse.dtype,
            },
            "benchmark": {
                "structures": [s.value for s in self.benchmark.structures],
                "sizes": list(self.benchmark.sizes),
                "repeats": self.benchmark.repeats,
                "operation": self.benchmark.operation.value,
                "seed": self.benchmark.seed,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SuiteConfig":
        """Create configuration from dictionary.

        Missing keys fall back to the package defaults.

        Args:
            data: Dictionary representation of configuration

        Returns:
            SuiteConfig instance

        """
        def parse_enum(enum_cls, value):
            if isinstance(value, str):
                return enum_cls(value)
            return value

        buffer_data = data.get("buffer") or {}
        blocked_data = data.get("blocked") or {}
        sparse_data = data.get("sparse") or {}
        benchmark_data = data.get("benchmark") or {}

        buffer = BufferConfig(
            policy=parse_enum(GrowthPolicy, buffer_data.get("policy", DEFAULT_GROWTH_POLICY)),
            block=buffer_data.get("block", DEFAULT_GROWTH_BLOCK),
            dtype=buffer_data.get("dtype", DEFAULT_DTYPE),
            max_capacity=buffer_data.get("max_capacity", DEFAULT_MAX_CAPACITY),
        )

        blocked = BlockedConfig(
            block_capacity=blocked_data.get("block_capacity", DEFAULT_BLOCK_CAPACITY),
            dtype=blocked_data.get("dtype", DEFAULT_DTYPE),
        )

        sparse = SparseConfig(
            default_value=sparse_data.get("default_value", DEFAULT_SPARSE_VALUE),
            dtype=sparse_data.get("dtype", DEFAULT_DTYPE),
        )

        benchmark = BenchmarkConfig(
            structures=[
                parse_enum(StructureKind, s)
                for s in benchmark_data.get("structures", DEFAULT_BENCHMARK_STRUCTURES)
            ],
            sizes=list(benchmark_data.get("sizes", DEFAULT_BENCHMARK_SIZES)),
            repeats=benchmark_data.get("repeats", DEFAULT_BENCHMARK_REPEATS),
            operation=parse_enum(
                BenchmarkOperation,
                benchmark_data.get("operation", DEFAULT_BENCHMARK_OPERATION),
            ),
            seed=benchmark_data.get("seed", DEFAULT_BENCHMARK_SEED),
        )

        return cls(buffer=buffer, blocked=blocked, sparse=sparse, benchmark=benchmark)


def load_suite_config(yaml_path: str | Path) -> SuiteConfig:
    """Load a SuiteConfig from a YAML file.

    Args:
        yaml_path: Path to a YAML file with any of the sections
            ``buffer``, ``blocked``, ``sparse``, ``benchmark``

    Returns:
        SuiteConfig instance (not yet validated)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML top level is not a mapping

    """
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Suite config not found: {yaml_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Suite config must be a mapping, got {type(data).__name__}")

    return SuiteConfig.from_dict(data)


def create_default_config() -> SuiteConfig:
    """Create the default configuration from defaults.yaml.

    Returns:
        Valid SuiteConfig instance

    """
    from seqarrays.config.yaml_loader import get_defaults

    config = SuiteConfig.from_dict(get_defaults())
    errors = config.validate()

    if errors:
        raise ValueError("Default configuration is invalid:\n" + "\n".join(errors))

    return config
