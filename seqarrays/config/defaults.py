"""
Default Configuration Constants for seqarrays

This module contains the default values used throughout the package.
It is the single place where defaults are defined.

IMPORTANT Import Policies:
    1. DO NOT use: from seqarrays.config.defaults import *

    2. DO use explicit imports:
       from seqarrays.config.defaults import DEFAULT_GROWTH_BLOCK, DEFAULT_DTYPE

    3. DO NOT define defaults elsewhere. All defaults must be in this file.
"""

# =============================================================================
# Growable Buffer Defaults
# =============================================================================

# Growth policy used by create_buffer() when none is given
DEFAULT_GROWTH_POLICY = "doubling"

# Slots added per reallocation by the increment-by-block policy
DEFAULT_GROWTH_BLOCK = 5

# Element dtype of the backing storage
# "object": any Python value (default)
# numeric dtypes ("int64", "float64", ...) give typed contiguous storage
DEFAULT_DTYPE = "object"

# Largest capacity a buffer may grow to (slots)
# Growth beyond this raises AllocationFailure
DEFAULT_MAX_CAPACITY = 2**31 - 1

# =============================================================================
# Blocked Sequence Defaults
# =============================================================================

# Number of elements held by every block except possibly the last
DEFAULT_BLOCK_CAPACITY = 5

# =============================================================================
# Sparse Sequence Defaults
# =============================================================================

# Value of every position that has no materialized entry
DEFAULT_SPARSE_VALUE = 0

# =============================================================================
# Benchmark Defaults
# =============================================================================

# Sequence sizes timed by the benchmark harness
DEFAULT_BENCHMARK_SIZES = (10, 100, 1000, 10000)

# Each (structure, size) pair is timed this many times; the best is kept
DEFAULT_BENCHMARK_REPEATS = 3

# Structures timed when none are given
DEFAULT_BENCHMARK_STRUCTURES = (
    "list",
    "increment_one",
    "increment_block",
    "doubling",
    "blocked",
    "sparse",
)

# Operation timed when none is given
DEFAULT_BENCHMARK_OPERATION = "push"

# Seed for the values pushed during a benchmark
DEFAULT_BENCHMARK_SEED = 42

# Above this size increment-by-one growth is reported as unsafe
INCREMENT_ONE_WARN_SIZE = 100_000
