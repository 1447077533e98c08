"""
Configuration Enums for seqarrays

This module defines the enumeration types used by the configuration layer
and by the structure factories.

Import Policy:
    from seqarrays.config.enums import GrowthPolicy, StructureKind, BenchmarkOperation

DO NOT use: from seqarrays.config.enums import *
"""

from enum import Enum


class GrowthPolicy(Enum):
    """How a Growable Buffer chooses its next capacity.

    Options:
        DOUBLING: 1 when empty, else 2 * capacity (amortized O(1) push, default)
        INCREMENT_ONE: capacity + 1 (O(n) push, pathological baseline)
        INCREMENT_BLOCK: capacity + block (O(n / block) reallocations)

    Warning:
        INCREMENT_ONE reallocates on every push. Use it only as a
        comparison baseline, never for large sequences.
    """
    DOUBLING = "doubling"
    INCREMENT_ONE = "increment_one"
    INCREMENT_BLOCK = "increment_block"


class StructureKind(Enum):
    """Every implementation of the sequence contract.

    Options:
        LIST: Python list adapter (standard dynamic array baseline)
        INCREMENT_ONE: Growable Buffer with increment-by-one growth
        INCREMENT_BLOCK: Growable Buffer with increment-by-block growth
        DOUBLING: Growable Buffer with doubling growth
        BLOCKED: Blocked Sequence (two-level array)
        SPARSE: Sparse Sequence
    """
    LIST = "list"
    INCREMENT_ONE = "increment_one"
    INCREMENT_BLOCK = "increment_block"
    DOUBLING = "doubling"
    BLOCKED = "blocked"
    SPARSE = "sparse"


class BenchmarkOperation(Enum):
    """Operation timed by the benchmark harness.

    Options:
        PUSH: n appends at the end
        INSERT_FRONT: n inserts at index 0 (worst case shifting)
    """
    PUSH = "push"
    INSERT_FRONT = "insert_front"
