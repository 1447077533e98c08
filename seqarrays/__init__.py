"""seqarrays - Resizable index-addressable sequence containers

A family of sequence containers sharing one contract
(size, push, get, insert, remove) with different storage strategies:

- Growable Buffers over one contiguous numpy allocation, with
  doubling, increment-by-one and increment-by-block growth
- Blocked Sequence: fixed-capacity blocks, all full but the last
- Sparse Sequence: sorted (position, value) entries over a default value
- Bucketed Priority Queue: one LIFO stack per priority

Version: 0.1
"""

__version__ = "0.1"

# Core
from seqarrays.core import (
    AllocationFailure,
    BlockGrowthBuffer,
    DoublingBuffer,
    GrowableBuffer,
    IncrementOneBuffer,
    IndexOutOfBounds,
    SequenceArray,
    SequenceError,
    create_buffer,
)

# Structures
from seqarrays.structures import (
    BlockedSequence,
    BucketedPriorityQueue,
    SparseEntry,
    SparseSequence,
    create_blocked_sequence,
    create_sparse_sequence,
)

# Configuration
from seqarrays.config import (
    GrowthPolicy,
    StructureKind,
    SuiteConfig,
    create_default_config,
    create_validated_config,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "SequenceArray",
    "SequenceError",
    "IndexOutOfBounds",
    "AllocationFailure",
    "GrowableBuffer",
    "DoublingBuffer",
    "IncrementOneBuffer",
    "BlockGrowthBuffer",
    "create_buffer",
    # Structures
    "BlockedSequence",
    "create_blocked_sequence",
    "SparseSequence",
    "SparseEntry",
    "create_sparse_sequence",
    "BucketedPriorityQueue",
    # Configuration
    "GrowthPolicy",
    "StructureKind",
    "SuiteConfig",
    "create_default_config",
    "create_validated_config",
]
