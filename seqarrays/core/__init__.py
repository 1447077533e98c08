"""Core building blocks: error types, the sequence contract and the
Growable Buffer family every compound structure is built on.
"""

from seqarrays.core.buffer import (
    BlockGrowthBuffer,
    DoublingBuffer,
    GrowableBuffer,
    IncrementOneBuffer,
    create_buffer,
)
from seqarrays.core.contract import SequenceArray, check_index
from seqarrays.core.errors import AllocationFailure, IndexOutOfBounds, SequenceError

__all__ = [
    "SequenceArray",
    "check_index",
    "SequenceError",
    "IndexOutOfBounds",
    "AllocationFailure",
    "GrowableBuffer",
    "DoublingBuffer",
    "IncrementOneBuffer",
    "BlockGrowthBuffer",
    "create_buffer",
]
