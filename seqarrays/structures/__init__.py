"""Compound structures built on the Growable Buffer."""

from seqarrays.structures.blocked import BlockedSequence, create_blocked_sequence
from seqarrays.structures.priority_queue import BucketedPriorityQueue
from seqarrays.structures.sparse import SparseEntry, SparseSequence, create_sparse_sequence

__all__ = [
    "BlockedSequence",
    "create_blocked_sequence",
    "SparseSequence",
    "SparseEntry",
    "create_sparse_sequence",
    "BucketedPriorityQueue",
]
