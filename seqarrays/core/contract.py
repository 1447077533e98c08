"""Shared sequence contract.

Every structure in the package (and the list adapter used by the
benchmark harness) implements the same five operations:

    size()               -> number of live elements
    push(value)          -> append at the end
    get(index)           -> element at index, IndexOutOfBounds if index >= size()
    insert(value, index) -> IndexOutOfBounds if index > size()
    remove(index)        -> removed element, IndexOutOfBounds if index >= size()

Positions are unsigned: negative indices are always out of bounds.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any

from seqarrays.core.errors import IndexOutOfBounds


def check_index(index: Any, limit: int, length: int, operation: str) -> int:
    """Normalize an index and check 0 <= index < limit.

    Args:
        index: Candidate index (anything supporting __index__)
        limit: Exclusive upper bound for this operation
        length: Container length, reported in the error
        operation: Operation name, reported in the error

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfBounds: If index is negative or >= limit
    """
    try:
        i = operator.index(index)
    except TypeError:
        raise TypeError(
            f"{operation} index must be an integer, got {type(index).__name__}"
        ) from None
    if i < 0 or i >= limit:
        raise IndexOutOfBounds(operation, i, length)
    return i


class SequenceArray(ABC):
    """Abstract index-addressable sequence.

    Subclasses implement size/get/insert/remove; push, __len__ and
    __getitem__ are derived from them.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of live elements."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """Element at index."""

    @abstractmethod
    def insert(self, elem: Any, index: int) -> None:
        """Insert elem so that it ends up at position index."""

    @abstractmethod
    def remove(self, index: int) -> Any:
        """Remove and return the element at index."""

    def push(self, elem: Any) -> None:
        """Append elem; same as insert(elem, size())."""
        self.insert(elem, self.size())

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> Any:
        return self.get(index)
