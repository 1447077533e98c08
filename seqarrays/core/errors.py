"""Error types raised by every sequence structure.

Import Policy:
    from seqarrays.core.errors import IndexOutOfBounds, AllocationFailure
"""

from typing import Optional


class SequenceError(Exception):
    """Base class for seqarrays errors."""

    pass


class IndexOutOfBounds(SequenceError, IndexError):
    """Index outside the valid range of the attempted operation.

    Subclasses IndexError so the legacy sequence protocol (iteration via
    __getitem__) stops at the end of a container.

    Attributes:
        operation: Name of the failing operation ('get', 'insert', ...)
        index: Offending index
        length: Container length at the time of the call
    """

    def __init__(self, operation: str, index: int, length: int, message: Optional[str] = None):
        self.operation = operation
        self.index = index
        self.length = length
        if message is None:
            message = f"{operation} index {index} out of bounds for length {length}"
        super().__init__(message)


class AllocationFailure(SequenceError, MemoryError):
    """Backing storage cannot grow to the requested capacity.

    Raised before any element is moved, so the container is unchanged.

    Attributes:
        requested: Capacity that could not be allocated
        capacity: Capacity at the time of the failure
    """

    def __init__(self, requested: int, capacity: int, reason: str = "allocation failed"):
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Cannot grow buffer from {capacity} to {requested} slots: {reason}"
        )
