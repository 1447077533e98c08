"""Growable Buffer family.

A Growable Buffer owns one contiguous numpy array of `capacity` slots,
of which the first `length` hold live elements. Slots past `length` are
never read. When an insertion finds the buffer full, the buffer grows
to a new capacity chosen by its growth policy, moving the live elements
into the new allocation.

Growth policies:
    DoublingBuffer:      1 when empty, else 2 * capacity
    IncrementOneBuffer:  capacity + 1
    BlockGrowthBuffer:   capacity + block

Import Policy:
    from seqarrays.core.buffer import DoublingBuffer, create_buffer
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional

import numpy as np

from seqarrays.config.defaults import DEFAULT_DTYPE, DEFAULT_GROWTH_BLOCK, DEFAULT_MAX_CAPACITY
from seqarrays.config.enums import GrowthPolicy
from seqarrays.config.sequence_config import BufferConfig
from seqarrays.config.validation import validate_config_section
from seqarrays.core.contract import SequenceArray, check_index
from seqarrays.core.errors import AllocationFailure, IndexOutOfBounds

logger = logging.getLogger(__name__)


class GrowableBuffer(SequenceArray):
    """Contiguous buffer with explicit length/capacity tracking.

    Subclasses only choose the next capacity (_next_capacity). Storage
    is released by clear(), or on leaving a `with` block:

        >>> with DoublingBuffer() as buf:
        ...     buf.push(1)
        ...     buf.push(2)
        ...     buf.remove(0)
        1

    Attributes:
        policy: Growth policy implemented by the subclass
        max_capacity: Capacity ceiling; growth past it raises AllocationFailure
    """

    policy: GrowthPolicy

    def __init__(self, dtype: Any = DEFAULT_DTYPE, max_capacity: int = DEFAULT_MAX_CAPACITY):
        """Create an empty buffer (capacity 0, no allocation).

        Args:
            dtype: numpy dtype of the elements (default: object)
            max_capacity: Largest capacity the buffer may grow to

        Raises:
            ValueError: If dtype has zero itemsize or max_capacity <= 0
        """
        self._dtype = np.dtype(dtype)
        if self._dtype.itemsize == 0:
            raise ValueError(f"Zero-size element dtype {self._dtype!r} is not supported")
        if max_capacity <= 0:
            raise ValueError(f"max_capacity must be > 0, got {max_capacity}")

        self.max_capacity = max_capacity
        self._storage: Optional[np.ndarray] = None
        self._capacity = 0
        self._length = 0

    def _next_capacity(self) -> int:
        raise NotImplementedError

    def _grow(self) -> None:
        """Reallocate to the policy's next capacity, moving live elements."""
        requested = self._next_capacity()
        new_capacity = min(requested, self.max_capacity)
        if new_capacity <= self._capacity:
            raise AllocationFailure(
                requested, self._capacity, f"exceeds max_capacity {self.max_capacity}",
            )

        try:
            new_storage = np.empty(new_capacity, dtype=self._dtype)
        except MemoryError as e:
            raise AllocationFailure(new_capacity, self._capacity) from e

        if self._length:
            new_storage[:self._length] = self._storage[:self._length]

        logger.debug(
            f"{type(self).__name__} grow {self._capacity} -> {new_capacity} "
            f"(length {self._length})"
        )
        self._storage = new_storage
        self._capacity = new_capacity

    @property
    def capacity(self) -> int:
        """Number of allocated slots, occupied or not."""
        return self._capacity

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def size(self) -> int:
        return self._length

    def get(self, index: int) -> Any:
        i = check_index(index, self._length, self._length, "get")
        return self._storage[i]

    def insert(self, elem: Any, index: int) -> None:
        """Insert elem at index, shifting later elements one slot right.

        Args:
            elem: Value to insert
            index: Target position, 0 <= index <= size()

        Raises:
            IndexOutOfBounds: If index > size()
            AllocationFailure: If the buffer is full and cannot grow
        """
        i = check_index(index, self._length + 1, self._length, "insert")
        if not self._dtype.hasobject:
            # convert before shifting so a bad value leaves the buffer intact
            elem = np.asarray(elem, dtype=self._dtype)
        if self._length == self._capacity:
            self._grow()

        storage = self._storage
        storage[i + 1:self._length + 1] = storage[i:self._length]
        storage[i] = elem
        self._length += 1

    def remove(self, index: int) -> Any:
        """Remove the element at index, shifting later elements one slot left.

        Args:
            index: Position to remove, 0 <= index < size()

        Returns:
            The removed element

        Raises:
            IndexOutOfBounds: If index >= size()
        """
        i = check_index(index, self._length, self._length, "remove")

        storage = self._storage
        value = storage[i]
        storage[i:self._length - 1] = storage[i + 1:self._length]
        self._length -= 1
        if self._dtype.hasobject:
            # vacated slot must not keep the object alive
            storage[self._length] = None
        return value

    def pop(self) -> Any:
        """Remove and return the last element.

        Raises:
            IndexOutOfBounds: If the buffer is empty
        """
        if self._length == 0:
            raise IndexOutOfBounds("pop", 0, 0, "pop from empty buffer")
        return self.remove(self._length - 1)

    def first(self) -> Any:
        if self._length == 0:
            raise IndexOutOfBounds("first", 0, 0, "first of empty buffer")
        return self._storage[0]

    def last(self) -> Any:
        if self._length == 0:
            raise IndexOutOfBounds("last", 0, 0, "last of empty buffer")
        return self._storage[self._length - 1]

    def __setitem__(self, index: int, value: Any) -> None:
        i = check_index(index, self._length, self._length, "set")
        self._storage[i] = value

    def to_numpy(self) -> np.ndarray:
        """Copy of the live elements as a 1-D array of the buffer dtype."""
        if self._storage is None:
            return np.empty(0, dtype=self._dtype)
        return self._storage[:self._length].copy()

    def clear(self) -> None:
        """Drop every live element, first to last, and release the storage.

        Capacity returns to 0. Calling clear() on an already released
        buffer does nothing; the buffer can be reused afterwards.
        """
        if self._storage is None:
            return
        if self._dtype.hasobject:
            for i in range(self._length):
                self._storage[i] = None
        self._length = 0
        logger.debug(f"{type(self).__name__} release {self._capacity} slots")
        self._storage = None
        self._capacity = 0

    release = clear

    def __enter__(self) -> "GrowableBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_numpy().tolist()!r}, "
            f"capacity={self._capacity})"
        )


class DoublingBuffer(GrowableBuffer):
    """Buffer that doubles its capacity (1 when empty). Amortized O(1) push."""

    policy = GrowthPolicy.DOUBLING

    def _next_capacity(self) -> int:
        return 1 if self._capacity == 0 else 2 * self._capacity


class IncrementOneBuffer(GrowableBuffer):
    """Buffer that grows by a single slot. Reallocates on every full push."""

    policy = GrowthPolicy.INCREMENT_ONE

    def _next_capacity(self) -> int:
        return self._capacity + 1


class BlockGrowthBuffer(GrowableBuffer):
    """Buffer that grows by a fixed number of slots.

    Args:
        block: Slots added per growth (> 0)
        dtype: numpy dtype of the elements
        max_capacity: Largest capacity the buffer may grow to
    """

    policy = GrowthPolicy.INCREMENT_BLOCK

    def __init__(
        self,
        block: int = DEFAULT_GROWTH_BLOCK,
        dtype: Any = DEFAULT_DTYPE,
        max_capacity: int = DEFAULT_MAX_CAPACITY,
    ):
        if block <= 0:
            raise ValueError(f"block must be > 0, got {block}")
        super().__init__(dtype=dtype, max_capacity=max_capacity)
        self.block = block

    def _next_capacity(self) -> int:
        return self._capacity + self.block


def create_buffer(config: Optional[BufferConfig] = None, **overrides) -> GrowableBuffer:
    """Create an empty buffer from a BufferConfig.

    Args:
        config: Buffer configuration (default: BufferConfig())
        **overrides: BufferConfig fields to replace, e.g. policy=GrowthPolicy.INCREMENT_ONE

    Returns:
        Empty buffer of the configured policy

    Raises:
        ConfigurationError: If the resulting configuration is invalid

    Example:
        >>> buf = create_buffer(policy=GrowthPolicy.INCREMENT_BLOCK, block=16)
        >>> buf.push(7)
        >>> buf.capacity
        16
    """
    config = dataclasses.replace(config or BufferConfig(), **overrides)
    validate_config_section(config)

    if config.policy == GrowthPolicy.DOUBLING:
        return DoublingBuffer(dtype=config.dtype, max_capacity=config.max_capacity)
    if config.policy == GrowthPolicy.INCREMENT_ONE:
        return IncrementOneBuffer(dtype=config.dtype, max_capacity=config.max_capacity)
    return BlockGrowthBuffer(
        block=config.block, dtype=config.dtype, max_capacity=config.max_capacity,
    )
