"""Blocked Sequence (two-level array).

One flat logical sequence stored as an ordered run of fixed-capacity
blocks. Every block except the last holds exactly `block_capacity`
elements, so logical position i lives at
(i // block_capacity, i % block_capacity).

Insertion into a full block carries that block's last element into the
front of the next block, block after block, until a block has room.
Removal pulls the first element of each later block back across the
boundary. Both keep the "all but last full" layout.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, List, Optional

import numpy as np

from seqarrays.config.defaults import DEFAULT_BLOCK_CAPACITY, DEFAULT_DTYPE
from seqarrays.config.sequence_config import BlockedConfig
from seqarrays.config.validation import validate_config_section
from seqarrays.core.buffer import BlockGrowthBuffer, DoublingBuffer
from seqarrays.core.contract import SequenceArray, check_index

logger = logging.getLogger(__name__)


class BlockedSequence(SequenceArray):
    """Sequence paged into blocks of `block_capacity` elements.

    Args:
        block_capacity: Elements per full block (> 0)
        dtype: numpy dtype of the elements stored in each block

    Example:
        >>> seq = BlockedSequence(block_capacity=2)
        >>> for v in range(5):
        ...     seq.push(v)
        >>> seq.block_sizes()
        [2, 2, 1]
        >>> seq.insert(99, 0)
        >>> seq.block_sizes()
        [2, 2, 2]
    """

    def __init__(self, block_capacity: int = DEFAULT_BLOCK_CAPACITY, dtype: Any = DEFAULT_DTYPE):
        if block_capacity <= 0:
            raise ValueError(f"block_capacity must be > 0, got {block_capacity}")
        self.block_capacity = block_capacity
        self._dtype = np.dtype(dtype)
        if self._dtype.itemsize == 0:
            raise ValueError(f"Zero-size element dtype {self._dtype!r} is not supported")
        self._blocks = DoublingBuffer()
        self._total_length = 0

    def _new_block(self) -> BlockGrowthBuffer:
        # first growth allocates exactly one block
        return BlockGrowthBuffer(block=self.block_capacity, dtype=self._dtype)

    @property
    def block_count(self) -> int:
        return self._blocks.size()

    def block_sizes(self) -> List[int]:
        """Number of elements in each block, in order."""
        return [self._blocks.get(b).size() for b in range(self._blocks.size())]

    def size(self) -> int:
        return self._total_length

    def get(self, index: int) -> Any:
        i = check_index(index, self._total_length, self._total_length, "get")
        block_idx, offset = divmod(i, self.block_capacity)
        return self._blocks.get(block_idx).get(offset)

    def insert(self, elem: Any, index: int) -> None:
        """Insert elem at index, carrying overflow into later blocks.

        Args:
            elem: Value to insert
            index: Target position, 0 <= index <= size()

        Raises:
            IndexOutOfBounds: If index > size()
            ValueError: If elem cannot be stored in the block dtype
        """
        i = check_index(index, self._total_length + 1, self._total_length, "insert")
        if not self._dtype.hasobject:
            # a value the blocks cannot hold must fail before a block is added
            elem = np.asarray(elem, dtype=self._dtype)

        blocks = self._blocks
        if blocks.size() == 0 or blocks.last().size() == self.block_capacity:
            blocks.push(self._new_block())
            logger.debug(f"Appended block {blocks.size() - 1}")

        block_idx, offset = divmod(i, self.block_capacity)
        block = blocks.get(block_idx)
        block.insert(elem, offset)

        # The last block always has room, so the carry stops there at the latest.
        while block.size() > self.block_capacity:
            carry = block.pop()
            block_idx += 1
            block = blocks.get(block_idx)
            block.insert(carry, 0)

        self._total_length += 1

    def remove(self, index: int) -> Any:
        """Remove and return the element at index, refilling earlier blocks.

        Args:
            index: Position to remove, 0 <= index < size()

        Returns:
            The removed element

        Raises:
            IndexOutOfBounds: If index >= size()
        """
        i = check_index(index, self._total_length, self._total_length, "remove")

        blocks = self._blocks
        block_idx, offset = divmod(i, self.block_capacity)
        value = blocks.get(block_idx).remove(offset)

        for b in range(block_idx + 1, blocks.size()):
            blocks.get(b - 1).push(blocks.get(b).remove(0))

        if blocks.last().size() == 0:
            blocks.pop().clear()
            logger.debug(f"Dropped empty block {blocks.size()}")

        self._total_length -= 1
        return value

    def validate(self) -> List[str]:
        """Check the block layout.

        Returns:
            List of violated invariants (empty if consistent)
        """
        errors = []
        sizes = self.block_sizes()

        for b, n in enumerate(sizes[:-1]):
            if n != self.block_capacity:
                errors.append(
                    f"block {b} holds {n} elements, expected {self.block_capacity}"
                )
        if sizes and not 1 <= sizes[-1] <= self.block_capacity:
            errors.append(
                f"last block holds {sizes[-1]} elements, expected 1..{self.block_capacity}"
            )
        if sum(sizes) != self._total_length:
            errors.append(
                f"total_length {self._total_length} != sum of block sizes {sum(sizes)}"
            )

        return errors

    def to_numpy(self) -> np.ndarray:
        """Copy of the whole sequence as one 1-D array."""
        if self._blocks.size() == 0:
            return np.empty(0, dtype=self._dtype)
        return np.concatenate(
            [self._blocks.get(b).to_numpy() for b in range(self._blocks.size())]
        )

    def clear(self) -> None:
        """Release every block and empty the sequence."""
        for b in range(self._blocks.size()):
            self._blocks.get(b).clear()
        self._blocks.clear()
        self._total_length = 0

    def __enter__(self) -> "BlockedSequence":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False

    def __repr__(self) -> str:
        return (
            f"BlockedSequence({self.to_numpy().tolist()!r}, "
            f"block_capacity={self.block_capacity})"
        )


def create_blocked_sequence(config: Optional[BlockedConfig] = None, **overrides) -> BlockedSequence:
    """Create an empty BlockedSequence from a BlockedConfig.

    Args:
        config: Blocked configuration (default: BlockedConfig())
        **overrides: BlockedConfig fields to replace

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    config = dataclasses.replace(config or BlockedConfig(), **overrides)
    validate_config_section(config)
    return BlockedSequence(block_capacity=config.block_capacity, dtype=config.dtype)
