"""Sparse Sequence.

A sequence of declared length in which every position equals a default
value unless an explicit (position, value) entry says otherwise. Entries
are kept in a Growable Buffer sorted by position; entries equal to the
default are never stored.

Memory is proportional to the number of non-default elements. Inserting
or removing in the middle renumbers every later entry.
"""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from seqarrays.config.defaults import DEFAULT_DTYPE, DEFAULT_SPARSE_VALUE
from seqarrays.config.sequence_config import SparseConfig
from seqarrays.config.validation import validate_config_section
from seqarrays.core.buffer import DoublingBuffer
from seqarrays.core.contract import SequenceArray, check_index


@dataclass
class SparseEntry:
    """Materialized non-default element.

    Attributes:
        position: Logical index in the sequence
        value: Stored value (never equal to the default)
    """
    position: int
    value: Any


class SparseSequence(SequenceArray):
    """Mostly-default sequence stored as sorted (position, value) entries.

    Reads at unset positions inside the sequence return the default
    value. Inserting at or past the end extends the length; any gap is
    implicitly default and never materialized.

    Args:
        default_value: Value of every position without an entry
        dtype: dtype used by to_numpy() for the dense rendering

    Example:
        >>> seq = SparseSequence(default_value=0)
        >>> seq.insert(7, 1000)
        >>> seq.size(), seq.entry_count
        (1001, 1)
        >>> seq.get(3), seq.get(1000)
        (0, 7)
    """

    def __init__(self, default_value: Any = DEFAULT_SPARSE_VALUE, dtype: Any = DEFAULT_DTYPE):
        self.default_value = default_value
        self._dtype = np.dtype(dtype)
        self._entries = DoublingBuffer()
        self._length = 0

    def _is_default(self, value: Any) -> bool:
        return bool(value == self.default_value)

    def _lower_bound(self, position: int) -> int:
        """Slot of the first entry whose position is >= position."""
        entries = self._entries
        lo, hi = 0, entries.size()
        while lo < hi:
            mid = (lo + hi) // 2
            if entries.get(mid).position < position:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _find(self, position: int) -> Optional[int]:
        slot = self._lower_bound(position)
        if slot < self._entries.size() and self._entries.get(slot).position == position:
            return slot
        return None

    def _shift_positions(self, start_slot: int, delta: int) -> None:
        entries = self._entries
        for slot in range(start_slot, entries.size()):
            entries.get(slot).position += delta

    @property
    def entry_count(self) -> int:
        """Number of materialized (non-default) entries."""
        return self._entries.size()

    def entries(self) -> List[Tuple[int, Any]]:
        """Materialized entries as (position, value) pairs, by position."""
        return [
            (self._entries.get(s).position, self._entries.get(s).value)
            for s in range(self._entries.size())
        ]

    def size(self) -> int:
        return self._length

    def get(self, index: int) -> Any:
        i = check_index(index, self._length, self._length, "get")
        slot = self._find(i)
        if slot is None:
            return self.default_value
        return self._entries.get(slot).value

    def insert(self, elem: Any, index: int) -> None:
        """Insert elem at index.

        Inside the sequence, later positions move up by one. At or past
        the end, the length becomes index + 1.

        Args:
            elem: Value to insert
            index: Target position (>= 0, may exceed size())

        Raises:
            IndexOutOfBounds: If index is negative
        """
        i = check_index(index, sys.maxsize, self._length, "insert")

        if i < self._length:
            slot = self._lower_bound(i)
            self._shift_positions(slot, 1)
            self._length += 1
            if not self._is_default(elem):
                self._entries.insert(SparseEntry(i, elem), slot)
        else:
            self._length = i + 1
            if not self._is_default(elem):
                self._entries.push(SparseEntry(i, elem))

    def remove(self, index: int) -> Any:
        """Remove position index, moving later positions down by one.

        Returns:
            The stored value, or the default value if the position was unset

        Raises:
            IndexOutOfBounds: If index >= size()
        """
        i = check_index(index, self._length, self._length, "remove")
        self._length -= 1

        slot = self._lower_bound(i)
        if slot < self._entries.size() and self._entries.get(slot).position == i:
            value = self._entries.remove(slot).value
            self._shift_positions(slot, -1)
            return value

        self._shift_positions(slot, -1)
        return self.default_value

    def set(self, index: int, value: Any) -> None:
        """Overwrite position index without changing the length.

        Storing the default value drops the entry.

        Raises:
            IndexOutOfBounds: If index >= size()
        """
        i = check_index(index, self._length, self._length, "set")
        slot = self._lower_bound(i)
        exists = slot < self._entries.size() and self._entries.get(slot).position == i

        if self._is_default(value):
            if exists:
                self._entries.remove(slot)
        elif exists:
            self._entries.get(slot).value = value
        else:
            self._entries.insert(SparseEntry(i, value), slot)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def validate(self) -> List[str]:
        """Check entry ordering and contents.

        Returns:
            List of violated invariants (empty if consistent)
        """
        errors = []
        previous = -1
        for position, value in self.entries():
            if position <= previous:
                errors.append(f"entry positions not strictly increasing at {position}")
            if position >= self._length:
                errors.append(f"entry position {position} >= length {self._length}")
            if self._is_default(value):
                errors.append(f"entry at {position} stores the default value")
            previous = position
        return errors

    def to_numpy(self) -> np.ndarray:
        """Dense copy of the sequence."""
        dense = np.full(self._length, self.default_value, dtype=self._dtype)
        for position, value in self.entries():
            dense[position] = value
        return dense

    def entries_repr(self) -> str:
        """Materialized entries formatted as "[(pos, value), ...]"."""
        return "[" + ", ".join(f"({p}, {v})" for p, v in self.entries()) + "]"

    def clear(self) -> None:
        """Drop every entry and reset the length to 0."""
        self._entries.clear()
        self._length = 0

    def __enter__(self) -> "SparseSequence":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False

    def __str__(self) -> str:
        return "[" + ", ".join(str(self.get(i)) for i in range(self._length)) + "]"

    def __repr__(self) -> str:
        return (
            f"SparseSequence(length={self._length}, default={self.default_value!r}, "
            f"entries={self.entries_repr()})"
        )


def create_sparse_sequence(config: Optional[SparseConfig] = None, **overrides) -> SparseSequence:
    """Create an empty SparseSequence from a SparseConfig.

    Args:
        config: Sparse configuration (default: SparseConfig())
        **overrides: SparseConfig fields to replace

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    config = dataclasses.replace(config or SparseConfig(), **overrides)
    validate_config_section(config)
    return SparseSequence(default_value=config.default_value, dtype=config.dtype)
