"""Tests for the Growable Buffer family."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from seqarrays.config.enums import GrowthPolicy
from seqarrays.config.sequence_config import BufferConfig
from seqarrays.config.validation import ConfigurationError
from seqarrays.core.buffer import (
    BlockGrowthBuffer,
    DoublingBuffer,
    IncrementOneBuffer,
    create_buffer,
)
from seqarrays.core.errors import AllocationFailure, IndexOutOfBounds


class TestBufferLifecycle:
    """Creation, push/pop and release."""

    def test_created_empty_without_allocation(self, any_buffer):
        """A new buffer has length 0 and capacity 0."""
        assert any_buffer.size() == 0
        assert any_buffer.capacity == 0
        assert len(any_buffer) == 0

    def test_push_then_pop(self, any_buffer):
        """Single push/pop round trip, then pop on empty fails."""
        any_buffer.push(42)
        assert any_buffer.pop() == 42
        with pytest.raises(IndexOutOfBounds, match="pop from empty buffer"):
            any_buffer.pop()

    def test_pop_returns_reverse_order(self, any_buffer):
        """k pushes followed by k pops come back reversed."""
        values = list(range(25))
        for v in values:
            any_buffer.push(v)
        popped = [any_buffer.pop() for _ in values]
        assert popped == values[::-1]
        assert any_buffer.size() == 0

    def test_256_byte_values(self, doubling_buffer):
        """Push 0..255, index, overwrite and peek at both ends."""
        for x in range(256):
            doubling_buffer.push(x)

        assert doubling_buffer.size() == 256
        assert doubling_buffer[22] == 22
        doubling_buffer[255] = 42
        assert doubling_buffer.last() == 42
        doubling_buffer[0] = 255
        assert doubling_buffer.first() == doubling_buffer.get(254) + 1

    def test_clear_releases_storage(self, any_buffer):
        """clear() empties the buffer and drops capacity to 0."""
        for v in range(10):
            any_buffer.push(v)
        any_buffer.clear()
        assert any_buffer.size() == 0
        assert any_buffer.capacity == 0
        # second release is a no-op
        any_buffer.release()
        assert any_buffer.capacity == 0

    def test_clear_drops_elements_in_order(self, doubling_buffer):
        """Elements are released front to back."""
        dropped = []

        class Tracked:
            def __init__(self, tag):
                self.tag = tag

            def __del__(self):
                dropped.append(self.tag)

        for tag in range(5):
            doubling_buffer.push(Tracked(tag))
        doubling_buffer.clear()
        assert dropped == [0, 1, 2, 3, 4]

    def test_reusable_after_clear(self, doubling_buffer):
        """A released buffer grows again from zero."""
        doubling_buffer.push("a")
        doubling_buffer.clear()
        doubling_buffer.push("b")
        assert doubling_buffer.get(0) == "b"
        assert doubling_buffer.capacity == 1

    def test_context_manager_releases(self):
        """Leaving a with block releases the storage, also on error."""
        with DoublingBuffer() as buf:
            buf.push(1)
            buf.push(2)
        assert buf.capacity == 0

        with pytest.raises(RuntimeError):
            with IncrementOneBuffer() as buf2:
                buf2.push(1)
                raise RuntimeError("boom")
        assert buf2.capacity == 0
        assert buf2.size() == 0

    def test_remove_vacates_object_slot(self, doubling_buffer):
        """Removed objects are not kept alive by the vacated slot."""
        for v in ["a", "b", "c"]:
            doubling_buffer.push(v)
        doubling_buffer.remove(0)
        assert doubling_buffer._storage[2] is None


class TestGrowthPolicies:
    """Capacity chosen by each policy."""

    def test_doubling_sequence(self, doubling_buffer):
        """Capacities go 1, 2, 4, 8, ..."""
        seen = []
        for v in range(17):
            doubling_buffer.push(v)
            if not seen or seen[-1] != doubling_buffer.capacity:
                seen.append(doubling_buffer.capacity)
        assert seen == [1, 2, 4, 8, 16, 32]

    def test_increment_one_matches_length(self, increment_one_buffer):
        """Capacity grows one slot per full push."""
        for v in range(7):
            increment_one_buffer.push(v)
            assert increment_one_buffer.capacity == increment_one_buffer.size()

    def test_increment_block(self, block_buffer):
        """Capacity grows in steps of the block size."""
        block_buffer.push(0)
        assert block_buffer.capacity == 10
        for v in range(1, 10):
            block_buffer.push(v)
        assert block_buffer.capacity == 10
        block_buffer.push(10)
        assert block_buffer.capacity == 20

    def test_capacity_never_decreases(self, any_buffer):
        """Removes leave capacity untouched; growth strictly increases it."""
        previous = 0
        for v in range(30):
            before = any_buffer.capacity
            any_buffer.push(v)
            assert any_buffer.capacity >= before
            assert any_buffer.capacity >= any_buffer.size()
            if any_buffer.capacity != before:
                assert any_buffer.capacity > previous
                previous = any_buffer.capacity
        cap = any_buffer.capacity
        while any_buffer.size():
            any_buffer.remove(0)
        assert any_buffer.capacity == cap

    def test_invalid_block(self):
        """block must be positive."""
        with pytest.raises(ValueError, match="block must be > 0"):
            BlockGrowthBuffer(block=0)

    def test_policy_attribute(self):
        assert DoublingBuffer.policy == GrowthPolicy.DOUBLING
        assert IncrementOneBuffer.policy == GrowthPolicy.INCREMENT_ONE
        assert BlockGrowthBuffer.policy == GrowthPolicy.INCREMENT_BLOCK


class TestIndexedOperations:
    """insert/remove/get semantics and bounds."""

    def test_array_interface(self, any_buffer):
        """Mixed inserts then a front removal."""
        any_buffer.insert(42, 0)
        any_buffer.insert(1024, 0)
        any_buffer.insert(-339, 2)
        any_buffer.insert(-851, 1)
        assert [any_buffer.get(i) for i in range(4)] == [1024, -851, 42, -339]

        assert any_buffer.remove(0) == 1024
        assert [any_buffer.get(i) for i in range(3)] == [-851, 42, -339]

    def test_get_out_of_bounds(self, any_buffer):
        any_buffer.push(1)
        with pytest.raises(IndexOutOfBounds, match="get index 1 out of bounds for length 1"):
            any_buffer.get(1)

    def test_insert_past_end(self, any_buffer):
        with pytest.raises(IndexOutOfBounds) as excinfo:
            any_buffer.insert(1, 1)
        assert excinfo.value.index == 1
        assert excinfo.value.length == 0
        assert excinfo.value.operation == "insert"

    def test_remove_at_size(self, any_buffer):
        any_buffer.push(1)
        with pytest.raises(IndexOutOfBounds):
            any_buffer.remove(1)

    def test_negative_index_rejected(self, any_buffer):
        """Positions are unsigned."""
        any_buffer.push(1)
        with pytest.raises(IndexOutOfBounds):
            any_buffer.get(-1)

    def test_non_integer_index(self, any_buffer):
        any_buffer.push(1)
        with pytest.raises(TypeError, match="must be an integer"):
            any_buffer.get(0.5)

    def test_out_of_bounds_is_index_error(self, any_buffer):
        """IndexOutOfBounds is also an IndexError."""
        with pytest.raises(IndexError):
            any_buffer.get(0)

    def test_setitem_bounds(self, doubling_buffer):
        with pytest.raises(IndexOutOfBounds):
            doubling_buffer[0] = 1

    def test_stores_arbitrary_objects(self, doubling_buffer):
        """Lists and tuples are stored as single elements."""
        doubling_buffer.push([1, 2])
        doubling_buffer.push((3, 4))
        doubling_buffer.insert({"k": 5}, 1)
        assert doubling_buffer.get(0) == [1, 2]
        assert doubling_buffer.get(1) == {"k": 5}
        assert doubling_buffer.get(2) == (3, 4)


class TestTypedStorage:
    """Buffers over numeric dtypes."""

    def test_int64_buffer(self):
        buf = DoublingBuffer(dtype="int64")
        for v in [5, 6, 7]:
            buf.push(v)
        buf.insert(4, 0)
        assert buf.dtype == np.dtype("int64")
        assert_array_equal(buf.to_numpy(), np.array([4, 5, 6, 7], dtype=np.int64))

    def test_rejected_value_leaves_buffer_intact(self):
        """A value the dtype cannot hold fails before any shift."""
        buf = DoublingBuffer(dtype="int64")
        for v in [1, 2, 3]:
            buf.push(v)
        with pytest.raises(ValueError):
            buf.insert("not a number", 0)
        assert_array_equal(buf.to_numpy(), [1, 2, 3])

    def test_zero_size_dtype_rejected(self):
        """Zero-size element types are refused at construction."""
        with pytest.raises(ValueError, match="Zero-size element dtype"):
            DoublingBuffer(dtype=np.dtype([]))

    def test_to_numpy_empty(self, doubling_buffer):
        assert doubling_buffer.to_numpy().shape == (0,)


class TestAllocationFailure:
    """Growth beyond the capacity ceiling."""

    def test_ceiling_reached(self):
        buf = IncrementOneBuffer(max_capacity=3)
        for v in range(3):
            buf.push(v)
        with pytest.raises(AllocationFailure) as excinfo:
            buf.push(3)
        assert excinfo.value.capacity == 3
        # unchanged after the failure
        assert buf.size() == 3
        assert_array_equal(buf.to_numpy().astype(int), [0, 1, 2])

    def test_doubling_clamped_to_ceiling(self):
        """Doubling stops at max_capacity instead of overshooting."""
        buf = DoublingBuffer(max_capacity=5)
        for v in range(5):
            buf.push(v)
        assert buf.capacity == 5
        with pytest.raises(AllocationFailure, match="max_capacity 5"):
            buf.insert(99, 0)
        assert buf.get(0) == 0

    def test_is_memory_error(self):
        buf = DoublingBuffer(max_capacity=1)
        buf.push(1)
        with pytest.raises(MemoryError):
            buf.push(2)

    def test_numpy_memory_error_wrapped(self, monkeypatch):
        """A MemoryError from numpy surfaces as AllocationFailure."""
        def failing_empty(*args, **kwargs):
            raise MemoryError("simulated")

        buf = DoublingBuffer()
        monkeypatch.setattr(np, "empty", failing_empty)
        with pytest.raises(AllocationFailure) as excinfo:
            buf.push(1)
        assert isinstance(excinfo.value.__cause__, MemoryError)


class TestCreateBuffer:
    """Factory driven by BufferConfig."""

    def test_default_is_doubling(self):
        assert isinstance(create_buffer(), DoublingBuffer)

    def test_overrides(self):
        buf = create_buffer(policy=GrowthPolicy.INCREMENT_BLOCK, block=16)
        assert isinstance(buf, BlockGrowthBuffer)
        buf.push(7)
        assert buf.capacity == 16

    def test_from_config(self):
        config = BufferConfig(policy=GrowthPolicy.INCREMENT_ONE, dtype="float64", max_capacity=8)
        buf = create_buffer(config)
        assert isinstance(buf, IncrementOneBuffer)
        assert buf.max_capacity == 8
        assert buf.dtype == np.dtype("float64")

    def test_invalid_config(self):
        with pytest.raises(ConfigurationError, match="block must be > 0"):
            create_buffer(policy=GrowthPolicy.INCREMENT_BLOCK, block=0)

    def test_repr(self):
        buf = create_buffer()
        buf.push(1)
        buf.push(2)
        assert repr(buf) == "DoublingBuffer([1, 2], capacity=2)"
