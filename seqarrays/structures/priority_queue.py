"""Bucketed Priority Queue.

Items are grouped into one LIFO stack per distinct priority. Buckets
are kept in descending numeric priority order and dequeue pops from the
last bucket, so the numerically lowest priority is served first
(priority 0 outranks priority 1). Within a bucket the most recently
enqueued item leaves first. A bucket exists only while its stack is
non-empty.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, List, Tuple

from seqarrays.core.buffer import DoublingBuffer

logger = logging.getLogger(__name__)


class _Bucket:
    """One priority level and its stack of items."""

    __slots__ = ("priority", "stack")

    def __init__(self, priority: int):
        self.priority = priority
        self.stack = DoublingBuffer()


class BucketedPriorityQueue:
    """Priority queue with LIFO ordering inside each priority.

    Example:
        >>> queue = BucketedPriorityQueue()
        >>> queue.enqueue(1, "a")
        >>> queue.enqueue(0, "b")
        >>> queue.dequeue(), queue.dequeue(), queue.dequeue()
        ('b', 'a', None)
    """

    def __init__(self):
        self._buckets = DoublingBuffer()
        self._count = 0

    def _search(self, priority: int) -> Tuple[int, bool]:
        """Binary search of the descending bucket order.

        Returns:
            (slot, found): slot of the bucket with this priority, or the
            slot where a new bucket keeps the order
        """
        buckets = self._buckets
        lo, hi = 0, buckets.size()
        while lo < hi:
            mid = (lo + hi) // 2
            if buckets.get(mid).priority > priority:
                lo = mid + 1
            else:
                hi = mid
        found = lo < buckets.size() and buckets.get(lo).priority == priority
        return lo, found

    def enqueue(self, priority: int, item: Any) -> None:
        """Push item onto the stack of its priority, creating the bucket if needed.

        Args:
            priority: Integer priority; lower values are dequeued first
            item: Any value

        Raises:
            TypeError: If priority is not an integer
        """
        priority = operator.index(priority)
        slot, found = self._search(priority)
        if not found:
            self._buckets.insert(_Bucket(priority), slot)
            logger.debug(f"Created bucket for priority {priority}")
        self._buckets.get(slot).stack.push(item)
        self._count += 1

    def dequeue(self, default: Any = None) -> Any:
        """Pop the most recent item of the first-served priority.

        Args:
            default: Returned when the queue is empty

        Returns:
            The dequeued item, or default if the queue is empty
        """
        if self._buckets.size() == 0:
            return default

        bucket = self._buckets.last()
        item = bucket.stack.pop()
        if bucket.stack.size() == 0:
            self._buckets.pop().stack.clear()
            logger.debug(f"Removed bucket for priority {bucket.priority}")
        self._count -= 1
        return item

    def peek(self, default: Any = None) -> Any:
        """Item the next dequeue() would return, without removing it."""
        if self._buckets.size() == 0:
            return default
        return self._buckets.last().stack.last()

    def priorities(self) -> List[int]:
        """Active priorities in the order they will be served."""
        buckets = self._buckets
        return [buckets.get(b).priority for b in range(buckets.size() - 1, -1, -1)]

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        """Drop every bucket and item."""
        while self._buckets.size():
            self._buckets.pop().stack.clear()
        self._buckets.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __enter__(self) -> "BucketedPriorityQueue":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False

    def __repr__(self) -> str:
        return f"BucketedPriorityQueue(items={self._count}, priorities={self.priorities()})"
