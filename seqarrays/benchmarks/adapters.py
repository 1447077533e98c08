"""Python list behind the sequence contract.

Baseline for timing comparisons: the same five operations forwarded to
the interpreter's own dynamic array.
"""

from typing import Any

from seqarrays.core.contract import SequenceArray, check_index


class ListAdapter(SequenceArray):
    """Sequence contract over a plain list."""

    def __init__(self):
        self._items: list = []

    def size(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Any:
        i = check_index(index, len(self._items), len(self._items), "get")
        return self._items[i]

    def insert(self, elem: Any, index: int) -> None:
        i = check_index(index, len(self._items) + 1, len(self._items), "insert")
        self._items.insert(i, elem)

    def remove(self, index: int) -> Any:
        i = check_index(index, len(self._items), len(self._items), "remove")
        return self._items.pop(i)

    def push(self, elem: Any) -> None:
        self._items.append(elem)

    def __repr__(self) -> str:
        return f"ListAdapter({self._items!r})"
