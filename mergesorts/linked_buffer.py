"""Merge sort in place, holding displaced items in a singly linked FIFO buffer."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from mergesorts.cli import run
from mergesorts.extra_array import _sort_with
from mergesorts.in_place import _merge_queued


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedBuffer:
    """First-in first-out queue of integers built from linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def __bool__(self) -> bool:
        return self._head is not None

    def __len__(self) -> int:
        return self._size

    def push(self, value: int) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _front(self, action: str) -> _Node:
        if self._head is None:
            raise IndexError(f"{action} from an empty buffer")
        return self._head

    def peek(self) -> int:
        """Return the front value without removing it."""
        return self._front("peek").value

    def pop(self) -> int:
        """Remove and return the front value."""
        node = self._front("pop")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value


def _merge(values: MutableSequence[int], start: int, mid: int, end: int) -> None:
    pending = LinkedBuffer()
    _merge_queued(values, start, mid, end, pending, pending.push, pending.peek, pending.pop)


def merge_sort(
    values: MutableSequence[int], length: int | None = None, start: int = 0
) -> None:
    """Sort ``length`` items of ``values`` from ``start`` in place (default: to the end)."""
    _sort_with(values, length, start, _merge)


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them sorted."""
    return run(merge_sort, argv, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())