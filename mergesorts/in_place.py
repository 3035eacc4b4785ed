"""Merge sort that writes merged runs straight back, queueing displaced items."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, MutableSequence, Sequence, Sized

from mergesorts.cli import run
from mergesorts.extra_array import _sort_with


def _merge_queued(
    values: MutableSequence[int],
    start: int,
    mid: int,
    end: int,
    pending: Sized,
    push: Callable[[int], None],
    peek: Callable[[], int],
    take: Callable[[], int],
) -> None:
    """Merge the sorted runs ``[start, mid)`` and ``[mid, end)`` in place.

    Left items overwritten by smaller ones wait in the FIFO ``pending``,
    reached through ``push``, ``peek`` and ``take``.
    """
    i, j = start, mid
    while i < mid and j < end:
        if pending:
            push(values[i])
            # Pushing to the back leaves the front unchanged.
            if peek() > values[j]:
                values[i] = values[j]
                j += 1
            else:
                values[i] = take()
        elif values[i] > values[j]:
            push(values[i])
            values[i] = values[j]
            j += 1
        i += 1

    if i == mid and j < end:
        while pending and j != end and i < j:
            if peek() < values[j]:
                values[i] = take()
            else:
                values[i] = values[j]
                j += 1
            i += 1

    if j == end:
        while i < end and pending:
            values[i] = take()
            i += 1


def _merge(values: MutableSequence[int], start: int, mid: int, end: int) -> None:
    pending: deque[int] = deque()
    _merge_queued(
        values, start, mid, end, pending, pending.append, lambda: pending[0], pending.popleft
    )


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