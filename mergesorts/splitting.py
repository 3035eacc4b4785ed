"""Merge sort that copies each half into its own list before merging."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence, Sequence

from mergesorts.cli import run


def _sort_small(values: MutableSequence[int], start: int, length: int) -> None:
    """Sort two or three items at ``start`` with compare-and-swap steps."""
    first, second, third = start, start + 1, start + 2
    steps = [(first, second)] if length == 2 else []
    if length == 3:
        steps = [(first, third), (first, second), (second, third)]
    for low, high in steps:
        if values[low] > values[high]:
            values[low], values[high] = values[high], values[low]


def _merge_runs(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted runs, taking from ``left`` on ties."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place by splitting it into two new halves."""
    length = len(values)
    half = length // 2
    if half == 1:
        _sort_small(values, 0, length)
    elif half > 1:
        left = list(values[:half])
        right = list(values[half:])
        merge_sort(left)
        merge_sort(right)
        values[:] = _merge_runs(left, right)


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them sorted."""
    return run(merge_sort, argv, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())