"""Merge sort over a slice of a list, merging each pair of runs into a scratch list."""

from __future__ import annotations

import sys
from collections.abc import Callable, MutableSequence, Sequence

from mergesorts.cli import run
from mergesorts.splitting import _merge_runs, _sort_small

_Merge = Callable[[MutableSequence[int], int, int, int], None]


def _span(values: Sequence[int], length: int | None, start: int) -> int:
    """Check the requested range and return its length."""
    if not 0 <= start <= len(values):
        raise IndexError(f"start {start} is outside a sequence of {len(values)} items")
    if length is None:
        return len(values) - start
    if length < 0:
        raise ValueError(f"length cannot be negative: {length}")
    if start + length > len(values):
        raise IndexError(
            f"range of {length} items from {start} overruns a sequence of {len(values)} items"
        )
    return length


def _sort_range(
    values: MutableSequence[int], start: int, length: int, merge: _Merge
) -> None:
    """Sort ``length`` items from ``start``, joining halves with ``merge``."""
    half = length // 2
    if half == 1:
        _sort_small(values, start, length)
    elif half > 1:
        mid = start + half
        _sort_range(values, start, half, merge)
        _sort_range(values, mid, length - half, merge)
        merge(values, start, mid, start + length)


def _sort_with(
    values: MutableSequence[int], length: int | None, start: int, merge: _Merge
) -> None:
    """Validate the range, then sort it with the given merge step."""
    _sort_range(values, start, _span(values, length, start), merge)


def _merge(values: MutableSequence[int], start: int, mid: int, end: int) -> None:
    values[start:end] = _merge_runs(values[start:mid], values[mid:end])


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