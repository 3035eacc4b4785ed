"""Console front end shared by the merge sort commands."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import TextIO

_INTEGER = re.compile(r"[+-]?\d+")


def _tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace separated tokens, reading one line at a time."""
    for line in iter(stream.readline, ""):
        yield from line.split()


def _parse_int(token: str, what: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"expected an integer for {what}, got {token!r}")
    return int(token)


def read_numbers(stream: TextIO, prompt_stream: TextIO) -> list[int]:
    """Read a count followed by that many integers, prompting for each one."""
    tokens = _tokens(stream)
    count_token = next(tokens, None)
    if count_token is None:
        raise ValueError("missing the number of integers")
    count = _parse_int(count_token, "the number of integers")
    if count < 0:
        raise ValueError(f"the number of integers cannot be negative: {count}")

    numbers: list[int] = []
    for index in range(count):
        prompt_stream.write(f"Enter integer ({index}): ")
        prompt_stream.flush()
        token = next(tokens, None)
        if token is None:
            raise ValueError(f"expected {count} integers, got {index}")
        numbers.append(_parse_int(token, f"integer {index}"))
    return numbers


def format_input_line(values: Iterable[int]) -> str:
    """Echo of the numbers as read: each followed by a space, then a newline."""
    return "".join(f"{value} " for value in values) + "\n"


def format_result(values: Sequence[int]) -> str:
    """The length line followed by the tab separated sorted numbers."""
    body = "".join(f"{value}\t" for value in values)
    return f"Length: {len(values)}\n{body}\n"


def run(
    sort: Callable[[MutableSequence[int]], object],
    argv: Sequence[str] | None,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Read numbers from ``stdin``, sort them with ``sort`` and report on ``stdout``."""
    parser = argparse.ArgumentParser(
        description="Read a count and that many integers, then print them merge sorted."
    )
    parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        numbers = read_numbers(stdin, stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    stdout.write(format_input_line(numbers))
    sort(numbers)
    stdout.write(format_result(numbers))
    stdout.flush()
    return 0