# mergesorts

This package has four versions of merge sort over a list of integers. Each
one keeps the values in a different place while it merges two sorted halves:

| Module                     | Merge strategy                                                              |
|----------------------------|-----------------------------------------------------------------------------|
| `mergesorts.splitting`     | copies each half into a new list, then merges both back into the original   |
| `mergesorts.extra_array`   | merges a region into a scratch list, then writes it back over the region    |
| `mergesorts.in_place`      | overwrites the left half directly and keeps displaced values in a queue     |
| `mergesorts.linked_buffer` | works like `in_place`, but the queue is a singly linked `LinkedBuffer`      |

All four sort runs of two or three items with a fixed series of
compare-and-swap steps. Larger runs are split in half and merged.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

Each module has a `merge_sort` function that sorts a list of integers in
place and returns `None`.

```python
from mergesorts.splitting import merge_sort

numbers = [5, 3, 9, 1]
merge_sort(numbers)
print(numbers)  # [1, 3, 5, 9]
```

In `extra_array`, `in_place` and `linked_buffer`, `merge_sort(values, length=None, start=0)`
can sort a single region of a list. The region starts at `start` and holds
`length` items. If `length` is left out, the region runs to the end of the
list.

```python
from mergesorts.in_place import merge_sort

numbers = [5, 3, 9, 1, 7, 2]
merge_sort(numbers, len(numbers), 0)
print(numbers)  # [1, 2, 3, 5, 7, 9]
```

The region is checked before any sorting starts:

- A `start` outside the list raises `IndexError`.
- A region that runs past the end of the list raises `IndexError`.
- A negative `length` raises `ValueError`.

`mergesorts.linked_buffer.LinkedBuffer` is the first-in, first-out chain that
holds values pushed aside during a merge. It offers:

- `push(value)`: adds a value at the back.
- `peek()`: returns the front value and leaves it in place.
- `pop()`: removes the front value and returns it.

`peek` and `pop` raise `IndexError` when the buffer is empty. A buffer is
true while it holds values, and `len()` gives the number of values it holds.

## Command line

There is one command for each version:

```
mergesort-splitting
mergesort-extra-array
mergesort-in-place
mergesort-linked-buffer
```

You can also start each one as a module, for example with
`python -m mergesorts.splitting`. The only option is `--help`.

A command reads from standard input. Input is a count, followed by that many
integers, separated by any whitespace. Before reading each integer it writes
the prompt `Enter integer (i): `. It then prints:

1. the values as they were entered, each followed by a space;
2. a `Length: n` line;
3. the sorted values, each followed by a tab.

```
$ printf '4\n5\n3\n9\n1\n' | mergesort-splitting
Enter integer (0): Enter integer (1): Enter integer (2): Enter integer (3): 5 3 9 1 
Length: 4
1	3	5	9	
```

The command stops with exit status 1 and writes an `error:` message to
standard error in these cases:

- the count is missing, is negative, or is not an integer;
- one of the values is not an integer;
- there are fewer values than the count says.

The reading and formatting helpers that the commands share are in
`mergesorts.cli`: `read_numbers`, `format_input_line`, `format_result` and
`run`.