"""In-place sorting routines built on a swap-based merge of adjacent sorted runs."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import pairwise


def interleave(values: MutableSequence, start: int, middle: int, end: int) -> None:
    """Merge the sorted runs values[start:middle] and values[middle:end] in place."""
    if start >= middle or middle >= end:
        return
    a = middle - 1
    b = middle
    while b < end:
        right = b
        while a >= start and b < end and values[b] <= values[a]:
            a -= 1
            b += 1
        a += 1
        b -= 1
        left = a
        while right <= b:
            values[left], values[right] = values[right], values[left]
            left += 1
            right += 1
        if a > start and values[a] < values[a - 1]:
            b = a
            a -= 1
        else:
            a = b
            b += 1
            while b < end and values[a] <= values[b]:
                a += 1
                b += 1


def _binary_range(values: MutableSequence, start: int, end: int) -> None:
    length = end - start
    step = 1
    while step < length:
        for pos in range(start, end - 2 * step + 1, 2 * step):
            interleave(values, pos, pos + step, pos + 2 * step)
        step <<= 1

    rest = rest2 = length
    step = 1
    while step < length:
        if step & length:
            rest -= step
            if rest2 < length:
                interleave(values, start + rest, start + rest2, end)
            rest2 = rest
        step <<= 1


def _merge_blocks(values: MutableSequence, block: int) -> None:
    """Merge consecutive sorted blocks of size ``block`` into one sorted sequence."""
    length = len(values)
    step = block
    while step < length:
        for pos in range(0, length - step, 2 * step):
            interleave(values, pos, pos + step, min(pos + 2 * step, length))
        step <<= 1


def _chunk_bounds(length: int, chunks: int) -> tuple[int, list[tuple[int, int]]]:
    if chunks < 1:
        raise ValueError(f"chunk count must be positive, got {chunks}")
    delta = max(length // chunks, 1)
    bounds = [(pos, min(pos + delta, length)) for pos in range(0, length, delta)]
    return delta, bounds


def _sort_slice(values: MutableSequence, start: int, end: int) -> None:
    values[start:end] = sorted(values[start:end])


def binary_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place by merging runs of doubling size."""
    _binary_range(values, 0, len(values))


def binary_sort_chunked(values: MutableSequence, chunks: int) -> None:
    """Binary-sort ``chunks`` equal slices independently, then merge them."""
    delta, bounds = _chunk_bounds(len(values), chunks)
    for start, end in bounds:
        _binary_range(values, start, end)
    _merge_blocks(values, delta)


def quicksort(values: MutableSequence, lo: int = 0, hi: int | None = None) -> None:
    """Sort values[lo:hi + 1] in place with a middle-pivot quicksort."""
    if hi is None:
        hi = len(values) - 1
    pending = [(lo, hi)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        left, right = low, high
        pivot = values[(low + high) // 2]
        while True:
            while left < high and values[left] < pivot:
                left += 1
            while right > low and pivot < values[right]:
                right -= 1
            if left <= right:
                values[left], values[right] = values[right], values[left]
                left += 1
                right -= 1
            else:
                break
        if low < right:
            pending.append((low, right))
        if left < high:
            pending.append((left, high))


def quicksort_chunked(values: MutableSequence, chunks: int) -> None:
    """Quicksort each chunk, then quicksort the whole sequence."""
    _, bounds = _chunk_bounds(len(values), chunks)
    for start, end in bounds:
        quicksort(values, start, end - 1)
    quicksort(values)


def quicksort_merge(values: MutableSequence, chunks: int) -> None:
    """Quicksort each chunk, then merge the chunks with :func:`interleave`."""
    delta, bounds = _chunk_bounds(len(values), chunks)
    for start, end in bounds:
        quicksort(values, start, end - 1)
    _merge_blocks(values, delta)


def stdsort_chunked(values: MutableSequence, chunks: int) -> None:
    """Sort each chunk with the built-in sort, then sort the whole sequence."""
    _, bounds = _chunk_bounds(len(values), chunks)
    for start, end in bounds:
        _sort_slice(values, start, end)
    _sort_slice(values, 0, len(values))


def stdsort_merge(values: MutableSequence, chunks: int) -> None:
    """Sort each chunk with the built-in sort, then merge with :func:`interleave`."""
    delta, bounds = _chunk_bounds(len(values), chunks)
    for start, end in bounds:
        _sort_slice(values, start, end)
    _merge_blocks(values, delta)


def count_inversions(values: Sequence) -> int:
    """Count adjacent pairs that are out of order; zero means sorted."""
    return sum(1 for first, second in pairwise(values) if first > second)