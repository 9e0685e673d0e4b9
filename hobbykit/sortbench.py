"""Timing comparison of the in-place sorting routines on generated data."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, MutableSequence
from typing import TextIO

from hobbykit.sorting import (
    binary_sort,
    binary_sort_chunked,
    count_inversions,
    quicksort,
    quicksort_chunked,
    quicksort_merge,
    stdsort_chunked,
    stdsort_merge,
)

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_RULE = "-" * 65
_BANNER = "-" * 15
DEFAULT_LENGTH = 1_000_000


def _rotl32(value: int, shift: int) -> int:
    value &= _MASK32
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


class RotatingRandom:
    """Linear congruential generator on a 64-bit state, tempered by a 32-bit rotation."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        self._state = seed & _MASK64

    def next(self, limit: int = 0) -> int:
        """Return the next value, reduced modulo ``limit`` when it is non-zero."""
        self._state = (self._state * 0x372CE9B9 + 0xB9E92C37) & _MASK64
        value = _rotl32(self._state, 13)
        return value % limit if limit else value


class LegacyRandom:
    """32-bit linear congruential generator with a shift-xor output mix."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        self._state = seed & _MASK32

    def next(self, limit: int = 0) -> int:
        """Return the next value, reduced modulo ``limit`` when it is non-zero.

        Without a limit the mixed 32-bit word is returned as a signed integer.
        """
        self._state = (self._state * 134775813 + 1) & _MASK32
        mixed = ((self._state << 19) & _MASK32) ^ (self._state >> 13)
        if limit:
            return (mixed % (limit & _MASK32)) & _MASK32
        return mixed - (1 << 32) if mixed & 0x80000000 else mixed


def random_values(seed: int, length: int) -> list[float]:
    """Pseudo-random floats in [0, length * 1e-4), reproducible from ``seed``."""
    generator = RotatingRandom(seed)
    return [generator.next(10 * length) * 1e-5 for _ in range(length)]


def ascending_values(length: int) -> list[float]:
    return [float(i) for i in range(length)]


def descending_values(length: int) -> list[float]:
    return [float(length - i) for i in range(length)]


Sorter = Callable[[MutableSequence], None]


def _algorithms(chunks: int, reverse_labels: bool) -> list[tuple[str, Sorter]]:
    thread = "thread" if reverse_labels else "threads"
    return [
        ("binary sort", binary_sort),
        ("binary sort threads", lambda v: binary_sort_chunked(v, chunks)),
        ("quick sort", lambda v: quicksort(v)),
        ("quick sort threads", lambda v: quicksort_chunked(v, chunks)),
        ("quick sort threads + binary", lambda v: quicksort_merge(v, chunks)),
        ("std sort", lambda v: v.sort()),
        (f"std sort {thread}", lambda v: stdsort_chunked(v, chunks)),
        (f"std sort {thread} + binary", lambda v: stdsort_merge(v, chunks)),
    ]


def run_benchmark(
    length: int = DEFAULT_LENGTH, seed: int = 0, out: TextIO | None = None
) -> list[tuple[str, str, float, int]]:
    """Sort random, ascending and descending data with every routine and report.

    Returns (section, algorithm, seconds, out-of-order pairs) for each run.
    """
    stream = sys.stdout if out is None else out
    chunks = os.cpu_count() or 1
    sections = [
        ("RANDOM DATA", "  RANDOM DATA: ", lambda: random_values(seed, length), False),
        ("SORTED DATA", "  SORTED DATA: ", lambda: ascending_values(length), False),
        ("REVERSE DATA", " REVERSE DATA: ", lambda: descending_values(length), True),
    ]
    results: list[tuple[str, str, float, int]] = []

    stream.write(f"SORTING TEST of {length} FLOAT NUMBERS (RESULT TIMES)\n")
    stream.write(f"{_RULE}\n\n")
    for section, title, make_data, reverse_labels in sections:
        stream.write(f"{_BANNER}\n{title}\n{_BANNER}\n")
        for name, sorter in _algorithms(chunks, reverse_labels):
            values = make_data()
            started = time.perf_counter()
            sorter(values)
            elapsed = time.perf_counter() - started
            bugs = count_inversions(values)
            stream.write(f"{name}: {elapsed:.5f} {'BUG' if bugs else 'OK '}\n")
            results.append((section, name, elapsed, bugs))
    stream.write(f"{_RULE}\nTest Finished.\n")
    return results


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    length = int(args[0]) if args else DEFAULT_LENGTH
    seed = int(time.process_time() * 1_000_000)
    run_benchmark(length, seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())