"""LSD radix sort over the four bytes of 32-bit integers."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import chain

_BASE = 256
_PASSES = 4
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def radix_sort(values: MutableSequence[int]) -> None:
    """Sort 32-bit integers in place by their unsigned two's-complement bytes.

    Negative values therefore come after all non-negative ones, ordered among
    themselves. Raises ValueError for a value outside the 32-bit signed range.
    """
    for value in values:
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"value {value} does not fit in a signed 32-bit integer")
    for pass_number in range(_PASSES):
        shift = pass_number * 8
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in values:
            buckets[(value >> shift) & 0xFF].append(value)
        values[:] = list(chain.from_iterable(buckets))