"""Top-down, stable merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]``."""
    left_run = list(values[left : mid + 1])
    right_run = list(values[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        if left_run[i] <= right_run[j]:
            values[k] = left_run[i]
            i += 1
        else:
            values[k] = right_run[j]
            j += 1
        k += 1
    rest = left_run[i:] + right_run[j:]
    values[k : k + len(rest)] = rest


def _merge_sort_range(values: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort_range(values, left, mid)
    _merge_sort_range(values, mid + 1, right)
    _merge(values, left, mid, right)


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with a stable merge sort."""
    if values:
        _merge_sort_range(values, 0, len(values) - 1)