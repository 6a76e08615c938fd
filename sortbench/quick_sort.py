"""Randomised quick sort with Lomuto partitioning and comparison counters."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any


@dataclass
class QuickSortStats:
    """Counts of element comparisons and swaps made by one quick sort run."""

    comparisons: int = 0
    swaps: int = 0


def _partition(
    values: MutableSequence[Any],
    low: int,
    high: int,
    rng: random.Random,
    stats: QuickSortStats,
) -> int:
    pivot_index = low + rng.randrange(high - low + 1)
    values[pivot_index], values[high] = values[high], values[pivot_index]
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        stats.comparisons += 1
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
            stats.swaps += 1
    values[i + 1], values[high] = values[high], values[i + 1]
    stats.swaps += 1
    return i + 1


def _quick_sort_range(
    values: MutableSequence[Any],
    low: int,
    high: int,
    rng: random.Random,
    stats: QuickSortStats,
) -> None:
    # Recurse into the smaller side and loop over the larger to bound the depth.
    while low < high:
        pivot = _partition(values, low, high, rng, stats)
        if pivot - low < high - pivot:
            _quick_sort_range(values, low, pivot - 1, rng, stats)
            low = pivot + 1
        else:
            _quick_sort_range(values, pivot + 1, high, rng, stats)
            high = pivot - 1


def quick_sort(
    values: MutableSequence[Any], rng: random.Random | None = None
) -> QuickSortStats:
    """Sort ``values`` in place with random pivots and return the run's counters."""
    if rng is None:
        rng = random.Random()
    stats = QuickSortStats()
    _quick_sort_range(values, 0, len(values) - 1, rng, stats)
    return stats