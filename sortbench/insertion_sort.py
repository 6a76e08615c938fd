"""In-place insertion sort."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(values)):
        key = values[i]
        j = i
        while j > 0 and values[j - 1] > key:
            values[j] = values[j - 1]
            j -= 1
        values[j] = key