"""Time a named sorting algorithm on a binary dataset."""

from __future__ import annotations

import struct
import sys
import time
from collections.abc import Callable, MutableSequence, Sequence
from os import PathLike
from typing import Any

from sortbench.heap_sort import heap_sort
from sortbench.insertion_sort import insertion_sort
from sortbench.merge_sort import merge_sort
from sortbench.quick_sort import quick_sort
from sortbench.radix_sort import radix_sort
from sortbench.standard_sort import standard_sort

SortFunction = Callable[[MutableSequence[int]], Any]

ALGORITHMS: dict[str, SortFunction] = {
    "InsertionSort": insertion_sort,
    "MergeSort": merge_sort,
    "QuickSort": quick_sort,
    "HeapSort": heap_sort,
    "SortEstandar": standard_sort,
    "RadixSort": radix_sort,
}


def read_dataset(path: str | PathLike[str]) -> list[int]:
    """Read little-endian 32-bit integers from ``path``; a trailing partial value is ignored."""
    with open(path, "rb") as handle:
        data = handle.read()
    count = len(data) // 4
    return list(struct.unpack(f"<{count}i", data[: count * 4]))


def measure_time(sort: SortFunction, data: Sequence[int]) -> float:
    """Sort a copy of ``data`` and return the elapsed time in milliseconds."""
    copy = list(data)
    start = time.perf_counter()
    sort(copy)
    end = time.perf_counter()
    return (end - start) * 1000.0


def measure_average(sort: SortFunction, data: Sequence[int], repetitions: int) -> float:
    """Time ``repetitions`` sorts of copies of ``data``, print the total and return the mean in ms."""
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")
    total = sum(measure_time(sort, data) for _ in range(repetitions))
    print(f"{total:g}")
    return total / repetitions


def get_algorithm(name: str) -> SortFunction:
    """Return the sorting function registered under ``name``; raise KeyError if unknown."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise KeyError(f"algorithm '{name}' not found") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark command: <dataset_file> <algorithm_name> <repetitions>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(
            "Usage: sortbench <dataset_file> <algorithm_name> <repetitions>",
            file=sys.stderr,
        )
        return 1
    path, name, repetitions_text = args[:3]
    try:
        repetitions = int(repetitions_text)
    except ValueError:
        print(f"Error: invalid repetition count '{repetitions_text}'", file=sys.stderr)
        return 1
    try:
        data = read_dataset(path)
    except OSError:
        print(f"Error: could not open file {path}", file=sys.stderr)
        return 1
    try:
        sort = get_algorithm(name)
    except KeyError:
        print(f"Error: algorithm '{name}' not found.", file=sys.stderr)
        return 1
    try:
        average = measure_average(sort, data, repetitions)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"{average:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())