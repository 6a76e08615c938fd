"""Generators for benchmark datasets and their binary file format."""

from __future__ import annotations

import random
import struct
from collections.abc import Iterable
from os import PathLike

RANDOM_UPPER_BOUND = 1_000_000
SHUFFLE_FROM_FRACTION = 0.66


def ascending(n: int) -> list[int]:
    """Return ``0, 1, ..., n - 1``."""
    return list(range(n))


def descending(n: int) -> list[int]:
    """Return ``n, n - 1, ..., 1``."""
    return list(range(n, 0, -1))


def random_values(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ``n`` random integers in ``[0, 999999]``."""
    if rng is None:
        rng = random.Random()
    return [rng.randrange(RANDOM_UPPER_BOUND) for _ in range(n)]


def partially_shuffled(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a descending list whose last third (from 66%) is shuffled."""
    if rng is None:
        rng = random.Random()
    values = descending(n)
    start = int(n * SHUFFLE_FROM_FRACTION)
    for i in range(start, n):
        j = start + rng.randrange(n - start)
        values[i], values[j] = values[j], values[i]
    return values


def save_binary(path: str | PathLike[str], values: Iterable[int]) -> None:
    """Write ``values`` to ``path`` as consecutive little-endian 32-bit integers.

    Raises ValueError if a value does not fit in a signed 32-bit integer.
    """
    items = list(values)
    try:
        payload = struct.pack(f"<{len(items)}i", *items)
    except struct.error as exc:
        raise ValueError(f"cannot store values as 32-bit integers: {exc}") from exc
    with open(path, "wb") as handle:
        handle.write(payload)