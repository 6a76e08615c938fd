"""Sorting with the language's built-in sort, as a baseline."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def standard_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with the built-in sort."""
    values[:] = sorted(values)