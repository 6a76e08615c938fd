import random
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.datasets import (
    ascending,
    descending,
    partially_shuffled,
    random_values,
    save_binary,
)


@given(st.integers(min_value=0, max_value=500))
def test_ascending_is_sorted_range(n):
    values = ascending(n)
    assert len(values) == n
    assert values == sorted(values)
    assert len(set(values)) == n
    if n:
        assert values[0] == 0
        assert values[-1] == n - 1


@given(st.integers(min_value=0, max_value=500))
def test_descending_mirrors_ascending(n):
    values = descending(n)
    assert len(values) == n
    assert values == sorted(values, reverse=True)
    assert sorted(values) == [v + 1 for v in ascending(n)]
    if n:
        assert values[0] == n


def test_random_values_in_range_and_reproducible():
    first = random_values(1000, random.Random(7))
    second = random_values(1000, random.Random(7))
    assert first == second
    assert len(first) == 1000
    assert all(0 <= v < 1_000_000 for v in first)


def test_random_values_without_rng():
    values = random_values(50)
    assert len(values) == 50
    assert all(0 <= v < 1_000_000 for v in values)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 100, 1001])
def test_partially_shuffled_keeps_prefix_and_elements(n):
    values = partially_shuffled(n, random.Random(3))
    reference = descending(n)
    start = int(n * 0.66)
    assert values[:start] == reference[:start]
    assert sorted(values[start:]) == sorted(reference[start:])
    assert sorted(values) == sorted(reference)


def test_partially_shuffled_reproducible():
    first = partially_shuffled(200, random.Random(11))
    second = partially_shuffled(200, random.Random(11))
    reference = descending(200)
    start = int(200 * 0.66)
    assert len(first) == 200
    assert first[:start] == reference[:start]
    assert sorted(first) == sorted(reference)
    assert first == second


def test_save_binary_layout(tmp_path):
    path = tmp_path / "one.bin"
    save_binary(path, [1, -1])
    assert path.read_bytes() == b"\x01\x00\x00\x00\xff\xff\xff\xff"


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=50))
def test_save_binary_round_trip(tmp_path_factory, values):
    path = tmp_path_factory.mktemp("data") / "values.bin"
    save_binary(path, values)
    data = path.read_bytes()
    assert len(data) == 4 * len(values)
    assert list(struct.unpack(f"<{len(values)}i", data)) == values


def test_save_binary_rejects_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        save_binary(tmp_path / "bad.bin", [2**31])