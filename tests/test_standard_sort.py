from hypothesis import given, strategies as st

from sortbench.standard_sort import standard_sort

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(st.lists(int32))
def test_standard_sort_result_is_ordered_permutation(values):
    data = list(values)
    standard_sort(data)
    assert all(a <= b for a, b in zip(data, data[1:]))
    assert sorted(data) == sorted(values)
    assert len(data) == len(values)


def test_standard_sort_mutates_in_place():
    data = [3, 1, 2]
    alias = data
    standard_sort(data)
    assert alias == [1, 2, 3]


def test_standard_sort_empty():
    data = []
    standard_sort(data)
    assert data == []