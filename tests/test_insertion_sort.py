from hypothesis import given, strategies as st

from sortbench.insertion_sort import insertion_sort

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __gt__(self, other):
        return self.key > other.key


@given(st.lists(int32, max_size=200))
def test_insertion_sort_matches_sorted(values):
    data = list(values)
    insertion_sort(data)
    assert data == sorted(values)


def test_insertion_sort_empty_and_single():
    empty = []
    insertion_sort(empty)
    assert empty == []
    single = [-4]
    insertion_sort(single)
    assert single == [-4]


@given(st.lists(st.integers(0, 5), max_size=60))
def test_insertion_sort_is_stable(keys):
    items = [_Keyed(k, i) for i, k in enumerate(keys)]
    insertion_sort(items)
    pairs = [(item.key, item.tag) for item in items]
    assert pairs == sorted(pairs)