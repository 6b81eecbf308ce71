import pytest
from hypothesis import given
from hypothesis import strategies as st

from algopractice.sorting import bubble_sort, quick_sort

CASES = [
    ([], []),
    ([1], [1]),
    ([2, 1], [1, 2]),
    ([5, 3, 8, 4, 2], [2, 3, 4, 5, 8]),
    ([9, -1, 3, 0, 2, 1], [-1, 0, 1, 2, 3, 9]),
    ([5, 5, 5, 5], [5, 5, 5, 5]),
]


@pytest.mark.parametrize("sort", [quick_sort, bubble_sort])
@pytest.mark.parametrize("given_values,expected", CASES)
def test_source_cases(sort, given_values, expected):
    data = list(given_values)
    result = sort(data)
    assert result is None
    assert data == expected


@pytest.mark.parametrize("sort", [quick_sort, bubble_sort])
@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin_sorted(sort, values):
    data = list(values)
    sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("sort", [quick_sort, bubble_sort])
def test_sorts_strings(sort):
    data = ["pear", "apple", "fig"]
    sort(data)
    assert data == ["apple", "fig", "pear"]


def test_quick_sort_large_input_does_not_overflow():
    data = list(range(5000, 0, -1))
    quick_sort(data)
    assert data == list(range(1, 5001))