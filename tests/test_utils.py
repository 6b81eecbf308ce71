from hypothesis import given
from hypothesis import strategies as st

from algopractice.utils import absolute, reverse_in_place


def test_absolute_of_negative_int():
    assert absolute(-3) == 3


def test_absolute_of_positive_and_zero():
    assert absolute(4) == 4
    assert absolute(0) == 0


def test_absolute_of_float_keeps_type():
    result = absolute(-2.5)
    assert result == 2.5
    assert isinstance(result, float)


@given(st.integers())
def test_absolute_int_invariants(x):
    result = absolute(x)
    assert result >= 0
    assert result in (x, -x)
    assert absolute(-x) == result


@given(st.floats(allow_nan=False))
def test_absolute_float_invariants(x):
    result = absolute(x)
    assert result >= 0
    assert result in (x, -x)


def test_reverse_in_place_returns_same_object():
    data = [1, 2, 3]
    result = reverse_in_place(data)
    assert result is data
    assert data == [3, 2, 1]


def test_reverse_empty():
    data = []
    assert reverse_in_place(data) == []


@given(st.lists(st.integers()))
def test_reverse_twice_is_identity(values):
    data = list(values)
    reverse_in_place(reverse_in_place(data))
    assert data == values


@given(st.lists(st.integers(), min_size=1))
def test_reverse_swaps_ends(values):
    data = reverse_in_place(list(values))
    assert data[0] == values[-1]
    assert data[-1] == values[0]
    assert sorted(data) == sorted(values)