import dataclasses
import math

import pytest

from samplekit.equal import equal


class MyString(str):
    pass


@dataclasses.dataclass(eq=False)
class Link:
    value: str
    tail: "Link | None" = None


@dataclasses.dataclass(eq=False)
class Buffer:
    data: list = dataclasses.field(default_factory=list)


def _cycle_list():
    items = []
    items.append(items)
    return items


def _noop():
    pass


CYCLE_SLICE = _cycle_list()
CYCLE_PTR_1 = _cycle_list()
CYCLE_PTR_2 = _cycle_list()
ONE = [1]
ONE_AGAIN = [1]
TWO = [2]


@pytest.mark.parametrize(
    "x, y, want",
    [
        # basic types
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyString("foo"), "foo", False),
        # slices
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        ([], [], True),
        # slice cycles
        (CYCLE_SLICE, CYCLE_SLICE, True),
        # maps
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        # references
        (ONE, ONE, True),
        (ONE, TWO, False),
        (ONE, ONE_AGAIN, True),
        (Buffer(), Buffer(), True),
        # reference cycles
        (CYCLE_PTR_1, CYCLE_PTR_1, True),
        (CYCLE_PTR_2, CYCLE_PTR_2, True),
        (CYCLE_PTR_1, CYCLE_PTR_2, True),
        # functions
        (None, None, True),
        (None, _noop, False),
        (lambda: None, lambda: None, False),
        (_noop, _noop, True),
        # arrays
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        # boxed interfaces
        ([ONE], [ONE], True),
        ([ONE], [TWO], False),
        ([ONE_AGAIN], [ONE], True),
    ],
)
def test_equal_cases(x, y, want):
    assert equal(x, y) is want


def test_equal_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False
    assert equal({}, {}) is True


def test_equal_cycle():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False


def test_nan_is_not_equal_to_itself():
    assert equal(math.nan, math.nan) is False


def test_missing_map_key():
    assert equal({"a": 1}, {"b": 1}) is False


def test_different_lengths():
    assert equal([1, 2], [1, 2, 3]) is False