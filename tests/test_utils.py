import math
from collections import namedtuple

import numpy as np
import pytest
from arraylist.utils import EMPTY, Empty, getprop, hasprop, is_pair, isint, \
    normalize_index, to_number


def test_isint():
    assert isint(3)
    assert isint(np.int64(3))
    assert not isint(True)
    assert not isint(3.)
    assert not isint("3")


def test_normalize_index():
    size = 10
    for index in range(-15, 15):
        expected = len(list(range(size))[:index])
        assert normalize_index(index, size) == expected

    assert normalize_index(0, 0) == 0
    assert normalize_index(-1, 0) == 0

    with pytest.raises(TypeError):
        normalize_index(1.5, size)


def test_empty():
    assert Empty() is EMPTY
    assert repr(EMPTY) == "<empty>"
    assert not EMPTY
    assert EMPTY != None  # noqa: E711


def test_props():
    Point = namedtuple("Point", ["x", "y"])
    p = Point(1, 2)
    assert getprop(p, "x") == 1
    assert hasprop(p, "y")
    assert not hasprop(p, "z")
    with pytest.raises(LookupError):
        getprop(p, "z")

    d = {"x": 1}
    assert getprop(d, "x") == 1
    assert hasprop(d, "x")
    assert not hasprop(d, "items")
    with pytest.raises(LookupError):
        getprop(d, "items")


def test_is_pair():
    assert is_pair((1, 2))
    assert is_pair([1, 2])
    assert is_pair(np.array([1, 2]))
    assert not is_pair((1, 2, 3))
    assert not is_pair("ab")
    assert not is_pair({1: 2, 3: 4})
    assert not is_pair(12)

    keytypes = (str, int)
    assert is_pair(("a", 1), keytypes)
    assert is_pair((1, "a"), keytypes)
    assert not is_pair((True, "a"), keytypes)
    assert not is_pair((1.5, "a"), keytypes)


def test_to_number():
    assert to_number(3) == 3
    assert to_number(True) is True
    assert to_number("2.5") == 2.5
    assert to_number(np.float32(.5)) == .5
    assert math.isnan(to_number("a"))
    assert math.isnan(to_number(None))
    assert math.isnan(to_number([1]))
