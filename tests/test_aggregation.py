import math
import random
from collections import Counter

import numpy as np
import pytest
from arraylist import ArrayList, EmptySequenceError, NoSuchElementError


def test_any_empty():
    assert ArrayList.of(1, 2, 3).any()
    assert not ArrayList.of().any()
    assert not ArrayList(5).any()
    assert ArrayList.of(0, None).any()
    assert ArrayList.of(1, 2, 3).any(lambda x: x > 2)
    assert not ArrayList.of(1, 2, 3).any(lambda x: x > 3)

    assert not ArrayList.of(1, 2, 3).is_empty()
    assert ArrayList.of().is_empty()
    assert ArrayList(5).is_empty()

    assert ArrayList.of().if_empty(lambda: 'default') == 'default'
    arr = ArrayList.of(1)
    assert arr.if_empty(lambda: 'default') is arr


def test_contains():
    arr = ArrayList.of(1, 'a', None, (1, 2))
    assert arr.contains('a')
    assert arr.contains(None)
    assert arr.contains((1, 2))
    assert not arr.contains('b')

    assert arr.contains_all(['a', 1])
    assert arr.contains_all(ArrayList.of(None))
    assert arr.contains_all([])
    assert not arr.contains_all(['a', 'b'])


def test_count():
    arr = [random.randint(0, 10) for _ in range(100)]
    seq = ArrayList(arr)
    assert seq.count() == 100
    assert seq.count(lambda x: x > 5) == len([x for x in arr if x > 5])

    seq = ArrayList(10).set(0, 'a', 'b')
    assert len(seq) == 10
    assert seq.count() == 2


def test_first_last():
    arr = ArrayList.of(3, 8, 5, 10, 7)
    assert arr.first() == 3
    assert arr.last() == 7
    assert arr.first(lambda x: x % 2 == 0) == 8
    assert arr.last(lambda x: x % 2 == 0) == 10
    assert arr.first(lambda x: x > 100) is None
    assert arr.last(lambda x: x > 100, lambda: -1) == -1

    assert ArrayList.of().first() is None
    assert ArrayList.of().first(default=lambda: 'none') == 'none'
    assert ArrayList.of().last(default=lambda: 'none') == 'none'
    assert ArrayList.of(0, 1).first() == 0
    assert ArrayList.of(1, 0).last() == 0


def test_find_last():
    arr = ArrayList.of(1, 2, 3, 4, 5, 6, 7)
    assert arr.find_last(lambda x: x % 3 == 0) == 6
    assert arr.find_last_index(lambda x: x % 3 == 0) == 5
    assert arr.find_last_index(lambda x: x < 2) == 0
    assert arr.find_last_index(lambda x: x > 10) == -1
    assert ArrayList.of(None).find_last(lambda x: True) is None

    with pytest.raises(NoSuchElementError):
        arr.find_last(lambda x: x > 10)

    with pytest.raises(NoSuchElementError):
        ArrayList.of().find_last(lambda x: True)


def test_element_at_or_else():
    arr = ArrayList.of('a', 'b', 'c')
    assert arr.element_at_or_else(0, lambda i: None) == 'a'
    assert arr.element_at_or_else(-1, lambda i: None) == 'c'
    assert arr.element_at_or_else(-3, lambda i: None) == 'a'
    assert arr.element_at_or_else(3, lambda i: i * 10) == 30
    assert arr.element_at_or_else(-4, lambda i: i * 10) == -40

    with pytest.raises(TypeError):
        arr.element_at_or_else('a', lambda i: None)


def test_min_max():
    arr = [random.random() for _ in range(100)]
    seq = ArrayList(arr)
    assert seq.max() == max(arr)
    assert seq.min() == min(arr)

    words = ArrayList.of('bb', 'a', 'cc', 'd')
    assert words.max_by(len) == 'bb'
    assert words.min_by(len) == 'a'
    assert words.max() == 'd'
    assert words.min() == 'a'

    people = ArrayList.of({'age': 30}, {'age': 25}, {'age': 30})
    assert people.max_by(lambda p: p['age']) is people[0]
    assert people.min_by(lambda p: -p['age']) is people[0]

    for operation in ['max', 'min']:
        with pytest.raises(EmptySequenceError):
            getattr(ArrayList.of(), operation)()
        with pytest.raises(ValueError):
            getattr(ArrayList(3), operation)()

    with pytest.raises(EmptySequenceError):
        ArrayList.of().max_by(len)
    with pytest.raises(EmptySequenceError):
        ArrayList.of().min_by(len)


def test_sum_average():
    arr = [random.randint(0, 100) for _ in range(100)]
    seq = ArrayList(arr)
    assert seq.sum() == sum(arr)
    assert isinstance(seq.sum(), int)
    assert seq.average() == pytest.approx(sum(arr) / len(arr))

    assert ArrayList.of(1, '2', 3.5, True).sum() == pytest.approx(7.5)
    assert math.isnan(ArrayList.of(1, 'a').sum())
    assert math.isnan(ArrayList.of(1, None).sum())
    assert math.isnan(ArrayList.of(1, 'a').average())

    assert ArrayList.of().sum() == 0
    assert math.isnan(ArrayList.of().average())


def test_numpy_elements():
    array = np.arange(3)
    wrapped = ArrayList(array)
    assert len(wrapped) == 1
    assert wrapped[0] is array
    assert ArrayList.from_iterable(array).to_list() == [0, 1, 2]

    seq = ArrayList.from_iterable(np.arange(5))
    assert seq.sum() == 10
    assert seq.average() == pytest.approx(2.)
    assert seq.max() == 4
    assert len(seq.filter_instance(np.integer)) == 5

    seq = ArrayList.of(np.float32(1.5), np.float64(2.5))
    assert seq.sum() == pytest.approx(4.)


def test_each_count():
    counts = ArrayList.of('a', 'a', 'a', 2, 2).each_count()
    assert counts['a'] == 3
    assert counts[2] == 2
    assert list(counts) == ['a', 2]

    arr = [random.randint(0, 10) for _ in range(100)]
    assert ArrayList(arr).each_count() == Counter(arr)
    assert ArrayList.of().each_count() == {}


def test_random():
    arr = list(range(10))
    seq = ArrayList(arr)
    for _ in range(100):
        assert seq.random() in arr

    rng = random.Random(0)
    picks = {seq.random(rng) for _ in range(1000)}
    assert picks == set(arr)

    with pytest.raises(EmptySequenceError):
        ArrayList.of().random()


def test_sample():
    arr = list(range(20))
    seq = ArrayList(arr)

    sample = seq.sample(5)
    assert isinstance(sample, ArrayList)
    assert len(sample) == 5
    assert len(sample.unique()) == 5
    assert seq.contains_all(sample)
    assert seq.to_list() == arr

    assert sorted(seq.sample(20)) == arr
    assert seq.sample(0).to_list() == []

    duplicates = ArrayList.of('a', 'a', 'b')
    assert sorted(duplicates.sample(3)) == ['a', 'a', 'b']

    rng1, rng2 = random.Random(42), random.Random(42)
    assert seq.sample(7, rng1).equals(seq.sample(7, rng2))

    with pytest.raises(ValueError):
        seq.sample(21)
    with pytest.raises(ValueError):
        seq.sample(-1)
    with pytest.raises(TypeError):
        seq.sample(1.5)
