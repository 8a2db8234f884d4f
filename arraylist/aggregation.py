"""Queries and aggregates over the elements of an ArrayList."""

import random
from collections import Counter

from .errors import EmptySequenceError, NoSuchElementError
from .utils import isint, to_number


class AggregationMixin(object):
    # Methods that read an ArrayList and return something else than an
    # ArrayList. Unassigned slots are skipped unless stated otherwise.

    def any(self, predicate=None):
        """Check for elements.

        Args:
            predicate (Optional[Callable[[Any], bool]]): condition to
                check for each element.

        Return:
            bool: `True` if any element satisfies `predicate`, or if
            there is at least one element when `predicate` is omitted.
        """
        for i, value in self._items():
            if predicate is None or self._call("any", i, predicate, value):
                return True

        return False

    def is_empty(self):
        """Return wether this list has no assigned element.

        A list created with ``ArrayList(n)`` has a length of `n` but is
        empty until its slots are assigned.
        """
        return not self.any()

    def if_empty(self, default):
        """Return `default()` if this list is empty, the list otherwise."""
        if self.is_empty():
            return default()
        return self

    def contains(self, value):
        return value in self._data

    def contains_all(self, values):
        """Return wether every item of `values` is found in this list."""
        return all(v in self._data for v in values)

    def count(self, predicate=None):
        """Count elements.

        Without `predicate`, this returns the number of assigned
        elements which may be less than ``len()``.
        """
        n = 0
        for i, value in self._items():
            if predicate is None or self._call("count", i, predicate, value):
                n += 1

        return n

    def first(self, predicate=None, default=None):
        """Return the first element, or the first one satisfying `predicate`.

        Args:
            predicate (Optional[Callable[[Any], bool]]): condition to
                check for each element.
            default (Optional[Callable[[], Any]]): called to produce the
                return value when no element is found, otherwise `None`
                is returned.
        """
        for i, value in self._items():
            if predicate is None or self._call("first", i, predicate, value):
                return value

        return None if default is None else default()

    def last(self, predicate=None, default=None):
        """Return the last element, or the last one satisfying `predicate`.

        See :meth:`first`.
        """
        for i, value in reversed(list(self._items())):
            if predicate is None or self._call("last", i, predicate, value):
                return value

        return None if default is None else default()

    def find_last(self, predicate):
        """Return the last element satisfying `predicate`.

        Raises:
            NoSuchElementError: if no element satisfies `predicate`.
        """
        found, last = False, None
        for i, value in self._items():
            if self._call("find_last", i, predicate, value):
                found, last = True, value

        if not found:
            raise NoSuchElementError(
                self.__class__.__name__ + " has no element matching the "
                "predicate")

        return last

    def find_last_index(self, predicate):
        """Return the index of the last element satisfying `predicate`.

        Return:
            int: the index or -1 when no element satisfies `predicate`.
        """
        last = -1
        for i, value in self._items():
            if self._call("find_last_index", i, predicate, value):
                last = i

        return last

    def element_at_or_else(self, index, default):
        """Return the element at `index` or `default(index)` if out of bounds.

        Negative indices count from the end.

        Example:

            >>> ArrayList.of('a', 'b').element_at_or_else(-1, lambda i: '?')
            'b'
            >>> ArrayList.of('a', 'b').element_at_or_else(2, lambda i: i)
            2
        """
        if not isint(index):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers, not "
                + index.__class__.__name__)

        if index < -len(self) or index >= len(self):
            return default(index)

        return self._data[index]

    def _fold(self, operation, select, better):
        items = self._items()
        try:
            i, best = next(items)
        except StopIteration:
            raise EmptySequenceError(
                "{}() arg is an empty {}".format(
                    operation, self.__class__.__name__)) from None

        best_key = best if select is None \
            else self._call(operation, i, select, best)

        for i, value in items:
            key = value if select is None \
                else self._call(operation, i, select, value)
            if better(key, best_key):
                best, best_key = value, key

        return best

    def max(self):
        """Return the greatest element, the earliest one on ties.

        Raises:
            EmptySequenceError: if the list is empty.
        """
        return self._fold("max", None, lambda a, b: a > b)

    def min(self):
        """Return the smallest element, the earliest one on ties.

        Raises:
            EmptySequenceError: if the list is empty.
        """
        return self._fold("min", None, lambda a, b: a < b)

    def max_by(self, selector):
        """Return the element with the greatest `selector(element)`.

        Example:

            >>> ArrayList.of('bb', 'a', 'cc').max_by(len)
            'bb'
        """
        return self._fold("max_by", selector, lambda a, b: a > b)

    def min_by(self, selector):
        """Return the element with the smallest `selector(element)`."""
        return self._fold("min_by", selector, lambda a, b: a < b)

    def sum(self):
        """Return the sum of the elements.

        Elements are converted to numbers beforehand; if one of them
        cannot be converted the result is `nan`.
        """
        return sum((to_number(v) for _, v in self._items()), 0)

    def average(self):
        """Return :meth:`sum` divided by the length, `nan` if empty."""
        if len(self) == 0:
            return float("nan")

        return self.sum() / len(self)

    def each_count(self):
        """Count the occurrences of each distinct element.

        Return:
            collections.Counter: mapping from element to count, in order
            of first occurrence.

        Example:

            >>> counts = ArrayList.of('a', 'a', 'a', 2, 2).each_count()
            >>> counts['a'], counts[2]
            (3, 2)
        """
        return Counter(v for _, v in self._items())

    def random(self, rng=None):
        """Return an element picked uniformly at random.

        Raises:
            EmptySequenceError: if the list has length 0.
        """
        if len(self) == 0:
            raise EmptySequenceError(
                "cannot pick from an empty " + self.__class__.__name__)

        rng = random if rng is None else rng
        return self._data[rng.randrange(len(self))]

    def sample(self, k, rng=None):
        """Draw `k` elements at random without replacement.

        Elements are drawn one at a time from a shrinking copy of the
        list, so duplicated values can be drawn as many times as they
        occur.

        Args:
            k (int): sample size, between 0 and the length of the list.
            rng (Optional[random.Random]): random number generator to
                use instead of the :mod:`random` module functions.

        Return:
            ArrayList: the drawn elements in drawing order.
        """
        if not isint(k):
            raise TypeError("sample size must be an integer")
        if k < 0 or k > len(self):
            raise ValueError(
                "sample size must be between 0 and the length of the "
                + self.__class__.__name__)

        rng = random if rng is None else rng
        pool = list(self._data)
        drawn = []
        for _ in range(k):
            drawn.append(pool.pop(rng.randrange(len(pool))))

        return self._wrap(drawn)
