"""Operations that reshape an ArrayList into new ones."""

import numbers

from .utils import EMPTY, isint, getprop, hasprop, is_pair, get_logger


logger = get_logger(__name__)


class TransformationMixin(object):
    def map_not_null(self, transform):
        """Map elements and drop the `None` results."""
        return self.map(transform).filter_not_null()

    def map_not_falsy(self, transform):
        """Map elements and drop the results that evaluate as false."""
        return self.map(transform).filter_not_falsy()

    def filter_instance(self, cls):
        """Keep the elements that are instances of `cls`.

        `cls` can be a type or a tuple of types as accepted by
        :func:`python:isinstance`.
        """
        return self._wrap([v for _, v in self._items() if isinstance(v, cls)])

    def filter_not_null(self):
        """Drop `None` elements and unassigned slots."""
        return self._wrap([v for _, v in self._items() if v is not None])

    def filter_not_falsy(self):
        """Drop elements that evaluate as false."""
        return self._wrap([v for _, v in self._items() if v])

    def unique(self):
        """Drop repeated elements, keeping the first occurrences.

        Elements must be hashable.
        """
        return self._wrap(list(dict.fromkeys(self._data)))

    def chunked(self, size=None):
        """Split the list into consecutive chunks of `size` elements.

        The last chunk is shorter if `size` does not divide the length.
        A missing or non-positive `size` yields an empty list.

        Example:

            >>> ArrayList.of(1, 2, 3, 4, 5).chunked(2)
            ArrayList([ArrayList([1, 2]), ArrayList([3, 4]), ArrayList([5])])
        """
        if size is None or size < 1:
            logger.warning("chunk size %r is not positive, no chunk made", size)
            return self._wrap([])
        if not isint(size):
            raise TypeError("chunk size must be an integer")

        data = self._data
        return self._wrap([
            self._wrap(data[i:i + size]) for i in range(0, len(data), size)])

    def drop(self, n):
        """Drop the first `n` elements, or keep the last `-n` if negative.

        Example:

            >>> numbers = ArrayList.of(1, 2, 3, 4, 5)
            >>> numbers.drop(3)
            ArrayList([4, 5])
            >>> numbers.drop(-2)
            ArrayList([4, 5])
        """
        return self.slice(n)

    def take(self, n):
        """Keep the first `n` elements, or drop the last `-n` if negative.

        Example:

            >>> numbers = ArrayList.of(1, 2, 3, 4, 5)
            >>> numbers.take(1)
            ArrayList([1])
            >>> numbers.take(-2)
            ArrayList([1, 2, 3])
        """
        return self.slice(0, n)

    def _prefix(self, operation, predicate):
        # unassigned slots neither stop nor get passed to the predicate
        for i, value in enumerate(self._data):
            if value is EMPTY or self._call(operation, i, predicate, value):
                yield value
            else:
                return

    def drop_while(self, predicate):
        """Drop leading elements as long as they satisfy `predicate`."""
        n = sum(1 for _ in self._prefix("drop_while", predicate))
        return self.slice(n)

    def take_while(self, predicate):
        """Keep leading elements as long as they satisfy `predicate`."""
        return self._wrap(list(self._prefix("take_while", predicate)))

    def take_while_lazy(self, predicate):
        """Lazy version of :meth:`take_while`.

        Return:
            Iterator: a generator that yields leading elements and stops
            at the first one that does not satisfy `predicate`, which is
            only evaluated as items are requested.
        """
        return self._prefix("take_while_lazy", predicate)

    def copy_of_range(self, start, end=None):
        """Return a copy of the elements in `[start, end)`.

        Note:
            `end` defaults to ``len(self) - 1``, so the last element is
            left out unless `end` is given. Use :meth:`slice` to copy up
            to the end.
        """
        if end is None:
            end = len(self) - 1
        return self.slice(start, end)

    def zip(self, other, transform=None):
        """Pair elements of this list with those of `other` at the same index.

        The result has the length of this list, missing elements from
        `other` are replaced by `None`.

        Args:
            other (Iterable): the elements to pair with.
            transform (Optional[Callable[[Any, Any], Any]]): combines each
                pair, defaults to building a tuple.

        Example:

            >>> ArrayList.of(1, 2, 3).zip(['a', 'b'])
            ArrayList([(1, 'a'), (2, 'b'), (3, None)])
        """
        other = list(other)
        zipped = []
        for i, value in enumerate(self._data):
            if value is EMPTY:
                zipped.append(EMPTY)
                continue

            partner = other[i] if i < len(other) else None
            if transform is None:
                zipped.append((value, partner))
            else:
                zipped.append(self._call("zip", i, transform, value, partner))

        return self._wrap(zipped)

    def zip_with_next(self, transform=None):
        """Pair elements two by two: `(0, 1), (2, 3), ...`.

        With an odd length, the last element is paired with `None`.
        Unassigned slots are passed as `None`.

        Example:

            >>> ArrayList.of(1, 2, 3, 4, 5).zip_with_next()
            ArrayList([(1, 2), (3, 4), (5, None)])
        """
        data = self._data
        pairs = []
        for i in range(0, len(data), 2):
            a = None if data[i] is EMPTY else data[i]
            b = data[i + 1] if i + 1 < len(data) else None
            b = None if b is EMPTY else b
            if transform is None:
                pairs.append((a, b))
            else:
                pairs.append(self._call("zip_with_next", i, transform, a, b))

        return self._wrap(pairs)

    def unzip(self):
        """Split a list of pairs into two lists.

        Raises:
            TypeError: if an element is not a sequence of two items.

        Example:

            >>> letters, numbers = ArrayList.of(('a', 1), ('b', 2)).unzip()
            >>> letters, numbers
            (ArrayList(['a', 'b']), ArrayList([1, 2]))
        """
        firsts, seconds = [], []
        for _, value in self._items():
            if not is_pair(value):
                raise TypeError(
                    self.__class__.__name__
                    + " must be exclusively made of pairs")
            firsts.append(value[0])
            seconds.append(value[1])

        return self._wrap(firsts), self._wrap(seconds)

    def associate_with(self, prop):
        """Map each distinct element to one of its properties.

        Args:
            prop (Union[str, Callable[[Any], Any]]): either the name of an
                attribute (or key, for hashable mappings) which must be set
                and evaluate as true on every element, or a function that
                computes the value from an element.

        Return:
            dict: elements as keys, in order of first occurrence.

        Elements become dictionary keys so they must be hashable, use
        :meth:`group_by` or :meth:`map` on lists of dicts.

        Raises:
            TypeError: if `prop` is neither a string nor a callable, or if
                an element is not hashable.
            ValueError: if an element lacks the `prop` property.
        """
        if isinstance(prop, str):
            def select(i, x):
                try:
                    value = getprop(x, prop)
                except LookupError:
                    value = None
                if not value:
                    raise ValueError(
                        "Not all elements in {} have the {} property".format(
                            self.__class__.__name__, prop))
                return value

        elif callable(prop):
            def select(i, x):
                return self._call("associate_with", i, prop, x)

        else:
            raise TypeError(
                "prop must be a string or a callable, not "
                + prop.__class__.__name__)

        associations = {}
        for i, value in self._items():
            try:
                hash(value)
            except TypeError:
                raise TypeError(
                    "{} elements must be hashable to be associated, got {}"
                    .format(self.__class__.__name__,
                            value.__class__.__name__)) from None

            if value not in associations:
                associations[value] = select(i, value)

        return associations

    def group_by(self, key):
        """Group elements by a property or computed key.

        Args:
            key (Union[str, Callable[[Any], Hashable]]): either the name of
                an attribute (or key, for mappings) that every element
                must have, or a function that computes the group key.

        Return:
            Dict[Any, ArrayList]: groups in order of first occurrence.

        Raises:
            TypeError: if an element does not have the `key` property.

        Example:

            >>> ArrayList.of(1, 2, 3, 4, 5).group_by(lambda x: x % 2)
            {1: ArrayList([1, 3, 5]), 0: ArrayList([2, 4])}
        """
        if isinstance(key, str):
            if not all(hasprop(v, key) for _, v in self._items()):
                raise TypeError(
                    "Not all objects in {} share the {} property".format(
                        self.__class__.__name__, key))
            keys = [(v, getprop(v, key)) for _, v in self._items()]

        elif callable(key):
            keys = [(v, self._call("group_by", i, key, v))
                    for i, v in self._items()]

        else:
            raise TypeError(
                "key must be a string or a callable, not "
                + key.__class__.__name__)

        groups = {}
        for value, k in keys:
            if k not in groups:
                groups[k] = self._wrap([])
            groups[k]._data.append(value)

        return groups

    def from_pairs(self):
        """Build a dictionary from `(key, value)` pairs.

        Keys must be strings or numbers, later pairs override earlier
        ones.

        Raises:
            TypeError: if an element is not a valid pair.

        Example:

            >>> ArrayList.of(('a', 1), ['b', 2]).from_pairs()
            {'a': 1, 'b': 2}
        """
        result = {}
        for _, value in self._items():
            if not is_pair(value, (str, numbers.Number)):
                raise TypeError(
                    self.__class__.__name__
                    + " must be exclusively made of pairs")
            result[value[0]] = value[1]

        return result
