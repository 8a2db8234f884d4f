"""The :class:`ArrayList` container."""

import functools
import random
from collections.abc import Sequence

from .aggregation import AggregationMixin
from .errors import evaluate
from .transformation import TransformationMixin
from .utils import EMPTY, isint, normalize_index


def is_sequence(value):
    return isinstance(value, (Sequence, ArrayList)) \
        and not isinstance(value, (str, bytes, bytearray))


def is_spreadable(value):
    """Return wether `concat` should splice `value` instead of adding it."""
    return isinstance(value, (list, tuple, ArrayList))


class ArrayList(AggregationMixin, TransformationMixin):
    """A list with the collection helpers found in languages like Kotlin.

    The constructor interprets its arguments depending on their shape:

    - ``ArrayList(size, generator)`` builds ``generator(i)`` for each
      index ``i`` in ``range(size)``.
    - ``ArrayList(sequence)`` copies a list, tuple, range or ArrayList.
    - ``ArrayList(size)`` allocates `size` slots holding
      :data:`~arraylist.EMPTY`. Such slots count in ``len()`` but not in
      :meth:`count` or :meth:`is_empty`, the same way a sparse array
      would behave.
    - ``ArrayList(*elements)`` otherwise.

    Use :meth:`of` to build a list from literal elements without any
    interpretation, and :meth:`from_iterable` to copy the items of other
    iterables such as generators, sets or numpy arrays: those are not
    sequences, so ``ArrayList(array)`` holds the array as its only
    element.

    Methods come in two flavours: mutating ones (:meth:`add`,
    :meth:`remove`, :meth:`insert`, :meth:`set`, :meth:`shuffle`,
    :meth:`reverse`...) modify the list and return it to allow chaining,
    the others leave it untouched and return a new ArrayList.

    Example:

        >>> ArrayList(5, lambda i: i * 2)
        ArrayList([0, 2, 4, 6, 8])
        >>> ArrayList([1, 2, 3]).add(4).append(5)
        ArrayList([1, 2, 3, 4, 5])
        >>> ArrayList(3).is_empty()
        True
    """
    def __init__(self, *args):
        if len(args) == 2 and isint(args[0]) and callable(args[1]):
            data = self._generate(*args)
        elif len(args) == 1 and is_sequence(args[0]):
            data = list(args[0])
        elif len(args) == 1 and isint(args[0]):
            if args[0] < 0:
                raise ValueError(
                    self.__class__.__name__ + " size must be positive")
            data = [EMPTY] * args[0]
        else:
            data = list(args)

        self._data = data

    @classmethod
    def _wrap(cls, data):
        # takes ownership of data
        new = cls.__new__(cls)
        new._data = data
        return new

    def _generate(self, size, generator):
        if size < 0:
            raise ValueError(
                self.__class__.__name__ + " size must be positive")
        return [self._call("generate", i, generator, i) for i in range(size)]

    def _call(self, operation, index, func, *args):
        return evaluate(
            self.__class__.__name__ + "." + operation, index, func, *args)

    def _items(self):
        for i, value in enumerate(self._data):
            if value is not EMPTY:
                yield i, value

    # Alternative constructors ------------------------------------------------

    @classmethod
    def of(cls, *elements):
        """Build a list from the given elements.

        Unlike the constructor, a single integer argument becomes an
        element:

        >>> ArrayList.of(10)
        ArrayList([10])
        """
        return cls._wrap(list(elements))

    @classmethod
    def iterate(cls, size, generator):
        """Build a list of `size` elements by calling `generator(index)`.

        >>> ArrayList.iterate(5, lambda i: i * 2)
        ArrayList([0, 2, 4, 6, 8])
        """
        if not isint(size):
            raise TypeError("size must be an integer")
        if not callable(generator):
            raise TypeError("generator must be callable")
        return cls(size, generator)

    @classmethod
    def from_iterable(cls, iterable):
        """Build a list from the items of any iterable."""
        return cls._wrap(list(iterable))

    # Sequence protocol -------------------------------------------------------

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(self._data)

    def __contains__(self, value):
        return value in self._data

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._wrap(self._data[key])

        elif isint(key):
            if key < -len(self) or key >= len(self):
                raise IndexError(
                    self.__class__.__name__ + " index out of range")

            return self._data[key]

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            self._data[key] = value

        elif isint(key):
            if key < -len(self) or key >= len(self):
                raise IndexError(
                    self.__class__.__name__ + " index out of range")

            self._data[key] = value

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    def __delitem__(self, key):
        if not isinstance(key, slice) and not isint(key):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

        try:
            del self._data[key]
        except IndexError:
            raise IndexError(
                self.__class__.__name__ + " index out of range") from None

    def __eq__(self, other):
        if not isinstance(other, (ArrayList, list)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, (ArrayList, list)):
            return NotImplemented
        return self.concat(other)

    def __radd__(self, other):
        if not isinstance(other, list):
            return NotImplemented
        return self._wrap(other + self._data)

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._data)

    # Mutating operations -----------------------------------------------------

    def add(self, *elements):
        """Append elements at the end of this list.

        Return:
            ArrayList: this list.
        """
        self._data.extend(elements)
        return self

    def remove(self, *elements):
        """Remove the first occurrence of each given element.

        Each requested element consumes at most one occurrence, so
        duplicates must be requested as many times as they should be
        removed. Elements that are not found are ignored.

        Return:
            ArrayList: this list.

        Example:

            >>> ArrayList.of(1, 2, 1, 3, 1).remove(1, 1, 4)
            ArrayList([2, 3, 1])
        """
        for element in elements:
            for i, value in self._items():
                if value == element:
                    del self._data[i]
                    break

        return self

    def remove_from_index(self, index, amount=1):
        """Remove `amount` consecutive elements starting at `index`.

        Return:
            ArrayList: this list.
        """
        start = normalize_index(index, len(self))
        del self._data[start:start + max(0, amount)]
        return self

    def insert(self, index, *elements):
        """Insert elements before `index`.

        Negative indices count from the end, out of range indices are
        clipped.

        Return:
            ArrayList: this list.

        Example:

            >>> ArrayList.of(1, 4).insert(1, 2, 3)
            ArrayList([1, 2, 3, 4])
        """
        start = normalize_index(index, len(self))
        self._data[start:start] = elements
        return self

    def set(self, index, *elements):
        """Overwrite elements from `index` onward.

        Exactly `len(elements)` slots are replaced, the list grows if
        they go past its end.

        Return:
            ArrayList: this list.

        Example:

            >>> ArrayList.of(1, 2, 3, 4).set(1, 'a', 'b')
            ArrayList([1, 'a', 'b', 4])
        """
        start = normalize_index(index, len(self))
        self._data[start:start + len(elements)] = elements
        return self

    def shuffle(self, rng=None):
        """Shuffle the list in place with the Fisher-Yates algorithm.

        Args:
            rng (Optional[random.Random]): random number generator to
                use instead of the :mod:`random` module functions.

        Return:
            ArrayList: this list.
        """
        rng = random if rng is None else rng
        data = self._data
        for i in range(len(data) - 1, 0, -1):
            j = rng.randrange(i + 1)
            data[i], data[j] = data[j], data[i]

        return self

    def reverse(self):
        """Reverse the list in place and return it."""
        self._data.reverse()
        return self

    # Non-mutating counterparts -----------------------------------------------

    def copy_of(self):
        """Return a shallow copy of this list."""
        return self._wrap(list(self._data))

    def append(self, *elements):
        """Like :meth:`add` but return a new list."""
        return self.copy_of().add(*elements)

    def difference(self, elements):
        """Like :meth:`remove` but return a new list.

        Example:

            >>> numbers = ArrayList.of(1, 2, 3, 4)
            >>> numbers.difference([4])
            ArrayList([1, 2, 3])
            >>> numbers
            ArrayList([1, 2, 3, 4])
        """
        return self.copy_of().remove(*elements)

    def shuffled(self, rng=None):
        """Like :meth:`shuffle` but return a new list."""
        return self.copy_of().shuffle(rng)

    def reversed(self):
        """Return a reversed copy of this list."""
        return self.copy_of().reverse()

    def sorted(self, comparator=None, key=None, reverse=False):
        """Return a sorted copy of this list.

        Args:
            comparator (Optional[Callable[[Any, Any], number]]): a
                function returning a negative number, zero or a positive
                number when its first argument should come before, tie
                with or come after the second. Natural ordering is used
                by default.
            key (Optional[Callable]): alternatively, a key function as
                used by :func:`python:sorted`.
            reverse (bool): sort in descending order.

        Unassigned slots are moved to the end.

        Example:

            >>> ArrayList.of(3, 1, 2).sorted(lambda a, b: b - a)
            ArrayList([3, 2, 1])
        """
        if comparator is not None and key is not None:
            raise TypeError("comparator and key are mutually exclusive")
        if comparator is not None:
            key = functools.cmp_to_key(comparator)

        values = sorted(
            (v for _, v in self._items()), key=key, reverse=reverse)
        holes = len(self) - len(values)
        return self._wrap(values + [EMPTY] * holes)

    # Standard operations -----------------------------------------------------

    def at(self, index):
        """Return the element at `index`, negative values count from the end.

        Raises:
            IndexError: if `index` is not in `[-len(self), len(self))`.
        """
        if not isint(index):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers, not "
                + index.__class__.__name__)
        return self[index]

    def slice(self, start=None, end=None):
        """Return a copy of the range `[start, end)`.

        As with Python slices, negative values count from the end and
        `end` defaults to the length of the list.
        """
        return self._wrap(self._data[start:end])

    def concat(self, *items):
        """Return a new list with `items` added at the end.

        Lists, tuples and ArrayLists are spread, other values are added
        as single elements.

        Example:

            >>> ArrayList.of(1).concat([2, 3], 4, ArrayList.of(5))
            ArrayList([1, 2, 3, 4, 5])
        """
        data = list(self._data)
        for item in items:
            if is_spreadable(item):
                data.extend(item)
            else:
                data.append(item)

        return self._wrap(data)

    def map(self, transform):
        """Return a new list with `transform` applied on each element.

        Unassigned slots are kept as such.
        """
        return self._wrap([
            value if value is EMPTY else self._call("map", i, transform, value)
            for i, value in enumerate(self._data)])

    def filter(self, predicate):
        """Return a new list with the elements satisfying `predicate`."""
        return self._wrap([
            value for i, value in self._items()
            if self._call("filter", i, predicate, value)])

    def flat_map(self, transform):
        """Map elements and spread the results one level.

        Example:

            >>> ArrayList.of(1, 2).flat_map(lambda x: [x, x * 10])
            ArrayList([1, 10, 2, 20])
        """
        return self._wrap([]).concat(*(
            self._call("flat_map", i, transform, value)
            for i, value in self._items()))

    # Comparison and export ---------------------------------------------------

    def equals(self, other):
        """Compare elements position by position.

        Return:
            bool: `True` if `other` has the same length and all its
            elements are equal to the element at the same position in
            this list.
        """
        try:
            if len(other) != len(self):
                return False
        except TypeError:  # object has not len
            return False

        return all(a == b for a, b in zip(self._data, other))

    def to_list(self):
        """Return the elements in a :class:`python:list`.

        Unassigned slots become `None`.
        """
        return [None if v is EMPTY else v for v in self._data]

    def to_set(self):
        """Return the elements in a :class:`python:set`."""
        return set(self.to_list())
