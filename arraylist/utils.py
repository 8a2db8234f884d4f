"""Miscellaneous tools for internal use."""

import logging
import numbers
from collections.abc import Mapping
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


logger = get_logger(__name__)


class Empty(object):
    """Marker for a slot that was allocated but never assigned.

    There is only one instance, :data:`EMPTY`.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "<empty>"

    def __bool__(self):
        return False

    def __reduce__(self):
        return Empty, ()


EMPTY = Empty()


def normalize_index(index, size):
    """Convert a possibly negative insertion index into a position.

    The result is clipped to `[0, size]` so that it can be used as a
    splice position, the way :meth:`list.insert` interprets indices.
    """
    if not isint(index):
        raise TypeError(
            "indices must be integers, not " + index.__class__.__name__)

    if index < 0:
        index += size

    return clip(index, 0, size)


def getprop(obj, name):
    """Read an attribute, or a key when `obj` is a mapping.

    Raises:
        LookupError: if `obj` has no such attribute or key.
    """
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError:
            raise LookupError(name) from None

    try:
        return getattr(obj, name)
    except AttributeError:
        raise LookupError(name) from None


def hasprop(obj, name):
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def is_pair(value, keytypes=None):
    """Return wether `value` is a two items sequence.

    Args:
        value (Any): value to check.
        keytypes (Optional[Tuple[type]]): if set, the first item must
            also be an instance of these types.
    """
    try:
        if len(value) != 2:
            return False
    except TypeError:  # object has not len
        return False

    if isinstance(value, (str, bytes, Mapping)):
        return False

    if keytypes is not None:
        key = value[0]
        return isinstance(key, keytypes) and not isinstance(key, bool)

    return True


def to_number(value):
    """Coerce a value into a number, `nan` if that is not possible.

    Numbers (including numpy scalars) are returned unchanged, booleans
    count as 0 and 1, anything else goes through :class:`float`.
    """
    if isinstance(value, numbers.Number):
        return value

    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("cannot interpret %r as a number", value)
        return float("nan")
