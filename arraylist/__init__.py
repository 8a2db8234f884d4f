"""
A python list augmented with collection helpers.

The arraylist package provides :class:`ArrayList`, a list-like
container with the convenience methods found in languages with rich
collection libraries: filtering, grouping, sampling, zipping, chunking,
statistical aggregates...

Methods come in pairs where it matters: mutating methods (such as
:meth:`ArrayList.add` or :meth:`ArrayList.shuffle`) modify the list in
place and return it so that calls can be chained, while their
counterparts (:meth:`ArrayList.append`, :meth:`ArrayList.shuffled`)
leave it untouched and return a new ArrayList. All operations that
produce a sequence return an ArrayList.

Errors raised by user provided functions (predicates, transforms...)
are wrapped into :class:`EvaluationError` by default, see
:func:`seterr`.
"""

from .core import ArrayList
from .errors import EmptySequenceError, EvaluationError, NoSuchElementError, \
    seterr
from .utils import EMPTY

__all__ = [
    "ArrayList",
    "EMPTY",
    "EvaluationError",
    "NoSuchElementError",
    "EmptySequenceError",
    "seterr",
]
