"""
Sequence
========

Immutable, chainable wrapper around an iterable.

Chain methods only record work: each returns a new ``Sequence`` whose
iterable is a ``Stage`` pointing back at the previous one. Nothing is
pulled from the source until a terminal method (``collect``, ``reduce``,
``join``, ...) runs, and then elements flow through the chain one at a
time.

Usage:
    >>> from itertools import count
    >>> Sequence(count()).filter(lambda x: x % 3 == 0).take(4).collect()
    [0, 3, 6, 9]

Short-circuiting terminals (``first``, ``find``, ``some``, ``every``,
``includes``) and ``take``/``slice`` are safe on infinite sources. The
others drive the source to exhaustion.
"""

import logging
import numbers
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from ..errors import InvalidArgument
from . import combinators as c
from .combinators import Stage, indexed

T = TypeVar('T')
U = TypeVar('U')
logger = logging.getLogger(__name__)

_MISSING = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _strict_equal(x: Any, y: Any) -> bool:
    """
    Identity, or equal values of the same type.

    Numbers of different types compare by value, but bools only ever equal
    bools. A comparison that does not reduce to a single truth value (numpy
    arrays compare elementwise) counts as not equal.
    """
    if x is y:
        return True
    if type(x) is not type(y) and not (_is_number(x) and _is_number(y)):
        return False
    result = x == y
    if isinstance(result, bool):
        return result
    try:
        return bool(result)
    except (TypeError, ValueError):
        return False


class Sequence(Generic[T]):
    """
    Lazy sequence over any iterable.

    The wrapped iterable is never mutated. Several sequences may be built
    from the same one; if the underlying source is a single-use iterator
    (a generator, a file), those sequences share its position.
    """

    __slots__ = ('_iterable',)

    def __init__(self, iterable: Iterable[T]):
        self._iterable = iterable

    @property
    def iterable(self) -> Iterable[T]:
        return self._iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)

    def __repr__(self) -> str:
        return f"Sequence({self._iterable!r})"

    def pipe(self, func: Callable[[Iterable[T]], Iterable[U]]) -> 'Sequence[U]':
        """
        Chain a custom transformation.

        ``func`` receives the current iterable and returns a new one; it is
        applied when the resulting sequence is iterated, not now.
        """
        return Sequence(Stage(self._iterable, func))

    # ---- Element-wise ----

    def map(self, func: Callable[..., U]) -> 'Sequence[U]':
        """Map x to func(x, i)."""
        return self.pipe(lambda it: c.map_iter(it, func))

    def filter(self, predicate: Callable[..., bool]) -> 'Sequence[T]':
        """Keep elements where predicate(x, i) is true."""
        return self.pipe(lambda it: c.filter_iter(it, predicate))

    def for_each(self, func: Callable[..., Any]) -> 'Sequence[T]':
        """Run func(x, i) on each element as it is pulled through."""
        return self.pipe(lambda it: c.for_each_iter(it, func))

    def entries(self) -> 'Sequence[Tuple[T, int]]':
        """Map x to (x, i)."""
        return self.map(lambda x, i: (x, i))

    def indexes(self) -> 'Sequence[int]':
        """Map each element to its position."""
        return self.map(lambda _, i: i)

    def replace(self, a: T, b: U) -> 'Sequence[Any]':
        """Substitute b for every element equal to a."""
        return self.map(lambda x: b if _strict_equal(x, a) else x)

    def flatten(self, depth: Optional[int] = None) -> 'Sequence[Any]':
        """
        Splice nested iterables into the sequence.

        Args:
            depth: levels to open; 0 leaves elements untouched and None
                opens all of them. Strings are never opened.

        Raises:
            InvalidArgument: if depth is negative.
        """
        if depth is not None and depth < 0:
            raise InvalidArgument(f"flatten depth must be >= 0, got {depth}")
        return self.pipe(lambda it: c.flatten_iter(it, depth))

    def flat_map(self, func: Callable[..., Iterable[U]]) -> 'Sequence[U]':
        """Map, then open one level of the results."""
        return self.map(func).flatten(1)

    # ---- Joining ----

    def concat(self, *iterables: Iterable[T]) -> 'Sequence[T]':
        """Append the elements of each iterable, in order."""
        return self.pipe(lambda it: c.concat_iter(it, *iterables))

    def push(self, *values: T) -> 'Sequence[T]':
        """Append values to the end."""
        return self.pipe(lambda it: c.concat_iter(it, values))

    def unshift(self, *values: T) -> 'Sequence[T]':
        """Prepend values to the start."""
        return self.pipe(lambda it: c.concat_iter(values, it))

    # ---- Positional ----

    def pop(self) -> 'Sequence[T]':
        """Remove the last element (see ``last`` to read it)."""
        return self.pipe(c.pop_iter)

    def shift(self) -> 'Sequence[T]':
        """Remove the first element (see ``first`` to read it)."""
        return self.pipe(c.shift_iter)

    def slice(self, start: int, end: int) -> 'Sequence[T]':
        """Elements from index start to index end, end included."""
        return self.pipe(lambda it: c.slice_iter(it, start, end))

    def take(self, n: int) -> 'Sequence[T]':
        """First n elements. Safe on infinite sources."""
        return self.pipe(lambda it: c.take_iter(it, n))

    def drop(self, n: int) -> 'Sequence[T]':
        """
        Drop leading elements, yielding from index n - 1 onward.

        Note that only n - 1 elements are removed. Use ``skip`` to remove
        exactly n.
        """
        return self.pipe(lambda it: c.drop_iter(it, n))

    def skip(self, n: int) -> 'Sequence[T]':
        """Remove exactly the first n elements."""
        return self.pipe(lambda it: c.skip_iter(it, n))

    # ---- Eager (buffer everything on first pull) ----

    def reverse(self) -> 'Sequence[T]':
        """Reverse the order. Expensive: buffers the whole sequence."""
        return self.pipe(c.reverse_iter)

    def take_last(self, n: int) -> 'Sequence[T]':
        """Last n elements. Expensive: buffers the whole sequence."""
        return self.pipe(lambda it: c.take_last_iter(it, n))

    def drop_last(self, n: int) -> 'Sequence[T]':
        """All but the last n elements. Expensive: buffers the whole sequence."""
        return self.pipe(lambda it: c.drop_last_iter(it, n))

    def sort(
        self,
        cmp: Optional[Callable[[T, T], int]] = None,
        key: Optional[Callable[[T], Any]] = None,
    ) -> 'Sequence[T]':
        """Sort by a three-way comparator, a key, or natural order. Expensive."""
        return self.pipe(lambda it: c.sort_iter(it, cmp, key))

    # ---- Terminal operations ----

    def collect(self) -> List[T]:
        """Collect all elements into a list."""
        return list(self._iterable)

    def consume(self) -> None:
        """Pull every element and discard it."""
        for _ in self._iterable:
            pass

    def count(self) -> int:
        total = 0
        for _ in self._iterable:
            total += 1
        return total

    def first(self, default: Any = None) -> Optional[T]:
        """The first element, pulling nothing beyond it."""
        for x in self._iterable:
            return x
        return default

    def last(self, default: Any = None) -> Optional[T]:
        result = default
        for x in self._iterable:
            result = x
        return result

    def find(self, predicate: Callable[..., bool], default: Any = None) -> Optional[T]:
        """
        The first element where predicate(x, i) is true, or default.

        Stops pulling as soon as a match is found.
        """
        predicate = indexed(predicate, 1)
        for i, x in enumerate(self._iterable):
            if predicate(x, i):
                return x
        return default

    def some(self, predicate: Callable[..., bool]) -> bool:
        return self.find(predicate, _MISSING) is not _MISSING

    def every(self, predicate: Callable[..., bool]) -> bool:
        predicate = indexed(predicate, 1)
        return not self.some(lambda x, i: not predicate(x, i))

    def includes(self, value: Any) -> bool:
        return self.some(lambda x: _strict_equal(x, value))

    def reduce(self, initial: U, func: Callable[..., U]) -> U:
        """
        Fold left: ``acc = func(acc, x, i)`` starting from ``initial``.

        The index is passed only if func takes three positional parameters.
        """
        func = indexed(func, 2)
        result = initial
        for i, x in enumerate(self._iterable):
            result = func(result, x, i)
        return result

    def sum(self, start: Any = 0) -> Any:
        return self.reduce(start, operator.add)

    def join(self, separator: str) -> str:
        """
        Join the string forms of the elements.

        Strings are used as they are and other values through ``str()``.
        ``None`` and anything whose string form is empty are skipped
        without leaving a separator behind.
        """
        parts = []
        for x in self._iterable:
            if x is None:
                continue
            text = x if isinstance(x, str) else str(x)
            if text:
                parts.append(text)
        return separator.join(parts)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Collect into a numpy array."""
        data = self.collect()
        logger.debug("to_array collected %d element(s)", len(data))
        return np.array(data, dtype=dtype)


def seq(iterable: Iterable[T]) -> Sequence[T]:
    """
    Convenience function to create a Sequence.

    Usage:
        >>> seq(range(10)).filter(lambda x: x % 2).collect()
        [1, 3, 5, 7, 9]
    """
    return Sequence(iterable)
