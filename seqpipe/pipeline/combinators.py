"""
Combinators
===========

Generator-based building blocks for lazy pipelines. Each function takes
an upstream iterable and returns an iterator that pulls from upstream
only when its own consumer asks for the next element:

    >>> it = take_iter(map_iter(itertools.count(), lambda x: x * x), 3)
    >>> list(it)
    [0, 1, 4]

The eager combinators (``reverse_iter``, ``take_last_iter``,
``drop_last_iter``, ``sort_iter``) buffer their whole upstream, but only
once the first element is requested. They never finish on an infinite
source.

Callbacks are called with ``(x, i)`` when they require a second
positional parameter and with ``(x)`` otherwise; see ``indexed``.
"""

import functools
import inspect
import logging
from collections.abc import Iterable as IterableABC
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from ..config import settings
from ..errors import InvalidArgument

T = TypeVar('T')
U = TypeVar('U')
logger = logging.getLogger(__name__)

# Values that are iterable but always treated as leaves by flatten.
ATOMIC_TYPES = (str, bytes, bytearray)


def _positional_count(func: Callable) -> Optional[int]:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    kinds = (inspect.Parameter.POSITIONAL_ONLY,
             inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1 for p in sig.parameters.values()
        if p.kind in kinds and p.default is inspect.Parameter.empty
    )


def indexed(func: Callable, arity: int) -> Callable:
    """
    Normalize a callback so it can always be called with an index appended.

    ``arity`` is the number of arguments the callback is guaranteed to
    get (1 for map/filter, 2 for reduce). If ``func`` requires more
    positional parameters than that, it receives the index as well;
    otherwise the index is dropped before the call. Parameters with
    defaults do not count, so ``round`` or ``str.strip`` never see it.
    """
    count = _positional_count(func)
    if count is not None and count > arity:
        return func

    @functools.wraps(func)
    def without_index(*args):
        return func(*args[:arity])

    return without_index


class Stage(IterableABC):
    """
    One link of a pipeline: ``transform`` applied to ``upstream``.

    The transform runs each time the stage is iterated, so a chain over a
    list can be traversed repeatedly while a chain over a generator shares
    the generator's cursor.
    """

    __slots__ = ('upstream', 'transform')

    def __init__(self, upstream: Iterable[T], transform: Callable[[Iterable[T]], Iterable[U]]):
        self.upstream = upstream
        self.transform = transform

    def __iter__(self) -> Iterator[U]:
        return iter(self.transform(self.upstream))

    def __repr__(self) -> str:
        name = getattr(self.transform, '__name__', type(self.transform).__name__)
        return f"Stage({name}, upstream={type(self.upstream).__name__})"


# ---- Lazy, one element at a time ----

def map_iter(stream: Iterable[T], func: Callable[..., U]) -> Iterator[U]:
    func = indexed(func, 1)
    for i, x in enumerate(stream):
        yield func(x, i)


def filter_iter(stream: Iterable[T], predicate: Callable[..., bool]) -> Iterator[T]:
    """Keep elements where predicate(x, i) holds; i counts dropped ones too."""
    predicate = indexed(predicate, 1)
    for i, x in enumerate(stream):
        if predicate(x, i):
            yield x


def for_each_iter(stream: Iterable[T], func: Callable[..., Any]) -> Iterator[T]:
    """Call func(x, i) as each element passes through, then yield x."""
    func = indexed(func, 1)
    for i, x in enumerate(stream):
        func(x, i)
        yield x


def concat_iter(*streams: Iterable[T]) -> Iterator[T]:
    for stream in streams:
        yield from stream


def _flatten(stream: Iterable[Any], depth: Optional[int]) -> Iterator[Any]:
    subdepth = None if depth is None else depth - 1
    for x in stream:
        if depth == 0 or isinstance(x, ATOMIC_TYPES) or not isinstance(x, IterableABC):
            yield x
        else:
            yield from _flatten(x, subdepth)


def flatten_iter(stream: Iterable[Any], depth: Optional[int] = None) -> Iterator[Any]:
    """
    Recursively splice nested iterables into the output.

    ``depth`` bounds how many levels are opened (0 returns elements as
    they are, None opens every level). Strings and bytes are leaves.
    Raises InvalidArgument right away for a negative depth.
    """
    if depth is not None and depth < 0:
        raise InvalidArgument(f"flatten depth must be >= 0, got {depth}")
    return _flatten(stream, depth)


def pop_iter(stream: Iterable[T]) -> Iterator[T]:
    """Everything except the last element."""
    it = iter(stream)
    try:
        pending = next(it)
    except StopIteration:
        return
    for x in it:
        yield pending
        pending = x


def shift_iter(stream: Iterable[T]) -> Iterator[T]:
    """Everything except the first element."""
    it = iter(stream)
    for _ in it:
        break
    yield from it


def slice_iter(stream: Iterable[T], start: int, end: int) -> Iterator[T]:
    """Elements at positions start..end, both ends included."""
    if end < 0 or end < start:
        return
    for i, x in enumerate(stream):
        if i >= start:
            yield x
        if i >= end:
            return


def take_iter(stream: Iterable[T], n: int) -> Iterator[T]:
    """First n elements; element n+1 is never pulled."""
    if n <= 0:
        return
    count = 0
    for item in stream:
        yield item
        count += 1
        if count >= n:
            return


def drop_iter(stream: Iterable[T], n: int) -> Iterator[T]:
    """
    Yield from position n - 1 onward.

    This withholds n - 1 elements, one fewer than ``skip_iter``: drop(1)
    removes nothing and drop(3) removes the first two. Existing callers
    depend on it; use ``skip_iter`` to remove exactly n.
    """
    for i, x in enumerate(stream):
        if i >= n - 1:
            yield x


def skip_iter(stream: Iterable[T], n: int) -> Iterator[T]:
    """Yield everything after the first n elements."""
    count = 0
    for item in stream:
        if count >= n:
            yield item
        count += 1


# ---- Eager: buffer all of upstream on first pull ----

def _materialize(stream: Iterable[T], name: str) -> List[T]:
    buffer = list(stream)
    logger.debug("%s materialized %d element(s)", name, len(buffer))
    threshold = settings.materialize_warn_threshold
    if threshold is not None and len(buffer) > threshold:
        logger.warning(
            "%s buffered %d elements (threshold %d)", name, len(buffer), threshold
        )
    return buffer


def reverse_iter(stream: Iterable[T]) -> Iterator[T]:
    buffer = _materialize(stream, 'reverse')
    yield from reversed(buffer)


def take_last_iter(stream: Iterable[T], n: int) -> Iterator[T]:
    buffer = _materialize(stream, 'take_last')
    yield from slice_iter(buffer, len(buffer) - n, len(buffer) - 1)


def drop_last_iter(stream: Iterable[T], n: int) -> Iterator[T]:
    buffer = _materialize(stream, 'drop_last')
    yield from slice_iter(buffer, 0, len(buffer) - n - 1)


def sort_iter(
    stream: Iterable[T],
    cmp: Optional[Callable[[T, T], int]] = None,
    key: Optional[Callable[[T], Any]] = None,
) -> Iterator[T]:
    """
    Sorted copy of upstream.

    ``cmp`` is a three-way comparator (negative, zero, positive) and wins
    over ``key``. With neither, elements are compared directly.
    """
    buffer = _materialize(stream, 'sort')
    if cmp is not None:
        key = functools.cmp_to_key(cmp)
    buffer.sort(key=key)
    yield from buffer
