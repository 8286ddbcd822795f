"""
Lazy sequences: restartable producers, curried transformers and the eager
helpers that turn a finite prefix into a list.

Every producer and transformer returns a LazySequence. Nothing is computed
until the sequence is iterated, and each iteration starts a fresh traversal.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List

from .combinators import compose
from .utils import require_callable, require_count

logger = logging.getLogger(__name__)


class LazySequence:
    """
    A restartable, possibly infinite, lazy sequence.

    Wraps a zero-argument factory that builds a new iterator. Iterating the
    sequence calls the factory, so two traversals never share a cursor and
    a partially consumed traversal does not affect the next one.
    """
    def __init__(self, factory: Callable[[], Iterator]):
        self._factory = factory

    def __iter__(self):
        return self._factory()

    # --------- chainable operators (lazy) ----------
    def drop(self, n):
        return drop(n)(self)

    def take(self, n):
        return take(n)(self)

    def prepend(self, *others):
        return prepend(*others)(self)

    # --------- forcing evaluation ----------
    def to_list(self) -> List[Any]:
        """Collect every element. Never call this on an infinite sequence."""
        return collect(self)


# --------- producers ----------
def generate(fn: Callable[[int], Any]) -> LazySequence:
    """
    Infinite sequence of fn(0), fn(1), fn(2), ...

    Raises InvalidArgument straight away if `fn` is not callable.

        >>> take_eager(5)(generate(lambda i: i * i))
        [0, 1, 4, 9, 16]
    """
    require_callable("generate", fn)

    def _generate():
        idx = 0
        while True:
            yield fn(idx)
            idx += 1

    logger.debug(f"generate() built from {fn!r}")
    return LazySequence(_generate)


def iterate(fn: Callable[[Any], Any]) -> Callable[[Any], LazySequence]:
    """Infinite sequence seed, fn(seed), fn(fn(seed)), ..."""
    require_callable("iterate", fn)

    def _with_seed(seed):
        def _iterate():
            current = seed
            while True:
                yield current
                current = fn(current)
        return LazySequence(_iterate)

    return _with_seed


def repeat(value: Any) -> LazySequence:
    """Infinite sequence yielding `value` over and over"""
    def _repeat():
        while True:
            yield value
    return LazySequence(_repeat)


# --------- transformers ----------
def drop(n: int) -> Callable[[Iterable], LazySequence]:
    """
    Skip the first `n` elements of a source, then pass the rest through.

    A source shorter than `n` produces an empty sequence. Elements are
    discarded one at a time as they are pulled; nothing is buffered.
    """
    n = require_count("drop", n)

    def _apply(source: Iterable) -> LazySequence:
        def _drop():
            skipped = 0
            for x in source:
                if skipped < n:
                    skipped += 1
                    continue
                yield x
        return LazySequence(_drop)

    logger.debug(f"drop({n}) transformer built")
    return _apply


def take(n: int) -> Callable[[Iterable], LazySequence]:
    """
    Keep at most the first `n` elements of a source.

    Stops pulling from the source as soon as `n` elements were produced,
    which makes it safe on infinite sequences.
    """
    n = require_count("take", n)

    def _apply(source: Iterable) -> LazySequence:
        def _take():
            if n == 0:
                return
            taken = 0
            for x in source:
                yield x
                taken += 1
                if taken >= n:
                    return
        return LazySequence(_take)

    logger.debug(f"take({n}) transformer built")
    return _apply


def prepend(*others: Iterable) -> Callable[[Iterable], LazySequence]:
    """
    Yield every element of `others`, in the order given, then the source.

    With no `others` the result behaves exactly like the source.

        >>> collect(prepend([1, 2], [3])([4, 5, 6]))
        [1, 2, 3, 4, 5, 6]
    """
    def _apply(source: Iterable) -> LazySequence:
        def _prepend():
            for other in others:
                yield from other
            yield from source
        return LazySequence(_prepend)

    logger.debug(f"prepend() transformer built with {len(others)} leading sequence(s)")
    return _apply


# --------- eager helpers ----------
def collect(source: Iterable) -> List[Any]:
    """Materialise every element of a finite iterable into a new list"""
    return list(source)


def take_eager(n: int) -> Callable[[Iterable], List[Any]]:
    """take(n) followed by collect, as a single curried call"""
    return compose(collect)(take(n))
