"""
List utilities.

All functions are curried and leave their inputs untouched: anything that
returns a list returns a new one. Absence is reported in-band (None or -1),
never by raising.
"""

from typing import Any, Callable, List, Optional


def concat(first: List[Any]) -> Callable[[List[Any]], List[Any]]:
    """New list holding the elements of `first` followed by `second`"""
    def _concat(second: List[Any]) -> List[Any]:
        return [*first, *second]
    return _concat


def find_last(predicate: Callable[[Any], bool]) -> Callable[[List[Any]], Optional[Any]]:
    """
    Last element satisfying `predicate`, or None when nothing matches.

    Scans from the end, so the predicate is not called on elements before
    the match.

        >>> find_last(lambda x: x % 2 == 0)([1, 2, 3, 4, 5])
        4
    """
    def _find_last(arr: List[Any]) -> Optional[Any]:
        for i in range(len(arr) - 1, -1, -1):
            if predicate(arr[i]):
                return arr[i]
        return None
    return _find_last


def flatten(arr: List[List[Any]]) -> List[Any]:
    """
    Flatten exactly one level of nesting.

        >>> flatten([[1, 2], [3, 4], [5]])
        [1, 2, 3, 4, 5]
        >>> flatten([[[1]], [[2]]])
        [[1], [2]]
    """
    result = []
    for inner in arr:
        result.extend(inner)
    return result


def includes(x: Any) -> Callable[[List[Any]], bool]:
    """True when some element equals `x`"""
    def _includes(arr: List[Any]) -> bool:
        for item in arr:
            if item == x:
                return True
        return False
    return _includes


def index_of(x: Any) -> Callable[[List[Any]], int]:
    """Index of the first element equal to `x`, or -1"""
    def _index_of(arr: List[Any]) -> int:
        for i, item in enumerate(arr):
            if item == x:
                return i
        return -1
    return _index_of


def push(arr: List[Any]) -> Callable[[Any], List[Any]]:
    """New list with `x` appended to a copy of `arr`"""
    def _push(x: Any) -> List[Any]:
        return [*arr, x]
    return _push


def reduce_right(fn: Callable[[Any, Any], Any]):
    """
    Fold from the last element to the first.

    reduce_right(fn)(init)([a, b, c]) == fn(fn(fn(init, c), b), a), and an
    empty list returns `init` unchanged.

        >>> reduce_right(lambda acc, s: acc + s)('')(['a', 'b', 'c'])
        'cba'
    """
    def _with_init(init_val: Any) -> Callable[[List[Any]], Any]:
        def _reduce_right(arr: List[Any]) -> Any:
            acc = init_val
            for i in range(len(arr) - 1, -1, -1):
                acc = fn(acc, arr[i])
            return acc
        return _reduce_right
    return _with_init


def reverse(arr: List[Any]) -> List[Any]:
    """New list with the elements of `arr` in reverse order"""
    return list(reversed(arr))


def some(predicate: Callable[[Any], bool]) -> Callable[[List[Any]], bool]:
    """True when any element satisfies `predicate`; stops at the first hit"""
    def _some(arr: List[Any]) -> bool:
        for item in arr:
            if predicate(item):
                return True
        return False
    return _some
