"""
Left folds over iterables.
"""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import TypeVar

T = TypeVar("T")
A = TypeVar("A")


def fold_left(items: Iterable[T], initial: A, combine: Callable[[A, T], A]) -> A:
    """
    Reduce items left to right, starting from initial.

    >>> from operator import add, mul
    >>> fold_left([1, 2, 3, 4], 0, add)
    10
    >>> fold_left([1, 2, 3, 4], 1, mul)
    24
    >>> fold_left([], 0, add)        # Edge: empty input yields the zero element
    0
    >>> fold_left("abc", "", lambda acc, ch: ch + acc)
    'cba'
    """
    return reduce(combine, items, initial)
