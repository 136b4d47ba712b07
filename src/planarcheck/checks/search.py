from __future__ import annotations
from itertools import combinations
from typing import Callable, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def first_combination(
    items: Sequence[T],
    k: int,
    predicate: Callable[[Tuple[T, ...]], bool],
) -> Optional[Tuple[T, ...]]:
    """
    Return the first k-subset of `items` (lexicographic in the order of
    `items`) for which `predicate` holds, or None.
    Complexity: O(C(len(items), k)) predicate calls.
    """
    if k > len(items):
        return None
    for combo in combinations(items, k):
        if predicate(combo):
            return combo
    return None


def first_result(
    items: Sequence[T],
    k: int,
    probe: Callable[[Tuple[T, ...]], Optional[R]],
) -> Optional[R]:
    """Like `first_combination`, but returns the first non-None `probe` result."""
    if k > len(items):
        return None
    for combo in combinations(items, k):
        out = probe(combo)
        if out is not None:
            return out
    return None
