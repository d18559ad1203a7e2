"""Small helpers for random numbers, ordering, grids and list filtering."""

from __future__ import annotations

import functools
import itertools
import math
import random
from collections.abc import Callable, Iterable, Mapping, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")
R = TypeVar("R")


def bounded_rand(upper: float = 1.0, lower: float = 0.0,
                 rng: random.Random | None = None) -> float:
    """Return a uniform random number between the two bounds, in either order."""
    source = rng if rng is not None else random
    low, high = min(lower, upper), max(lower, upper)
    return source.random() * (high - low) + low


def sort_with_reference(elements: MutableSequence[T], reference: R,
                        less_than: Callable[[T, T, R], bool]) -> None:
    """Sort ``elements`` in place by ``less_than(a, b, reference)``."""

    def compare(a: T, b: T) -> int:
        if less_than(a, b, reference):
            return -1
        if less_than(b, a, reference):
            return 1
        return 0

    elements[:] = sorted(elements, key=functools.cmp_to_key(compare))


def vector_less_than(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    """Order by length first, then element by element."""
    if len(lhs) != len(rhs):
        return len(lhs) < len(rhs)
    for a, b in zip(lhs, rhs):
        if a < b:
            return True
        if a > b:
            return False
    return False


def vector_greater_than(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    """Reverse of :func:`vector_less_than`."""
    if len(lhs) != len(rhs):
        return len(lhs) > len(rhs)
    for a, b in zip(lhs, rhs):
        if a > b:
            return True
        if a < b:
            return False
    return False


def max_value_key(mapping: Mapping[K, Any]) -> K:
    """Return the key with the largest value; the first one wins a tie."""
    if not mapping:
        raise ValueError("mapping is empty")
    return max(mapping, key=mapping.__getitem__)


def discretized(low: float, high: float, step: float) -> list[float]:
    """Return ``low, low + step, ...`` up to and including ``high``."""
    if low == high:
        return [low]
    if low < high and step <= 0:
        raise ValueError("step must be positive")
    values = []
    value = low
    while value <= high:
        values.append(value)
        value += step
    return values


def all_pairs(v1: Iterable[T], v2: Iterable[R]) -> list[tuple[T, R]]:
    """Return every pair drawn from ``v1`` and ``v2``, ``v1`` varying slowest."""
    return list(itertools.product(v1, v2))


def is_integer(value: float) -> bool:
    """Return whether ``value`` has no fractional part."""
    value = float(value)
    return math.isfinite(value) and value.is_integer()


def remove_erase_if(items: MutableSequence[T], predicate: Callable[[T], bool]) -> None:
    """Remove in place every item for which ``predicate`` holds."""
    items[:] = [item for item in items if not predicate(item)]