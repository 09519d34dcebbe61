"""Exercises on sequences of numbers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from itertools import combinations
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def second_largest(values: Iterable[int]) -> int | None:
    """The second largest distinct value, or None when there is no such value."""
    distinct = set(values)
    if not distinct:
        raise ValueError("cannot search an empty sequence")
    top = heapq.nlargest(2, distinct)
    return top[1] if len(top) == 2 else None


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list."""
    return list(heapq.merge(first, second))


def intersection(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Elements of ``first`` that also appear in ``second``, in the order of ``first``."""
    wanted = list(second)
    return [value for value in first if value in wanted]


def most_frequent(values: Iterable[H]) -> tuple[H, int]:
    """Return ``(element, count)`` for the commonest element; ties go to the earliest."""
    counts = Counter(values)
    if not counts:
        raise ValueError("cannot search an empty sequence")
    return counts.most_common(1)[0]


def pairs_with_sum(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """All index-ordered pairs of elements whose sum is ``target``."""
    return [(a, b) for a, b in combinations(values, 2) if a + b == target]


def element_frequencies(values: Iterable[H]) -> dict[H, int]:
    """Occurrences of each element, in order of first appearance."""
    return dict(Counter(values))