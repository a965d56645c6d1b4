"""Bubble sort driven by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["bubble_sort"]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def bubble_sort(
    items: Iterable[T], compare: Callable[[T, T], int] | None = None
) -> list[T]:
    """Return the items sorted so that ``compare`` never reports a pair out of order.

    ``compare(a, b)`` returns a positive number when ``a`` belongs after ``b``.
    Neighbours are swapped only on a positive result, so the sort is stable.
    Without ``compare`` the items' natural ordering is used.
    """
    cmp = compare or _natural
    result = list(items)
    for done in range(len(result)):
        swapped = False
        for j in range(len(result) - 1 - done):
            if cmp(result[j], result[j + 1]) > 0:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result