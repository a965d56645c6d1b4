"""A last-in, first-out stack and a bracket-matching check built on it."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["Stack", "is_valid"]

_PAIRS = {"(": ")", "[": "]", "{": "}"}


class Stack:
    """A last-in, first-out stack."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def is_valid(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closing one,
    so other characters make the string invalid.
    """
    stack = Stack()
    for ch in s:
        if ch in _PAIRS:
            stack.push(ch)
            continue
        if stack.is_empty() or _PAIRS[stack.top()] != ch:
            return False
        stack.pop()
    return stack.is_empty()