"""Array-backed sequential lists with explicit, doubling capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["SeqList", "Vector"]


class SeqList:
    """A growable array list.

    Storage starts empty, is given room for four values on the first
    insertion and doubles whenever it fills up.
    """

    _INITIAL_CAPACITY = 4

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data: list[Any] = []
        self._capacity = 0
        for value in items:
            self.push_back(value)

    @property
    def capacity(self) -> int:
        """Number of values the list can hold before it has to grow."""
        return self._capacity

    def _reserve(self) -> None:
        if len(self._data) >= self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else self._INITIAL_CAPACITY

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self.insert(len(self._data), value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the start."""
        self.insert(0, value)

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``pos``.

        ``pos`` may range from 0 to the current length inclusive; anything
        else raises IndexError.
        """
        if not 0 <= pos <= len(self._data):
            raise IndexError(f"cannot insert at position {pos}")
        self._reserve()
        self._data.insert(pos, value)

    def erase(self, pos: int) -> Any:
        """Remove and return the value at index ``pos``."""
        if not self._data:
            raise IndexError("erase from an empty list")
        if not 0 <= pos < len(self._data):
            raise IndexError(f"cannot erase at position {pos}")
        return self._data.pop(pos)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if not self._data:
            raise IndexError("pop from an empty list")
        return self.erase(len(self._data) - 1)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if not self._data:
            raise IndexError("pop from an empty list")
        return self.erase(0)

    def find(self, key: Any) -> int:
        """Return the index of the first value equal to ``key``, or -1."""
        for index, value in enumerate(self._data):
            if value == key:
                return index
        return -1

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"SeqList({self._data!r})"


class Vector:
    """A growable array of values created with a chosen starting capacity."""

    def __init__(self, capacity: int = 4, items: Iterable[Any] = ()) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._data: list[Any] = []
        for value in items:
            self.push_back(value)

    @property
    def capacity(self) -> int:
        """Number of values the vector can hold before it has to grow."""
        return self._capacity

    def _reserve(self) -> None:
        if self._capacity <= len(self._data):
            self._capacity *= 2

    def push_back(self, num: Any) -> None:
        """Append ``num`` at the end."""
        self._reserve()
        self._data.append(num)

    def insert(self, num: Any, pos: int) -> None:
        """Insert ``num`` before the value now at index ``pos``.

        Only positions of existing values are accepted; any other position
        leaves the vector unchanged.
        """
        if not 0 <= pos < len(self._data):
            return
        self._reserve()
        self._data.insert(pos, num)

    def find(self, num: Any) -> int:
        """Return the index of the first value equal to ``num``, or -1."""
        for index, value in enumerate(self._data):
            if value == num:
                return index
        return -1

    def delete_at(self, pos: int) -> Any:
        """Remove and return the value at index ``pos``."""
        if not 0 <= pos < len(self._data):
            raise IndexError(f"cannot delete at position {pos}")
        return self._data.pop(pos)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if not self._data:
            raise IndexError("pop from an empty vector")
        return self.delete_at(len(self._data) - 1)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r}, capacity={self._capacity})"