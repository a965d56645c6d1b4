"""An address book of contacts that can be kept in a binary file.

Each contact is stored as a fixed-size record. It has NUL-padded text
fields for name, sex and address, a 16-bit age and a 32-bit number, laid
out in little-endian order with the alignment a C compiler would give the
same record.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from typing import Union

from studybench.bubble_sort import bubble_sort

__all__ = ["NAME_SIZE", "SEX_SIZE", "ADDRESS_SIZE", "RECORD_SIZE", "Contact", "ContactBook"]

NAME_SIZE = 20
SEX_SIZE = 6
ADDRESS_SIZE = 50

_RECORD = struct.Struct(f"<{NAME_SIZE}s{SEX_SIZE}shi{ADDRESS_SIZE}s2x")
RECORD_SIZE = _RECORD.size

_ENCODING = "utf-8"
_INITIAL_CAPACITY = 4
_SORT_FIELDS = ("name", "sex", "age")

PathType = Union[str, "PathLike[str]"]


def _encode(text: str, size: int, field: str) -> bytes:
    raw = text.encode(_ENCODING)
    if b"\0" in raw:
        raise ValueError(f"{field} must not contain a NUL character")
    if len(raw) >= size:
        raise ValueError(f"{field} takes {len(raw)} bytes; at most {size - 1} fit")
    return raw


def _decode(raw: bytes) -> str:
    return raw.partition(b"\0")[0].decode(_ENCODING)


@dataclass
class Contact:
    """One entry of the address book."""

    name: str
    sex: str = ""
    age: int = 0
    number: int = 0
    address: str = ""

    def pack(self) -> bytes:
        """Encode the contact as one fixed-size binary record."""
        name = _encode(self.name, NAME_SIZE, "name")
        sex = _encode(self.sex, SEX_SIZE, "sex")
        address = _encode(self.address, ADDRESS_SIZE, "address")
        try:
            return _RECORD.pack(name, sex, self.age, self.number, address)
        except struct.error as exc:
            raise ValueError(f"cannot store contact: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "Contact":
        """Decode a contact from one binary record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        name, sex, age, number, address = _RECORD.unpack(data)
        return cls(_decode(name), _decode(sex), age, number, _decode(address))


class ContactBook:
    """A growable list of contacts.

    Room is kept for four contacts at first and doubled whenever it fills.
    Positions given to :meth:`erase_at` count from 1.
    """

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts: list[Contact] = []
        self._capacity = _INITIAL_CAPACITY
        for contact in contacts:
            self.add(contact)

    @property
    def capacity(self) -> int:
        """Number of contacts the book holds before it has to grow."""
        return self._capacity

    def _reserve(self) -> None:
        if len(self._contacts) == self._capacity:
            self._capacity *= 2

    def add(self, contact: Contact) -> None:
        """Append ``contact`` at the end of the book."""
        self._reserve()
        self._contacts.append(contact)

    def erase_at(self, num: int) -> Contact:
        """Remove and return the contact at 1-based position ``num``."""
        if not 1 <= num <= len(self._contacts):
            raise IndexError(f"position {num} cannot be deleted")
        return self._contacts.pop(num - 1)

    def pop_back(self) -> Contact:
        """Remove and return the last contact."""
        if not self._contacts:
            raise IndexError("the address book is empty")
        return self._contacts.pop()

    def pop_front(self) -> Contact:
        """Remove and return the first contact."""
        return self.erase_at(1)

    def clear(self) -> None:
        """Remove every contact."""
        self._contacts.clear()

    def find(self, name: str) -> Contact | None:
        """Return the first contact called ``name``, or None."""
        return next((c for c in self._contacts if c.name == name), None)

    def sort_by(self, field: str) -> None:
        """Sort the book in place by ``name``, ``sex`` or ``age``, keeping ties in order."""
        if field not in _SORT_FIELDS:
            raise ValueError(f"cannot sort by {field!r}; choose one of {', '.join(_SORT_FIELDS)}")

        def compare(a: Contact, b: Contact) -> int:
            x, y = getattr(a, field), getattr(b, field)
            return (x > y) - (x < y)

        self._contacts = bubble_sort(self._contacts, compare)

    def save(self, path: PathType) -> None:
        """Write every contact to ``path`` as consecutive binary records."""
        records = b"".join(contact.pack() for contact in self._contacts)
        with open(path, "wb") as stream:
            stream.write(records)

    def load(self, path: PathType) -> int:
        """Append the contacts stored in ``path``; return how many were read.

        A trailing piece shorter than one record is ignored.
        """
        with open(path, "rb") as stream:
            data = stream.read()
        count = len(data) // RECORD_SIZE
        for index in range(count):
            start = index * RECORD_SIZE
            self.add(Contact.unpack(data[start : start + RECORD_SIZE]))
        return count

    def __getitem__(self, index: int) -> Contact:
        return self._contacts[index]

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __repr__(self) -> str:
        return f"ContactBook({self._contacts!r})"