"""Interactive menu for keeping an address book in a binary file."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any

from studybench.contacts.book import Contact, ContactBook

__all__ = ["format_table", "main"]

_DEFAULT_FILE = "contacts.dat"
_COLUMNS = ("ID", "name", "sex", "age", "number", "address")

_MAIN_MENU = """************************************
****    1.add       2.del       ****
****    3.revise    4.find      ****
****    5.Alldel    6.show      ****
****    7.sort      8.save      ****
****         0.Exit             ****
************************************"""

_DEL_MENU = """******************************************
***    1.SelectDel    2.TailDel       ****
***    3.HeadDel      0.Return        ****
******************************************"""

_REVISE_MENU = """******************************************
****    1.ReviseName    2.ReviseSex    ***
***     3.ReviseAge     4.ReviseNumber ***
***     5.ReviseAddress 6.ReviseAll    ***
***              0.Return              ***
******************************************"""

_SORT_MENU = """*************************************
***    1.NameSort    2.AgeSort    ***
***    3.SexSort     0.Return     ***
*************************************"""

_REVISE_FIELDS = {
    1: ("name",),
    2: ("sex",),
    3: ("age",),
    4: ("number",),
    5: ("address",),
    6: ("name", "sex", "age", "number", "address"),
}
_INT_FIELDS = {"age", "number"}
_SORT_CHOICES = {1: "name", 2: "age", 3: "sex"}


def _row(cells: tuple[Any, ...]) -> str:
    return "\t".join(f"{cell!s:<15}" for cell in cells)


def format_table(book: ContactBook) -> str:
    """Lay out the book as a tab-separated table with a header line."""
    lines = [_row(_COLUMNS) + "\t"]
    for index, contact in enumerate(book, start=1):
        lines.append(
            _row(
                (
                    index,
                    contact.name,
                    contact.sex,
                    contact.age,
                    contact.number,
                    contact.address,
                )
            )
        )
    return "\n".join(lines) + "\n"


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_choice(menu: str) -> int:
    print(menu)
    try:
        return int(_ask("select:"))
    except ValueError:
        return -1


def _ask_field(field: str) -> Any:
    value = _ask(f"{field}:")
    return int(value) if field in _INT_FIELDS else value


def _read_contact() -> Contact:
    values = {field: _ask_field(field) for field in _COLUMNS[1:]}
    contact = Contact(**values)
    contact.pack()
    return contact


def _add(book: ContactBook) -> None:
    try:
        contact = _read_contact()
    except ValueError as exc:
        print(f"cannot add contact: {exc}")
        return
    book.add(contact)
    print("successfully added")


def _delete(book: ContactBook) -> None:
    while True:
        choice = _ask_choice(_DEL_MENU)
        if choice == 0:
            return
        try:
            if choice == 1:
                book.erase_at(int(_ask("Enter Delete Location:")))
            elif choice == 2:
                book.pop_back()
            elif choice == 3:
                book.pop_front()
            else:
                print("select error")
                continue
        except (IndexError, ValueError):
            print("This location cannot be deleted")
            continue
        print("successfully delete")


def _revise(book: ContactBook) -> None:
    contact = book.find(_ask("inputName:"))
    if contact is None:
        print("No information on that person.")
        return
    while True:
        choice = _ask_choice(_REVISE_MENU)
        if choice == 0:
            return
        fields = _REVISE_FIELDS.get(choice)
        if fields is None:
            print("select error")
            continue
        try:
            changes = {field: _ask_field(field) for field in fields}
            replace(contact, **changes).pack()
        except ValueError as exc:
            print(f"cannot modify contact: {exc}")
            continue
        for field, value in changes.items():
            setattr(contact, field, value)
        print("Modified successfully")


def _find(book: ContactBook) -> None:
    contact = book.find(_ask("inputName:"))
    if contact is None:
        print("No information on that person.")
        return
    print(format_table(ContactBook([contact])), end="")


def _sort(book: ContactBook) -> None:
    while True:
        choice = _ask_choice(_SORT_MENU)
        if choice == 0:
            return
        field = _SORT_CHOICES.get(choice)
        if field is None:
            print("select error")
            continue
        book.sort_by(field)
        print("sequence")


def _load(book: ContactBook, path: str) -> None:
    try:
        book.load(path)
    except OSError as exc:
        print(f" LoadContacts:{exc.strerror or exc}")
        return
    except ValueError as exc:
        print(f"fail to load: {exc}")
        return
    print("Load the success")


def _save(book: ContactBook, path: str) -> None:
    try:
        book.save(path)
    except OSError as exc:
        print(f"fail in keeping:{exc.strerror or exc}")
        return
    except ValueError as exc:
        print(f"fail in keeping:{exc}")
        return
    print("save successfully!")


def main(argv: list[str] | None = None) -> int:
    """Run the address book menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(description="Keep an address book.")
    parser.add_argument("--file", default=_DEFAULT_FILE, help="where contacts are stored")
    args = parser.parse_args(argv)

    book = ContactBook()
    _load(book, args.file)
    try:
        while True:
            choice = _ask_choice(_MAIN_MENU)
            if choice == 0:
                return 0
            if choice == 1:
                _add(book)
            elif choice == 2:
                _delete(book)
            elif choice == 3:
                _revise(book)
            elif choice == 4:
                _find(book)
            elif choice == 5:
                book.clear()
            elif choice == 6:
                print(format_table(book), end="")
            elif choice == 7:
                _sort(book)
            elif choice == 8:
                _save(book, args.file)
            else:
                print("select error")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())