import pytest

from studybench.contacts.book import (
    ADDRESS_SIZE,
    NAME_SIZE,
    RECORD_SIZE,
    Contact,
    ContactBook,
)


def _sample():
    return [
        Contact("zhang", "male", 25, 1001, "north"),
        Contact("li", "female", 20, 1002, "south"),
        Contact("wang", "male", 22, 1003, "east"),
    ]


def test_record_size_matches_layout():
    assert RECORD_SIZE == 84
    assert len(Contact("a").pack()) == RECORD_SIZE


def test_pack_places_fields():
    data = Contact("ab", "m", 1, 2, "x").pack()
    assert data[:3] == b"ab\0"
    assert data[20:22] == b"m\0"
    assert data[26:28] == (1).to_bytes(2, "little")
    assert data[28:32] == (2).to_bytes(4, "little")
    assert data[32:34] == b"x\0"


def test_pack_unpack_round_trip():
    contact = Contact("张三", "男", 15, 12345, "home street")
    assert Contact.unpack(contact.pack()) == contact


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        Contact.unpack(b"\0" * (RECORD_SIZE - 1))


def test_name_too_long():
    with pytest.raises(ValueError):
        Contact("n" * NAME_SIZE).pack()
    assert Contact.unpack(Contact("n" * (NAME_SIZE - 1)).pack()).name == "n" * (NAME_SIZE - 1)


def test_address_too_long():
    with pytest.raises(ValueError):
        Contact("a", address="x" * ADDRESS_SIZE).pack()


def test_age_out_of_range():
    with pytest.raises(ValueError):
        Contact("a", age=70000).pack()


def test_add_and_iterate():
    book = ContactBook(_sample())
    assert len(book) == 3
    assert [c.name for c in book] == ["zhang", "li", "wang"]


def test_capacity_doubles():
    book = ContactBook()
    start = book.capacity
    for contact in _sample() * 2:
        book.add(contact)
    assert book.capacity == start * 2
    assert len(book) <= book.capacity


def test_erase_at_is_one_based():
    book = ContactBook(_sample())
    removed = book.erase_at(2)
    assert removed.name == "li"
    assert [c.name for c in book] == ["zhang", "wang"]


@pytest.mark.parametrize("num", [0, 4, -1])
def test_erase_at_invalid(num):
    book = ContactBook(_sample())
    with pytest.raises(IndexError):
        book.erase_at(num)
    assert len(book) == 3


def test_pop_back_and_front():
    book = ContactBook(_sample())
    assert book.pop_back().name == "wang"
    assert book.pop_front().name == "zhang"
    assert [c.name for c in book] == ["li"]


def test_pop_empty_raises():
    book = ContactBook()
    with pytest.raises(IndexError):
        book.pop_back()
    with pytest.raises(IndexError):
        book.pop_front()


def test_clear():
    book = ContactBook(_sample())
    book.clear()
    assert len(book) == 0
    assert list(book) == []


def test_find():
    book = ContactBook(_sample())
    found = book.find("wang")
    assert found is book[2]
    assert book.find("nobody") is None


def test_sort_by_name():
    book = ContactBook(_sample())
    book.sort_by("name")
    assert [c.name for c in book] == ["li", "wang", "zhang"]


def test_sort_by_age():
    book = ContactBook(_sample())
    book.sort_by("age")
    ages = [c.age for c in book]
    assert ages == sorted(ages)


def test_sort_by_sex_is_stable():
    book = ContactBook(_sample())
    book.sort_by("sex")
    assert [c.name for c in book] == ["li", "zhang", "wang"]


def test_sort_by_unknown_field():
    book = ContactBook(_sample())
    with pytest.raises(ValueError):
        book.sort_by("address")


def test_load_appends(tmp_path):
    path = tmp_path / "contacts.dat"
    ContactBook(_sample()[:1]).save(path)
    book = ContactBook(_sample()[1:])
    book.load(path)
    assert [c.name for c in book] == ["li", "wang", "zhang"]


def test_load_ignores_partial_record(tmp_path):
    path = tmp_path / "contacts.dat"
    path.write_bytes(Contact("a").pack() + b"\0" * 10)
    book = ContactBook()
    assert book.load(path) == 1
    assert book[0] == Contact("a")


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ContactBook().load(tmp_path / "missing.dat")