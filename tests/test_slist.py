import pytest

from studybench.slist import Node, SList


def test_push_back_and_front():
    s = SList()
    s.push_back(1)
    s.push_back(2)
    s.push_front(0)
    assert list(s) == [0, 1, 2]
    assert len(s) == 3


def test_constructor_keeps_order():
    assert list(SList([3, 1, 2])) == [3, 1, 2]


def test_find_returns_node_or_none():
    s = SList([1, 2, 3])
    node = s.find(2)
    assert isinstance(node, Node) and node.value == 2
    assert node.next.value == 3
    assert s.find(42) is None


def test_insert_before_node():
    s = SList([1, 2, 3])
    s.insert(s.find(3), 9)
    assert list(s) == [1, 2, 9, 3]


def test_insert_before_head_updates_head():
    s = SList([1, 2])
    s.insert(s.head, 0)
    assert list(s) == [0, 1, 2]
    assert s.head.value == 0


def test_insert_none_appends_and_into_empty():
    s = SList()
    s.insert(None, 5)
    s.insert(None, 6)
    assert list(s) == [5, 6]


def test_insert_foreign_node_raises():
    s = SList([1, 2])
    with pytest.raises(ValueError):
        s.insert(Node(7), 3)
    assert list(s) == [1, 2]


def test_pop_back_and_front():
    s = SList([1, 2, 3])
    assert s.pop_back() == 3
    assert s.pop_front() == 1
    assert s.pop_back() == 2
    assert len(s) == 0
    assert s.head is None
    with pytest.raises(IndexError):
        s.pop_back()
    with pytest.raises(IndexError):
        s.pop_front()


def test_erase_middle_and_head():
    s = SList([1, 2, 3])
    assert s.erase(s.find(2)) == 2
    assert list(s) == [1, 3]
    assert s.erase(s.head) == 1
    assert list(s) == [3]


def test_erase_errors():
    with pytest.raises(IndexError):
        SList().erase(Node(1))
    s = SList([1])
    with pytest.raises(ValueError):
        s.erase(Node(1))


def test_insert_after_and_erase_after_round_trip():
    s = SList([1, 2, 3])
    pos = s.find(1)
    s.insert_after(pos, 8)
    assert list(s) == [1, 8, 2, 3]
    assert s.erase_after(pos) == 8
    assert list(s) == [1, 2, 3]


def test_erase_after_last_node_raises():
    s = SList([1, 2])
    with pytest.raises(ValueError):
        s.erase_after(s.find(2))


def test_length_matches_iteration():
    s = SList(range(10))
    s.pop_front()
    s.push_back(99)
    assert len(s) == len(list(s))