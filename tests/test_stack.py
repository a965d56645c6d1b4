import pytest

from studybench.stack import Stack, is_valid


def test_push_pop_is_lifo():
    st = Stack()
    for ch in "abc":
        st.push(ch)
    assert len(st) == 3
    assert [st.pop(), st.pop(), st.pop()] == ["c", "b", "a"]
    assert st.is_empty()


def test_top_does_not_remove():
    st = Stack()
    st.push("x")
    assert st.top() == "x"
    assert len(st) == 1
    assert not st.is_empty()


def test_grows_beyond_initial_capacity():
    st = Stack()
    values = list(range(20))
    for v in values:
        st.push(v)
    assert len(st) == len(values)
    assert st.top() == values[-1]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_top_empty_raises():
    with pytest.raises(IndexError):
        Stack().top()


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[]}", "([{}])"])
def test_valid_brackets(s):
    assert is_valid(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "a", "(a)", "]["])
def test_invalid_brackets(s):
    assert is_valid(s) is False