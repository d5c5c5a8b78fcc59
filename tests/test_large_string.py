import pytest

from vdrweb.large_string import LargeString


def test_append_mixed_values():
    ls = LargeString("test", 4)
    ls.append("abc").append(12).append(-5).append("x")
    assert str(ls) == "abc12-5x"
    assert len(ls) == len("abc12-5x")


def test_append_rejects_other_types():
    with pytest.raises(TypeError):
        LargeString("t", 10).append(1.5)


def test_buffer_grows_and_keeps_room_for_terminator():
    ls = LargeString("grow", 4)
    start = ls.capacity()
    for _ in range(50):
        ls.append("abcdefg")
        assert len(ls) < ls.capacity()
    assert ls.capacity() > start


def test_invalid_initial_size_falls_back_to_default():
    assert LargeString("zero", 0).capacity() == 100


def test_erase_truncates():
    ls = LargeString("e", 10).append("hello world")
    ls.erase(5)
    assert str(ls) == "hello"
    ls.erase(50)
    assert str(ls) == "hello"
    assert ls.max_size == len("hello world")


def test_clear_empties_but_keeps_capacity():
    ls = LargeString("c", 10).append("some text here")
    cap = ls.capacity()
    ls.clear()
    assert ls.empty() is True
    assert str(ls) == ""
    assert ls.capacity() == cap


def test_borrow_and_finish():
    ls = LargeString("b", 8).append("ab")
    available = ls.borrow_end(10)
    assert available >= 10
    ls.finish_borrow("hello")
    assert str(ls) == "abhello"


def test_finish_without_borrow_is_noop():
    ls = LargeString("b", 8).append("ab")
    ls.finish_borrow("ignored")
    assert str(ls) == "ab"


def test_finish_borrow_stops_at_nul():
    ls = LargeString("b", 8)
    ls.borrow_end(10)
    ls.finish_borrow("abc\0garbage")
    assert str(ls) == "abc"


def test_finish_borrow_too_long_raises_and_truncates():
    ls = LargeString("b", 8)
    available = ls.borrow_end(2)
    with pytest.raises(ValueError):
        ls.finish_borrow("x" * (available + 5))
    assert len(ls) == available
    assert len(ls) < ls.capacity()


def test_getitem():
    ls = LargeString("g", 4).append("xyz")
    assert ls[1] == "y"
    with pytest.raises(IndexError):
        ls[10]