import pytest

from blynkcore.fifo import Fifo


def test_holds_one_less_than_capacity():
    f = Fifo(8)
    stored = f.put(b"0123456789")
    assert stored == f.capacity - 1
    assert len(f) == stored
    assert f.free() == 0
    assert not f.writeable()


def test_free_plus_size_is_constant():
    f = Fifo(16)
    for chunk in (b"abc", b"de", b"fghij"):
        f.put(chunk)
        assert f.free() + len(f) == f.capacity - 1
    f.get(4)
    assert f.free() + len(f) == f.capacity - 1


def test_fifo_order_across_wraparound():
    f = Fifo(8)
    f.put(b"abcde")
    assert f.get(3) == b"abc"
    f.put(b"vwxyz")
    assert f.get(100) == b"devwxyz"
    assert not f.readable()


def test_get_returns_only_available():
    f = Fifo(8)
    f.put(b"ab")
    assert f.get(5) == b"ab"
    assert f.get(5) == b""


def test_put_single_byte():
    f = Fifo(4)
    assert f.put(65) == 1
    assert f.peek() == 65
    assert len(f) == 1


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Fifo(4).peek()


def test_clear_empties():
    f = Fifo(4)
    f.put(b"ab")
    f.clear()
    assert len(f) == 0
    assert f.free() == f.capacity - 1


def test_capacity_one_holds_nothing():
    f = Fifo(1)
    assert f.put(b"a") == 0
    assert not f.writeable()


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Fifo(0)
    with pytest.raises(ValueError):
        Fifo(4).get(-1)