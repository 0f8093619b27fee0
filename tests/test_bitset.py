import pytest

from cloverleaf.bitset import BitSet


def test_setting():
    bitset = BitSet(12)
    for i in (1, 3, 5, 7, 9):
        bitset.set_bit(i)

    assert bitset.is_set(1) is True
    assert bitset.is_set(3) is True
    assert bitset.is_set(5) is True
    assert bitset.is_set(7) is True

    assert bitset.is_set(2) is False
    assert bitset.is_set(4) is False
    assert bitset.is_set(6) is False
    assert bitset.is_set(8) is False

    for i in range(10):
        assert bitset.is_set(i) == (i % 2 == 1)


def test_size_of():
    assert BitSet(1201).num_words() == 38


def test_word_boundaries():
    bitset = BitSet(100)
    bitset.set_bit(31)
    bitset.set_bit(32)
    assert bitset.is_set(31)
    assert bitset.is_set(32)
    assert not bitset.is_set(30)
    assert not bitset.is_set(33)


def test_contains():
    bitset = BitSet(10)
    bitset.set_bit(4)
    assert 4 in bitset
    assert 5 not in bitset


def test_out_of_range_raises():
    bitset = BitSet(12)
    with pytest.raises(IndexError):
        bitset.is_set(64)
    with pytest.raises(IndexError):
        bitset.set_bit(-1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        BitSet(-1)