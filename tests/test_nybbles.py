import pytest
from hypothesis import given, strategies as st

from bytekit.enum import NybbleOrder
from bytekit.nybbles import (
    denybblify,
    from_nybbles,
    high_nybble,
    low_nybble,
    nybblify,
    nybbles,
)


orders = st.sampled_from(NybbleOrder)


def test_nybbles():
    assert high_nybble(0xa4) == 0x0a
    assert low_nybble(0xa4) == 0x04

    pair = nybbles(0xa4)

    assert pair.high == 0x0a
    assert pair.low == 0x04


def test_from_nybbles():
    assert from_nybbles(0x0a, 0x04) == 0xa4


def test_from_nybbles_not_validated():
    """values wider than a nybble are silently cut to a byte"""
    assert from_nybbles(0x1a, 0x04) == 0xa4


@given(byte=st.integers(min_value=0x00, max_value=0xff))
def test_nybbles_roundtrip(byte):
    assert from_nybbles(*nybbles(byte)) == byte


def test_nybblify_high_first():
    assert nybblify([0xa4, 0xb5, 0xc6]) == bytes([0x0a, 0x04, 0x0b, 0x05, 0x0c, 0x06])


def test_nybblify_low_first():
    result = nybblify(bytes([0xa4, 0xb5, 0xc6]), order=NybbleOrder.LOW_FIRST)

    assert result == bytes([0x04, 0x0a, 0x05, 0x0b, 0x06, 0x0c])


def test_denybblify_high_first():
    assert denybblify([0x0a, 0x04, 0x0b, 0x05, 0x0c, 0x06]) == bytes([0xa4, 0xb5, 0xc6])


def test_denybblify_low_first():
    result = denybblify([0x0a, 0x04, 0x0b, 0x05, 0x0c, 0x06], order=NybbleOrder.LOW_FIRST)

    assert result == bytes([0x4a, 0x5b, 0x6c])


def test_denybblify_empty():
    assert denybblify(b'') == b''


@given(data=st.binary(), order=orders)
def test_nybblify_roundtrip(data, order):
    expanded = nybblify(data, order)

    assert len(expanded) == 2 * len(data)
    assert all(_ <= 0x0f for _ in expanded)
    assert denybblify(expanded, order) == data


@given(data=st.binary().filter(lambda _: len(_) % 2 == 1), order=orders)
def test_denybblify_odd_length(data, order):
    assert denybblify(data, order) is None


def test_denybblify_integer():
    with pytest.raises(AssertionError):
        denybblify(4)
