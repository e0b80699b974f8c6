"""
Nybbles are the two 4-bit halves of a byte.

A byte sequence can be "nybblified", i.e. expanded into a sequence with one
nybble per byte (twice as long) and "denybblified" back.
"""
from collections import namedtuple
from typing import Iterable, Optional

from .enum import NybbleOrder
from .sequences import as_bytes


Nybbles = namedtuple('Nybbles', ['high', 'low'])


def high_nybble(byte: int) -> int:
    return (byte & 0xf0) >> 4


def low_nybble(byte: int) -> int:
    return byte & 0x0f


def nybbles(byte: int) -> Nybbles:
    return Nybbles(high=high_nybble(byte), low=low_nybble(byte))


def from_nybbles(high: int, low: int) -> int:
    '''Values wider than four bits are not checked, the result is simply cut to a byte.'''
    return ((high << 4) | low) & 0xff


def nybblify(data: Iterable[int], order: NybbleOrder = NybbleOrder.HIGH_FIRST) -> bytes:
    result = bytearray()
    for byte in data:
        pair = nybbles(byte)
        if order == NybbleOrder.HIGH_FIRST:
            result += bytes([pair.high, pair.low])
        else:
            result += bytes([pair.low, pair.high])

    return bytes(result)


def denybblify(data: Iterable[int], order: NybbleOrder = NybbleOrder.HIGH_FIRST) -> Optional[bytes]:
    '''Returns None if the sequence has an odd length.'''
    data = as_bytes(data)
    if len(data) % 2 != 0:
        return None

    result = bytearray()
    for offset in range(0, len(data), 2):
        first, second = data[offset], data[offset + 1]
        if order == NybbleOrder.HIGH_FIRST:
            result.append(from_nybbles(first, second))
        else:
            result.append(from_nybbles(second, first))

    return bytes(result)
