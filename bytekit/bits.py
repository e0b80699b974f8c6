"""
Access to the single bits of a byte.

Positions go from 0 (least significant) to 7 (most significant); asking for
a position outside of this range is a bug of the caller and is checked with
assertions, it is never reported as a recoverable error.
"""
import logging
from typing import Iterable, List

from bitstring import Bits

from .nybbles import Nybbles, nybbles, from_nybbles


logger = logging.getLogger(__name__)

BYTE_WIDTH = 8
BYTE_MASK  = 0xff


def _check_position(position):
    assert 0 <= position < BYTE_WIDTH, 'bit position must be between 0 and 7'


def is_bit_set(byte: int, position: int) -> bool:
    _check_position(position)
    return (byte & (1 << position)) != 0


def set_bit(byte: int, position: int) -> int:
    _check_position(position)
    return (byte | (1 << position)) & BYTE_MASK


def clear_bit(byte: int, position: int) -> int:
    _check_position(position)
    return byte & ~(1 << position) & BYTE_MASK


def extract_bits(byte: int, start: int, length: int) -> int:
    '''Returns the value of the "length" bits starting at "start", right aligned.

    A field running past bit 7 is clamped to bit 7.'''
    _check_position(start)
    assert length >= 0, 'length must not be negative'

    end = min(start + length, BYTE_WIDTH)
    if end == start:
        return 0

    # Bits() indexes from the most significant bit
    bits = Bits(uint=byte & BYTE_MASK, length=BYTE_WIDTH)
    return bits[BYTE_WIDTH - end:BYTE_WIDTH - start].uint


def replace_bits(byte: int, first: int, last: int, value: int) -> int:
    '''Writes "value" into the bits first..last (inclusive).

    Only the minimal binary representation of "value" is written, starting
    at "first": the bits of the range beyond it keep their value. If "value"
    needs more bits than the range has, the excess is dropped.'''
    _check_position(first)
    _check_position(last)
    assert first <= last, 'the range must not be empty'
    assert value >= 0, 'value must not be negative'

    width = min(max(1, value.bit_length()), last - first + 1)
    mask = ((1 << width) - 1) << first

    if width < value.bit_length():
        logger.debug('value 0x%x truncated to %d bits' % (value, width))

    return ((byte & ~mask) | ((value << first) & mask)) & BYTE_MASK


def to_bit_array(byte: int) -> List[bool]:
    '''Always eight bits, index 0 is the least significant one.'''
    bits = Bits(uint=byte & BYTE_MASK, length=BYTE_WIDTH)
    return [bits[BYTE_WIDTH - 1 - _] for _ in range(BYTE_WIDTH)]


def to_byte(bits: Iterable) -> int:
    '''The inverse of to_bit_array(): only the first eight bits are used,
    a shorter sequence is padded with zeros on the high end.'''
    value = 0
    for position, bit in enumerate(list(bits)[:BYTE_WIDTH]):
        if bit:
            value = set_bit(value, position)

    return value


class Byte(object):
    """Mutable byte, for the callers that want to modify bits in place.

        >>> b = Byte(0b0101_0110)
        >>> b.replace_bits(2, 5, 0b1010)
        >>> bin(b)
        '0b1101010'
    """

    def __init__(self, value=0):
        assert 0 <= value <= BYTE_MASK, 'a byte is between 0x00 and 0xff'
        self.value = value

    @classmethod
    def from_bits(cls, bits: Iterable) -> "Byte":
        return cls(to_byte(bits))

    @classmethod
    def from_nybbles(cls, pair: Nybbles) -> "Byte":
        return cls(from_nybbles(pair.high, pair.low))

    def __repr__(self):
        return f'<{self.__class__.__name__}(0x{self.value:02x})>'

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, Byte):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other

        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def is_bit_set(self, position):
        return is_bit_set(self.value, position)

    def set_bit(self, position):
        self.value = set_bit(self.value, position)

    def clear_bit(self, position):
        self.value = clear_bit(self.value, position)

    def extract_bits(self, start, length):
        return extract_bits(self.value, start, length)

    def replace_bits(self, first, last, value):
        self.value = replace_bits(self.value, first, last, value)

    def to_bit_array(self):
        return to_bit_array(self.value)

    @property
    def nybbles(self) -> Nybbles:
        return nybbles(self.value)
