"""
A Field is the decoder associated to a single format character: it knows
how many bytes it needs and how to turn them into a tagged value.

All the multi-byte values are big-endian.
"""
import logging
import struct
from collections import namedtuple
from typing import Dict

from .enum import ValueKind


UnpackedValue = namedtuple('UnpackedValue', ['kind', 'value'])


class Field(object):
    """Base class to subclass from"""

    def __init__(self, format, kind: ValueKind):
        self.logger = logging.getLogger(__name__)
        self.format = format
        self.kind = kind

    def __repr__(self):
        return '<%s(%s, %s)>' % (self.__class__.__name__, self.format, self.kind.name)

    def _get_size(self) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _unpack(self, raw: bytes):
        raise NotImplementedError(f"method {self.__class__.__name__}._unpack() not implemented")

    def unpack(self, stream) -> UnpackedValue:
        raw = stream.read_exactly(self.size)
        value = self._unpack(raw)
        self.logger.debug('unpacked %s from %s' % (value, raw.hex()))

        return UnpackedValue(self.kind, value)


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes, always in network order.
    """

    def get_format(self):
        return '>%s' % self.format

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _unpack(self, raw: bytes):
        return struct.unpack(self.get_format(), raw)[0]


class CharacterField(StructField):
    """A single byte interpreted as a code point."""

    def __init__(self):
        super().__init__('c', ValueKind.CHARACTER)

    def _unpack(self, raw: bytes):
        return super()._unpack(raw).decode('latin1')


# the struct module calls "b" the signed char, here it's the raw byte
FIELDS: Dict[str, Field] = {
    '?': StructField('?', ValueKind.BOOLEAN),
    'b': StructField('B', ValueKind.BYTE),
    'c': CharacterField(),
    'h': StructField('h', ValueKind.INT16),
    'H': StructField('H', ValueKind.UINT16),
    'i': StructField('i', ValueKind.INT32),
    'I': StructField('I', ValueKind.UINT32),
}
