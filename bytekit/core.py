"""
Core module: unpacking of a byte sequence following a format string.

The format string is a sequence of format characters, each one with a fixed
width and a kind of value

    ?  boolean     1 byte
    b  byte        1 byte
    c  character   1 byte
    h  int16       2 bytes
    H  uint16      2 bytes
    i  int32       4 bytes
    I  uint32      4 bytes

whitespace is ignored and can be used to group the fields visually.

    >>> unpack(b'\\x12\\x34\\x41', 'H c').value
    [UnpackedValue(kind=<ValueKind.UINT16: 5>, value=4660), UnpackedValue(kind=<ValueKind.CHARACTER: 3>, value='A')]
"""
import logging
from typing import Iterable, List, Tuple

from .enum import ParseError
from .exceptions import FormatException, UnpackException
from .fields import FIELDS, Field, UnpackedValue
from .result import Result
from .sequences import as_bytes
from .streams import Stream


logger = logging.getLogger(__name__)


class Format(object):
    """
    A compiled format string: the list of fields with the position of the
    format character that generated each of them.

    The compilation happens entirely in the constructor so that an invalid
    format is refused before any byte is read.
    """

    def __init__(self, format: str):
        self.format = format
        self.logger = logging.getLogger(__name__)
        self.fields = self._compile(format)

    def _compile(self, format: str) -> List[Tuple[int, Field]]:
        if len(format) == 0:
            raise FormatException(ParseError.INVALID_FORMAT)

        fields = []
        for position, character in enumerate(format):
            if character.isspace():
                continue

            if character not in FIELDS:
                self.logger.warning('unknown format character %r at position %d' % (character, position))
                raise FormatException(ParseError.INVALID_FORMAT, chain=[position])

            fields.append((position, FIELDS[character]))

        return fields

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.format)

    def __len__(self):
        return len(self.fields)

    @property
    def size(self) -> int:
        '''Number of bytes consumed by this format'''
        return sum(field.size for _, field in self.fields)

    def unpack(self, stream: Stream) -> List[UnpackedValue]:
        values = []
        for position, field in self.fields:
            self.logger.debug('unpacking %r at offset %d' % (field, stream.tell()))
            try:
                values.append(field.unpack(stream))
            except UnpackException as e:
                e.chain.append(position)
                raise

        return values


def unpack(data: Iterable[int], format: str) -> Result:
    '''Decodes "data" following "format".

    It returns a Result containing the list of UnpackedValue in format order,
    or failing with INVALID_FORMAT for an empty format or an unknown character,
    and with OUT_OF_RANGE when the data is too short. A failure never carries
    the values decoded so far.'''
    try:
        compiled = Format(format)
        with Stream(as_bytes(data)) as stream:
            values = compiled.unpack(stream)
    except (FormatException, UnpackException) as e:
        logger.debug('unpacking with format %r failed: %s (chain=%s)' % (format, e.error, e.chain))
        return Result.failure(e.error)

    return Result.success(values)
