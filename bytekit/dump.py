"""
Human readable renderings of a byte sequence: the classic hex dump

    00000000: 01 12 23 34 45 56 67 78  89 9A AB BC CD DE EF        ..#4EVgx.......

and a source code literal that can be pasted in a Python module.
"""
import logging
from typing import Iterable

from .enum import DumpOption
from .hextext import to_hex
from .sequences import as_bytes, chunked


logger = logging.getLogger(__name__)

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7e


def is_printable(byte: int) -> bool:
    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


class HexDumpConfiguration(object):

    def __init__(self, bytes_per_line=16, uppercase=True, options=DumpOption.NONE):
        assert bytes_per_line > 0, 'bytes_per_line must be positive'
        self.bytes_per_line = bytes_per_line
        self.uppercase = uppercase
        self.options = options

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.bytes_per_line}, uppercase={self.uppercase}, {self.options})>'

    @classmethod
    def standard(cls):
        return cls(options=DumpOption.OFFSET | DumpOption.PRINTABLE_CHARACTERS | DumpOption.MID_LINE_GAP)

    @classmethod
    def simple(cls):
        return cls()


class SourceDumpConfiguration(object):

    def __init__(self, bytes_per_line=16, uppercase=False, indent=4, variable_name='data', type_name='list[int]'):
        assert bytes_per_line > 0, 'bytes_per_line must be positive'
        self.bytes_per_line = bytes_per_line
        self.uppercase = uppercase
        self.indent = indent
        self.variable_name = variable_name
        self.type_name = type_name

    @classmethod
    def standard(cls):
        return cls()


def _dump_line(offset, chunk, configuration):
    options = configuration.options
    mid_chunk_index = configuration.bytes_per_line // 2

    line = ''
    if options & DumpOption.OFFSET:
        line += to_hex(offset, uppercase=configuration.uppercase, digits=8) + ': '

    for index, byte in enumerate(chunk):
        line += to_hex(byte, uppercase=configuration.uppercase) + ' '
        if index + 1 == mid_chunk_index and options & DumpOption.MID_LINE_GAP:
            line += ' '

    if options & DumpOption.PRINTABLE_CHARACTERS:
        missing = configuration.bytes_per_line - len(chunk)
        # keep the printable column aligned with the one of a full line
        if options & DumpOption.MID_LINE_GAP and len(chunk) < mid_chunk_index:
            line += ' '
        line += '   ' * missing
        line += '    '
        line += ''.join(chr(_) if is_printable(_) else '.' for _ in chunk)

    return line.strip()


def hex_dump(data: Iterable[int], configuration: HexDumpConfiguration = None) -> str:
    '''Returns a string containing a hex dump of the data, one line for each
    "bytes_per_line" bytes. Which columns are present is decided by the options
    of the configuration.'''
    configuration = configuration or HexDumpConfiguration.standard()
    data = as_bytes(data)

    lines = []
    for index, chunk in enumerate(chunked(data, configuration.bytes_per_line)):
        lines.append(_dump_line(index * configuration.bytes_per_line, chunk, configuration))

    logger.debug('dumped %d bytes in %d lines' % (len(data), len(lines)))

    return '\n'.join(lines)


def source_dump(data: Iterable[int], configuration: SourceDumpConfiguration = None) -> str:
    '''Returns the data as the declaration of a list of integers.'''
    configuration = configuration or SourceDumpConfiguration.standard()
    data = as_bytes(data)

    lines = ['%s: %s = [' % (configuration.variable_name, configuration.type_name)]

    for chunk in chunked(data, configuration.bytes_per_line):
        line = ' ' * configuration.indent
        line += ''.join('0x%s, ' % to_hex(_, uppercase=configuration.uppercase) for _ in chunk)
        lines.append(line)

    lines.append(']')

    return '\n'.join(lines)
