#!/usr/bin/env python3
'''
Decode some hex encoded bytes following a format string.

 $ unpack.py 'Hc b' '12 34 41 42'
 UINT16: 0x1234
 CHARACTER: 'A'
 BYTE: 0x42
'''
import sys
import os
import logging

from bytekit.core import unpack
from bytekit.enum import ValueKind
from bytekit.hextext import parse


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <format> <hex string>

The format uses the characters ?bchHiI, whitespace is ignored.''')
    sys.exit(1)


def format_value(value):
    if value.kind in (ValueKind.BOOLEAN, ValueKind.CHARACTER):
        return repr(value.value)

    return hex(value.value)


def fail(what, result):
    print(f'{what} failed: {result.error.name}', file=sys.stderr)
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    fmt = sys.argv[1]
    text = ' '.join(sys.argv[2:])

    data = parse(text)
    if not data:
        fail('parsing', data)

    values = unpack(data.value, fmt)
    if not values:
        fail('unpacking', values)

    for value in values.value:
        print(f'{value.kind.name}: {format_value(value)}')
