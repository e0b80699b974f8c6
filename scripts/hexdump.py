#!/usr/bin/env python3
'''
Dump the contents of a file as hex or as a source code literal.

 $ hexdump.py /bin/true | head -n 1
 00000000: 7F 45 4C 46 02 01 01 00  00 00 00 00 00 00 00 00     .ELF............
'''
import sys
import os
import logging

from bytekit.dump import (
    HexDumpConfiguration,
    hex_dump,
    source_dump,
)
from bytekit.streams import Stream


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} [-s|--simple] [-c|--source] <path>

 -s, --simple   only the hex bytes, without offset and printable characters
 -c, --source   dump as a source code literal''')
    sys.exit(1)


if __name__ == '__main__':
    args = sys.argv[1:]
    flags = [_ for _ in args if _.startswith('-')]
    paths = [_ for _ in args if not _.startswith('-')]

    if len(paths) != 1 or any(_ not in ('-s', '--simple', '-c', '--source') for _ in flags):
        usage(sys.argv[0])

    with Stream(paths[0]) as stream:
        data = stream.read_all()

    logger.debug('read %d bytes from \'%s\'' % (len(data), paths[0]))

    if '-c' in flags or '--source' in flags:
        print(source_dump(data))
    elif '-s' in flags or '--simple' in flags:
        print(hex_dump(data, HexDumpConfiguration.simple()))
    else:
        print(hex_dump(data))
