import io
import logging

from .enum import ParseError
from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need a read() that refuses to go
    past the end of the data instead of returning less bytes.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)
        if init_method is None:
            raise ValueError('\'%s\' cannot be used as a stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        with open(self.obj, 'rb') as f:
            self.obj = io.BytesIO(f.read())

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_list(self):
        '''A list of integers'''
        self.obj = io.BytesIO(bytes(self.obj))

    def remaining(self) -> int:
        return len(self.obj.getbuffer()) - self.obj.tell()

    def read_exactly(self, n: int) -> bytes:
        '''Reads "n" bytes or raises UnpackException(OUT_OF_RANGE) leaving
        the cursor untouched.'''
        if n > self.remaining():
            logger.debug('requested %d bytes at offset %d but only %d remain' % (
                n, self.obj.tell(), self.remaining()))
            raise UnpackException(ParseError.OUT_OF_RANGE)

        return self.obj.read(n)

    def read_all(self) -> bytes:
        return self.obj.read()
