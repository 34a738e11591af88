import logging
import os

from .exceptions import BufferUnderrunException


logger = logging.getLogger(__name__)


class ByteCursor(object):
    '''Wrapper around the whole content of a file and a position into it.

    The data is loaded completely at construction and never modified, the
    only mutable state is the position, that satisfies

        0 <= position <= len(data)

    Every read either returns the requested amount of data and advances,
    or raises BufferUnderrunException leaving the position untouched.
    '''
    def __init__(self, obj):
        '''Here we normalize the object in order to have always an immutable bytes'''
        self._position = 0

        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        init_method_name = 'init_%s' % obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise TypeError('\'%s\' cannot be used as source for a cursor' % obj.__class__.__name__)

        self._data = init_method(obj)

    def __repr__(self):
        return '<%s(position=%d, size=%d)>' % (self.__class__.__name__, self._position, len(self._data))

    def __len__(self):
        return len(self._data)

    def init_str(self, path):
        '''We think this is a path'''
        logger.debug('loading file \'%s\'' % path)
        with open(path, 'rb') as f:
            data = f.read()
        logger.debug('%d bytes read into buffer' % len(data))

        return data

    def init_bytes(self, data):
        return data

    def init_bytearray(self, data):
        return bytes(data)

    def init_memoryview(self, data):
        return data.tobytes()

    @property
    def data(self):
        return self._data

    @property
    def position(self):
        return self._position

    @property
    def size(self):
        return len(self._data)

    @property
    def remaining(self):
        return len(self._data) - self._position

    def tell(self):
        return self._position

    def at_end(self):
        return self._position >= len(self._data)

    def _check(self, n):
        if n > self.remaining:
            raise BufferUnderrunException(self._position, n, self.remaining)

    def read_u8(self):
        self._check(1)
        value = self._data[self._position]
        self._position += 1

        return value

    def read_le_u16(self):
        # check before reading so that a failure doesn't consume the low byte
        self._check(2)
        low = self.read_u8()
        high = self.read_u8()

        return low | (high << 8)

    def read_slice(self, n):
        if n < 0:
            raise ValueError('cannot read a negative amount of bytes (%d)' % n)

        self._check(n)
        value = self._data[self._position:self._position + n]
        self._position += n

        return value

    def peek_u8(self):
        '''Return the byte at the actual position without advancing'''
        self._check(1)

        return self._data[self._position]

    def skip(self, n=1):
        if n < 0:
            raise ValueError('cannot skip a negative amount of bytes (%d)' % n)

        self._check(n)
        self._position += n
