"""
A Field is "fundamental" datatype from the format point of view: it knows how
to read its own value from a ByteCursor and how to encode it back to bytes.

Fields are declared as class attributes of a Chunk; they are shared by all the
instances of the Chunk so they must never hold per-record state.
"""
import logging
import struct
from typing import Tuple

import bitstring

from .meta import FieldBase, Endianess
from .exceptions import UnpackException, MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, default=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False, on_mismatch=MagicException):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = None
        self.default = default
        self.endianess = endianess
        self.is_magic = is_magic
        self.on_mismatch = on_mismatch

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def value_from_default(self):
        return self.default

    def validate(self, value):
        '''Check a magic value is the expected one, it must be called after the
        bytes are consumed so the cursor is left after the offending data.'''
        if self.is_magic and value != self.default:
            self.logger.warning(f'the magic for field \'{self.name}\' doesn\'t correspond: {value!r} != {self.default!r}')
            raise self.on_mismatch('expected %r for \'%s\' but found %r' % (self.default, self.name, value))

        return value

    def unpack(self, cursor):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself.
    """

    def __init__(self, format, default=0, equals_to=None, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default if equals_to is None else equals_to, **kw)

    def value_from_default(self):
        if not self.enum:
            return super().value_from_default()

        return self.enum(self.default)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def _read(self, cursor):
        # single bytes and little endian words have their own primitive
        if self.format == 'B':
            return cursor.read_u8()
        if self.format == 'H' and self.endianess == Endianess.LITTLE_ENDIAN:
            return cursor.read_le_u16()

        return struct.unpack(self.get_format(), cursor.read_slice(self.size))[0]

    def unpack(self, cursor):
        value = self._read(cursor)

        if self.enum:
            try:
                value = self.enum(value)
            except ValueError:
                raise UnpackException(f'enum {self.enum.__name__} doesn\'t have element with value 0x{value:x} in it')

        return self.validate(value)

    def pack(self, value) -> bytes:
        return struct.pack(self.get_format(), value if not self.enum else value.value)


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    With "encoding" the bytes are decoded as text, optionally passed through
    "normalize" and, with "enum", converted to an element of the enumeration.
    Text that cannot be decoded or that is not in the enumeration raises the
    exception indicated with "on_unknown".
    """

    def __init__(self, n=None, default=None, encoding=None, normalize=None, enum=None, on_unknown=UnpackException, **kw):
        if n is None and default is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(default)
        self.encoding = encoding
        self.normalize = normalize
        self.enum = enum
        self.on_unknown = on_unknown

        super().__init__(default=default, **kw)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return '' if self.encoding else b'\x00' * self.length

    def _decode(self, raw):
        try:
            value = raw.decode(self.encoding)
        except UnicodeDecodeError:
            exc = self.on_mismatch if self.is_magic else self.on_unknown
            raise exc('field \'%s\' contains non-text data %r' % (self.name, raw))

        if self.normalize:
            value = self.normalize(value)

        if self.enum:
            try:
                value = self.enum(value)
            except ValueError:
                raise self.on_unknown(f'enum {self.enum.__name__} doesn\'t have element with value {value!r} in it')

        return value

    def unpack(self, cursor):
        value = cursor.read_slice(self.length)

        if self.encoding:
            value = self._decode(value)

        return self.validate(value)

    def pack(self, value) -> bytes:
        if self.enum:
            value = value.value
        if isinstance(value, str):
            value = value.encode(self.encoding or 'ascii')

        return bytes(value)


class SubField(object):
    """One slice of a packed-fields byte.

    The "bias" is added when decoding and subtracted when encoding: the GIF
    format stores a lot of sizes as "value minus one".
    """

    def __init__(self, name, width, bias=0, kind=int):
        self.name = name
        self.width = width
        self.bias = bias
        self.kind = kind

    def __repr__(self):
        return '<%s(%s:%d)>' % (self.__class__.__name__, self.name, self.width)

    @property
    def format(self):
        return 'uint:%d' % self.width

    def decode(self, raw: int):
        if self.kind is bool:
            return raw == 1

        return raw + self.bias

    def encode(self, value) -> int:
        raw = int(value) - self.bias

        if not 0 <= raw < (1 << self.width):
            raise ValueError(f'value {value!r} doesn\'t fit into sub-field \'{self.name}\' of {self.width} bits')

        return raw


class PackedFields(object):
    """Several independent values packed into a single byte.

    Subclasses define "layout", a sequence of SubField from the most
    significant bit to the least significant one, whose widths add up to 8.
    The pair from_byte()/to_byte() is lossless.
    """
    layout: Tuple[SubField, ...] = ()

    def __init__(self, **kwargs):
        for sub in self.layout:
            if sub.name not in kwargs:
                raise TypeError(f'missing value for sub-field \'{sub.name}\'')
            object.__setattr__(self, sub.name, kwargs.pop(sub.name))

        if kwargs:
            raise TypeError(f'{self.__class__.__name__} has no sub-fields named {", ".join(kwargs)}')

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __repr__(self):
        return '<%s(%s)>' % (
            self.__class__.__name__,
            ','.join('%s=%r' % (sub.name, getattr(self, sub.name)) for sub in self.layout),
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented

        return self.get_values() == other.get_values()

    def __hash__(self):
        return hash((self.__class__, tuple(self.get_values().items())))

    def get_values(self):
        return {sub.name: getattr(self, sub.name) for sub in self.layout}

    @classmethod
    def get_format(cls):
        width = sum(sub.width for sub in cls.layout)
        if width != 8:
            raise ValueError(f'layout of {cls.__name__} covers {width} bits instead of 8')

        return ', '.join(sub.format for sub in cls.layout)

    @classmethod
    def from_byte(cls, value: int) -> "PackedFields":
        if not 0 <= value <= 0xff:
            raise ValueError(f'{value!r} is not a byte')

        raws = bitstring.Bits(uint=value, length=8).unpack(cls.get_format())

        return cls(**{sub.name: sub.decode(raw) for sub, raw in zip(cls.layout, raws)})

    def to_byte(self) -> int:
        raws = [sub.encode(getattr(self, sub.name)) for sub in self.layout]

        return bitstring.pack(self.get_format(), *raws).uint


class PackedField(Field):
    """A single byte decoded into an instance of a PackedFields subclass."""

    def __init__(self, packed_cls, default=0, **kw):
        self.packed_cls = packed_cls
        super().__init__(default=default, **kw)

    def value_from_default(self):
        return self.packed_cls.from_byte(self.default)

    def unpack(self, cursor):
        value = self.packed_cls.from_byte(cursor.read_u8())
        self.logger.debug('packed fields for \'%s\': %r' % (self.name, value))

        return value

    def pack(self, value) -> bytes:
        return bytes([value.to_byte()])


class ChunkField(Field):
    """A record nested into another one; with "optional" the value can be None."""

    def __init__(self, chunk_cls, optional=False, **kw):
        self.chunk_cls = chunk_cls
        self.optional = optional
        super().__init__(**kw)

    def value_from_default(self):
        return None if self.optional else self.chunk_cls()

    def unpack(self, cursor):
        return self.chunk_cls.unpack(cursor)

    def pack(self, value) -> bytes:
        if value is None:
            return b''

        return value.raw


class ArrayField(Field):
    '''Un/Pack a fixed number of elements described by another field.

    The value is a tuple so that the record containing it stays immutable.
    '''

    def __init__(self, field, n=0, **kw):
        self.field = field
        self.n = n
        super().__init__(**kw)

    def value_from_default(self):
        return tuple(self.field.value_from_default() for _ in range(self.n))

    def unpack(self, cursor):
        return tuple(self.field.unpack(cursor) for _ in range(self.n))

    def pack(self, value) -> bytes:
        return b''.join(self.field.pack(element) for element in value)


class ValueField(Field):
    '''A value carried by the record but not stored in the stream, like the
    flags of the placeholders for the parts that are not decoded.'''

    def unpack(self, cursor):
        return self.value_from_default()

    def pack(self, value) -> bytes:
        return b''
