"""
Core module for the abstraction of a file format

"""
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import ByteCursor
from .exceptions import GifStructException


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: the fields
    declared as class attributes describe, in order, the bytes of the record.

    An instance is a decoded record: the values are assigned once when it's
    built and any further assignment raises AttributeError. Two records with
    the same values compare equal.

    Records whose decoding depends on previously decoded records override
    unpack() taking them as explicit arguments.
    """

    def __init__(self, **kwargs):
        for field_name, field in self.get_fields():
            value = kwargs.pop(field_name) if field_name in kwargs else field.value_from_default()
            object.__setattr__(self, field_name, value)

        if kwargs:
            raise TypeError('%s has no fields named %s' % (self.__class__.__name__, ', '.join(kwargs)))

        object.__setattr__(self, '_layout', {})

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable, cannot set \'{name}\'')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable, cannot delete \'{name}\'')

    @classmethod
    def get_ordered_fields_name(cls) -> List[str]:
        return cls._meta.fields

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(cls, _)) for _ in cls.get_ordered_fields_name()]

    def get_values(self) -> Dict[str, object]:
        return {_: getattr(self, _) for _ in self.get_ordered_fields_name()}

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented

        return self.get_values() == other.get_values()

    def __hash__(self):
        return hash((self.__class__, tuple(self.get_values().items())))

    def __repr__(self):
        msg = []
        for field_name, value in self.get_values().items():
            msg.append('%s=%s' % (field_name, repr(value)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, value in self.get_values().items():
            msg += '%s: %s\n' % (field_name, repr(value))
        return msg

    @property
    def raw(self) -> bytes:
        value = b''
        for field_name, field in self.get_fields():
            field_raw = field.pack(getattr(self, field_name))
            self.logger.debug("field '{}' raw={}".format(field_name, field_raw))
            value += field_raw

        return value

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        '''Offset and size of each field as found during unpacking; empty
        for records built by hand.'''
        return dict(self._layout)

    @classmethod
    def build(cls, values, layout=None):
        instance = cls(**values)
        if layout:
            instance._layout.update(layout)

        return instance

    @classmethod
    def unpack_field(cls, field_name, unpack, cursor, *args, layout=None):
        '''Call "unpack" tracking the name of the field in the chain of the exception
        eventually raised; with "layout" the offset and size of what was consumed
        are recorded in it.'''
        offset = cursor.tell()
        cls.logger.debug('unpacking %s.%s at offset %d' % (cls.__name__, field_name, offset))

        try:
            value = unpack(cursor, *args)
        except GifStructException as e:
            e.chain.append(field_name)
            raise

        if layout is not None:
            layout[field_name] = (offset, cursor.tell() - offset)

        return value

    @classmethod
    def unpack(cls, cursor: ByteCursor):
        '''Read the fields one after the other from the cursor and return the
        record; the cursor is advanced by exactly the size of the record.

        If a field fails the exception propagates with the name of the field
        appended to its chain, no partial record is ever returned.
        '''
        values = {}
        layout = {}
        for field_name, field in cls.get_fields():
            values[field_name] = cls.unpack_field(field_name, field.unpack, cursor, layout=layout)

        return cls.build(values, layout)
