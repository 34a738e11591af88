'''
# Graphics Interchange Format

The specification is at <https://www.w3.org/Graphics/GIF/spec-gif89a.txt>.

A data stream is organized as

  .--------------------------------.
  | signature                      |  "GIF" + "87a" or "89a"
  | logical screen descriptor      |
  | global color table (optional)  |
  | image descriptor               |  one group per image
  | local color table (optional)   |
  | image data                     |
    ...
  | trailer                        |  0x3B
  '--------------------------------'

Only the first image is decoded and of it only the descriptor: local color
table and image data are represented by placeholders recording that they
are there, their contents are not decoded.
'''
from typing import Optional

from ...core import Chunk
from ...streams import ByteCursor
from ... import fields
from ...exceptions import (
    InvalidSignatureException,
    InvalidImageSeparatorException,
    UnsupportedVersionException,
)
from .enum import (
    GifVersion,
    GIF_MAGIC,
    IMAGE_SEPARATOR,
)
from .utils import (
    color_table_size,
    scale_intensity,
    iter_triplets,
)


class GifSignature(Chunk):
    '''The magic is case-insensitive in the stream and always stored uppercase.'''
    magic   = fields.StringField(3, default=GIF_MAGIC, encoding='ascii', normalize=str.upper,
                                 is_magic=True, on_mismatch=InvalidSignatureException)
    version = fields.StringField(3, default=GifVersion.GIF89a, encoding='ascii', enum=GifVersion,
                                 on_unknown=UnsupportedVersionException)

    def __str__(self):
        return '%s%s' % (self.magic, self.version.value)


class ScreenDescriptorPackedFields(fields.PackedFields):
    '''
    Color resolution is the number of bits per primary color available to the
    original image; the size exponent gives the number of entries of the
    global color table, that is 2^exponent, even when the table is absent.
    '''
    layout = (
        fields.SubField('has_global_color_table', 1, kind=bool),
        fields.SubField('color_resolution_bits', 3, bias=1),
        fields.SubField('table_is_sorted', 1, kind=bool),
        fields.SubField('global_color_table_entry_count_exponent', 3, bias=1),
    )


SCREEN_DESCRIPTOR_LAYOUT = ScreenDescriptorPackedFields.layout


class LogicalScreenDescriptor(Chunk):
    width                  = fields.StructField('H')
    height                 = fields.StructField('H')
    packed_fields          = fields.PackedField(ScreenDescriptorPackedFields)
    background_color_index = fields.StructField('B')
    pixel_aspect_ratio     = fields.StructField('B')

    def __str__(self):
        return '%dx%d' % (
            self.width,
            self.height,
        )

    @property
    def aspect_ratio(self) -> Optional[float]:
        '''Quotient of the pixel's width over its height, None if not given.'''
        if not self.pixel_aspect_ratio:
            return None

        return (self.pixel_aspect_ratio + 15) / 64


class GlobalColorTable(Chunk):
    '''Sequence of red-green-blue triplets following the logical screen
    descriptor, present only when its flag is set; at most one per stream.

    The bytes as found in the stream are kept in "raw_entries", "entries"
    holds them rescaled by scale_intensity().'''
    raw_entries   = fields.StringField(0)
    entries       = fields.ValueField(default=b'')
    declared_size = fields.ValueField(default=0)

    @property
    def triplets(self):
        return list(iter_triplets(self.entries))

    @classmethod
    def unpack(cls, cursor: ByteCursor, screen_descriptor: LogicalScreenDescriptor) -> Optional["GlobalColorTable"]:
        packed_fields = screen_descriptor.packed_fields

        if not packed_fields.has_global_color_table:
            cls.logger.debug('no global color table')
            return None

        exponent = packed_fields.global_color_table_entry_count_exponent
        size = color_table_size(exponent)
        layout = {}

        raw = cls.unpack_field('raw_entries', lambda _cursor: _cursor.read_slice(size), cursor, layout=layout)

        return cls.build({
            'raw_entries': raw,
            'entries': bytes(scale_intensity(_, exponent) for _ in raw),
            'declared_size': size,
        }, layout)


class ImageDescriptorPackedFields(fields.PackedFields):
    layout = (
        fields.SubField('has_local_color_table', 1, kind=bool),
        fields.SubField('is_interlaced', 1, kind=bool),
        fields.SubField('table_is_sorted', 1, kind=bool),
        fields.SubField('reserved', 2),
        fields.SubField('local_color_table_entry_count_exponent', 3, bias=1),
    )


IMAGE_DESCRIPTOR_LAYOUT = ImageDescriptorPackedFields.layout


class ImageDescriptor(Chunk):
    '''Position and size of the image inside the logical screen; the
    coordinates are in pixels from its top-left corner.'''
    separator     = fields.StructField('B', equals_to=IMAGE_SEPARATOR, is_magic=True,
                                       on_mismatch=InvalidImageSeparatorException)
    left          = fields.StructField('H')
    top           = fields.StructField('H')
    width         = fields.StructField('H')
    height        = fields.StructField('H')
    packed_fields = fields.PackedField(ImageDescriptorPackedFields)


class LocalColorTable(Chunk):
    '''Placeholder: the table is there but its contents are not decoded and
    no byte of it is consumed.'''
    declared_size = fields.ValueField(default=0)
    decoded       = fields.ValueField(default=False)

    @classmethod
    def unpack(cls, cursor: ByteCursor, image_descriptor: ImageDescriptor) -> Optional["LocalColorTable"]:
        packed_fields = image_descriptor.packed_fields

        if not packed_fields.has_local_color_table:
            return None

        # TODO: read the table once the image data is decoded, until then the
        #       following bytes are not skipped
        return cls(declared_size=color_table_size(packed_fields.local_color_table_entry_count_exponent))


class RasterData(Chunk):
    '''Placeholder for the LZW compressed image data, not decoded.'''
    is_interlaced = fields.ValueField(default=False)
    decoded       = fields.ValueField(default=False)

    @classmethod
    def unpack(cls, cursor: ByteCursor, image_descriptor: ImageDescriptor) -> "RasterData":
        return cls(is_interlaced=image_descriptor.packed_fields.is_interlaced)


class DescriptorGroup(Chunk):
    image_descriptor  = fields.ChunkField(ImageDescriptor)
    local_color_table = fields.ChunkField(LocalColorTable, optional=True)
    raster_data       = fields.ChunkField(RasterData)

    @classmethod
    def unpack(cls, cursor: ByteCursor) -> "DescriptorGroup":
        layout = {}
        image_descriptor = cls.unpack_field('image_descriptor', ImageDescriptor.unpack, cursor, layout=layout)

        return cls.build({
            'image_descriptor': image_descriptor,
            'local_color_table': cls.unpack_field('local_color_table', LocalColorTable.unpack, cursor,
                                                  image_descriptor, layout=layout),
            'raster_data': cls.unpack_field('raster_data', RasterData.unpack, cursor, image_descriptor, layout=layout),
        }, layout)


class GifStream(Chunk):
    '''
    The whole stream: only the first descriptor group is decoded, the
    iteration up to the trailer is not implemented.
    '''
    signature                 = fields.ChunkField(GifSignature)
    logical_screen_descriptor = fields.ChunkField(LogicalScreenDescriptor)
    global_color_table        = fields.ChunkField(GlobalColorTable, optional=True)
    descriptor_groups         = fields.ArrayField(fields.ChunkField(DescriptorGroup), n=1)

    @classmethod
    def unpack(cls, cursor: ByteCursor) -> "GifStream":
        layout = {}

        signature = cls.unpack_field('signature', GifSignature.unpack, cursor, layout=layout)
        cls.logger.debug('signature: %s' % signature)

        screen_descriptor = cls.unpack_field('logical_screen_descriptor', LogicalScreenDescriptor.unpack, cursor,
                                             layout=layout)
        cls.logger.debug('screen descriptor: %r' % screen_descriptor)

        global_color_table = cls.unpack_field('global_color_table', GlobalColorTable.unpack, cursor,
                                              screen_descriptor, layout=layout)

        descriptor_group = cls.unpack_field('descriptor_groups', DescriptorGroup.unpack, cursor, layout=layout)
        cls.logger.debug('descriptor group: %r' % descriptor_group)

        return cls.build({
            'signature': signature,
            'logical_screen_descriptor': screen_descriptor,
            'global_color_table': global_color_table,
            'descriptor_groups': (descriptor_group,),
        }, layout)


def decode(data) -> GifStream:
    '''Decode the header structure of a GIF from its bytes; to decode a file
    use decode_file().'''
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('decode() needs a bytes-like object, not \'%s\'' % data.__class__.__name__)

    return GifStream.unpack(ByteCursor(data))


def decode_file(path) -> GifStream:
    return GifStream.unpack(ByteCursor(str(path)))
