"""
# gifstruct: GIF header decoding.

A GIF data stream is described declaratively, record by record, like

    class LogicalScreenDescriptor(Chunk):
        width                  = fields.StructField('H')
        height                 = fields.StructField('H')
        packed_fields          = fields.PackedField(ScreenDescriptorPackedFields)
        background_color_index = fields.StructField('B')
        pixel_aspect_ratio     = fields.StructField('B')

and every record knows how to unpack() itself from a ByteCursor, a wrapper
around the whole content of the file and a position into it.

Decoded records are immutable; a malformed stream raises one of the
exceptions in gifstruct.exceptions, all subclasses of GifStructException.

    >>> from gifstruct import decode_file
    >>> gif = decode_file('stars.gif')
    >>> gif.signature.version
    <GifVersion.GIF89a: '89a'>
"""
from .streams import ByteCursor
from .exceptions import (
    GifStructException,
    BufferUnderrunException,
    InvalidSignatureException,
    UnsupportedVersionException,
    InvalidImageSeparatorException,
)
from .images.gif import (
    GifStream,
    decode,
    decode_file,
)
