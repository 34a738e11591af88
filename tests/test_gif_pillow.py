"""Decode GIF files written by Pillow and compare with what Pillow reports."""
from PIL import Image

from gifstruct import decode_file
from gifstruct.images.gif.utils import color_table_size


def test_gif_file(gif_file):
    path = gif_file(10, 5)

    gif = decode_file(path)

    with Image.open(path) as image:
        version = image.info['version']
        size = image.size

    assert gif.signature.magic == 'GIF'
    assert gif.signature.version.value.encode() == version[3:]

    lsd = gif.logical_screen_descriptor
    assert (lsd.width, lsd.height) == size
    assert lsd.packed_fields.has_global_color_table

    table = gif.global_color_table
    assert table.declared_size == color_table_size(lsd.packed_fields.global_color_table_entry_count_exponent)
    assert len(table.entries) == table.declared_size

    descriptor = gif.descriptor_groups[0].image_descriptor
    assert (descriptor.left, descriptor.top) == (0, 0)
    assert (descriptor.width, descriptor.height) == size


def test_gif_file_interlaced(gif_file):
    gif = decode_file(gif_file(32, 32, interlace=1))

    assert gif.descriptor_groups[0].raster_data.is_interlaced

    gif = decode_file(gif_file(32, 32, name='sequential.gif', interlace=0))

    assert not gif.descriptor_groups[0].raster_data.is_interlaced


def test_gif_file_local_color_table(gif_file):
    gif = decode_file(gif_file(16, 16, include_color_table=True))

    group = gif.descriptor_groups[0]

    assert group.image_descriptor.packed_fields.has_local_color_table
    assert group.local_color_table is not None
    assert not group.local_color_table.decoded
