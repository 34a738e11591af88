#!/usr/bin/env python3
'''
Dump the structure of a GIF file

 $ convert -size 5x5 xc:red -size 5x5 xc:green -append stars.gif
 $ gifinfo.py stars.gif

with --show the image is opened with Pillow, to compare what is declared
with what is displayed.
'''
import logging
import sys
import os

from PIL import Image

from gifstruct import decode_file, GifStructException
from gifstruct.images.gif.utils import format_color_table


logging.basicConfig(level=logging.INFO if 'DEBUG' not in os.environ else logging.DEBUG)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} [--show] <gif file path>')
    sys.exit(1)


def dump_header(signature, lsd):
    packed = lsd.packed_fields
    print(f'''GIF Header:
  Signature:                         {signature}
  Version:                           {signature.version.name}
  Logical screen:                    {lsd.width}x{lsd.height}
  Global color table:                {packed.has_global_color_table}
  Color resolution:                  {packed.color_resolution_bits} (bits per primary color)
  Sorted:                            {packed.table_is_sorted}
  Global color table size:           2^{packed.global_color_table_entry_count_exponent} entries
  Background color index:            {lsd.background_color_index}
  Pixel aspect ratio:                {lsd.pixel_aspect_ratio} ({lsd.aspect_ratio or "not given"})''')


def dump_groups(groups):
    print('Image Descriptors:')
    for idx, group in enumerate(groups):
        descriptor = group.image_descriptor
        packed = descriptor.packed_fields
        local = group.local_color_table
        print(f'''  [{idx:02d}] {descriptor.width}x{descriptor.height}+{descriptor.left}+{descriptor.top}
       Local color table:            {f"{local.declared_size} bytes (not decoded)" if local else "no"}
       Interlaced:                   {group.raster_data.is_interlaced}
       Sorted:                       {packed.table_is_sorted}''')


if __name__ == '__main__':
    args = sys.argv[1:]
    show = '--show' in args
    args = [_ for _ in args if _ != '--show']

    if len(args) < 1:
        usage(sys.argv[0])

    filepath = args[0]

    try:
        gif = decode_file(filepath)
    except (GifStructException, OSError) as e:
        logger.error(f'cannot decode \'{filepath}\': {e}')
        sys.exit(1)

    dump_header(gif.signature, gif.logical_screen_descriptor)

    if gif.global_color_table:
        print(format_color_table(gif.global_color_table))

    dump_groups(gif.descriptor_groups)

    if show:
        image = Image.open(filepath)
        image.show()
