import logging
import os
from pathlib import Path

import pytest
from PIL import Image


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def gif_file(tmp_path):
    '''Factory saving with Pillow a paletted image of the given size as GIF.'''
    def _gif_file(width, height, name='image.gif', **options):
        image = Image.new('P', (width, height))
        image.putpalette([_ for idx in range(16) for _ in (idx * 16, 0xff - idx * 16, 0x80)])
        for x in range(width):
            image.putpixel((x, 0), x % 16)

        path = tmp_path / name
        image.save(path, 'GIF', **options)

        return path

    return _gif_file
