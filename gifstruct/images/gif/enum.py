'''
This module contains the constant values used throught the GIF specification.
'''
from enum import Enum


GIF_MAGIC = 'GIF'

IMAGE_SEPARATOR = 0x2C


class GifVersion(Enum):
    GIF87a = '87a'
    GIF89a = '89a'
