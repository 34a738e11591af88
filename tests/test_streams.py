import pytest

from gifstruct.streams import ByteCursor
from gifstruct.exceptions import BufferUnderrunException


def test_read_u8():
    cursor = ByteCursor(b'\x01\x02\x03')

    assert cursor.read_u8() == 0x01
    assert cursor.read_u8() == 0x02
    assert cursor.read_u8() == 0x03
    assert cursor.position == 3
    assert cursor.at_end()

    with pytest.raises(BufferUnderrunException) as e:
        cursor.read_u8()

    assert e.value.offset == 3
    assert e.value.requested == 1
    assert e.value.available == 0
    assert cursor.position == 3


def test_read_le_u16():
    cursor = ByteCursor(b'\x0a\x00\x34\x12\xff')

    assert cursor.read_le_u16() == 10
    assert cursor.read_le_u16() == 0x1234

    # only one byte left: nothing must be consumed
    with pytest.raises(BufferUnderrunException):
        cursor.read_le_u16()

    assert cursor.position == 4
    assert cursor.read_u8() == 0xff


def test_read_slice_boundary():
    data = b'\x00\x01\x02\x03\x04\x05'

    cursor = ByteCursor(data)
    assert cursor.read_slice(len(data)) == data
    assert cursor.remaining == 0

    cursor = ByteCursor(data)
    cursor.read_u8()
    with pytest.raises(BufferUnderrunException) as e:
        cursor.read_slice(len(data))

    assert e.value.requested == 6
    assert e.value.available == 5
    assert cursor.position == 1

    assert cursor.read_slice(0) == b''

    with pytest.raises(ValueError):
        cursor.read_slice(-1)


def test_peek_doesnt_advance():
    cursor = ByteCursor(b'\x3b')

    assert cursor.peek_u8() == 0x3b
    assert cursor.peek_u8() == 0x3b
    assert cursor.tell() == 0

    cursor.skip()

    with pytest.raises(BufferUnderrunException):
        cursor.peek_u8()

    with pytest.raises(BufferUnderrunException):
        cursor.skip()


def test_sources(tmp_path):
    data = b'\x01\x02\x03\x04\x05'
    path_data = tmp_path / 'auaua'
    path_data.write_bytes(data)

    for source in (data, bytearray(data), memoryview(data), str(path_data), path_data):
        cursor = ByteCursor(source)

        assert isinstance(cursor.data, bytes)
        assert cursor.data == data
        assert len(cursor) == 5
        assert cursor.size == 5
        assert cursor.position == 0


def test_wrong_source():
    with pytest.raises(TypeError):
        ByteCursor(42)
