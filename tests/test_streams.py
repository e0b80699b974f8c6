import pytest

from bytekit.enum import ParseError
from bytekit.exceptions import UnpackException
from bytekit.streams import Stream


def test_bytes_stream_read_all():
    data = b'\x01\x02\x03\x04\x05'

    stream = Stream(data)

    assert stream.read(1) == b'\x01'
    assert stream.read(1) == b'\x02'
    assert stream.read_all() == b'\x03\x04\x05'
    assert stream.tell() == 5


def test_file_stream_read_all(tmp_path):
    path_data = tmp_path / 'data.bin'
    path_data.write_bytes(b'\x01\x02\x03\x04\x05')

    with Stream(str(path_data)) as stream:
        assert stream.read(1) == b'\x01'
        assert stream.read_all() == b'\x02\x03\x04\x05'


def test_stream_from_list():
    stream = Stream([0x01, 0x02])

    assert stream.remaining() == 2
    assert stream.read_exactly(2) == b'\x01\x02'
    assert stream.remaining() == 0


def test_read_exactly_out_of_range():
    stream = Stream(bytearray(b'\x01\x02\x03'))

    assert stream.read_exactly(1) == b'\x01'

    with pytest.raises(UnpackException) as e:
        stream.read_exactly(4)

    assert e.value.error == ParseError.OUT_OF_RANGE
    # the cursor didn't move
    assert stream.tell() == 1


def test_stream_wrong_type():
    with pytest.raises(ValueError):
        Stream(42)
