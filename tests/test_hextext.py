import pytest
from hypothesis import given, strategies as st

from bytekit.enum import ParseError
from bytekit.exceptions import ResultException
from bytekit.hextext import (
    contains_whitespace,
    parse,
    render,
    split_by,
    to_hex,
)
from bytekit.result import Result


EXPECTED = bytes([0x12, 0x34, 0x56, 0x78, 0x9a, 0xab, 0xbc, 0xcd, 0xde, 0xef, 0xf0])


def test_parse_empty():
    assert parse('') == Result.success(b'')


def test_parse_with_whitespace():
    result = parse('  12 34 56   78 9A AB BC  CD DE EF   F0 ')

    assert result.is_success
    assert result.value == EXPECTED


def test_parse_no_whitespace():
    assert parse('123456789AABBCCDDEEFF0') == Result.success(EXPECTED)


def test_parse_equivalent_forms():
    assert parse('12 34 56') == parse('123456') == Result.success(bytes([0x12, 0x34, 0x56]))
    assert parse('12\t34\n56').value == bytes([0x12, 0x34, 0x56])


def test_parse_lowercase():
    assert parse('cafebabe').value == b'\xca\xfe\xba\xbe'


def test_parse_bad_length():
    assert parse('1') == Result.failure(ParseError.BAD_LENGTH)
    assert parse('12345') == Result.failure(ParseError.BAD_LENGTH)
    assert parse('12 345') == Result.failure(ParseError.BAD_LENGTH)


def test_parse_invalid_format():
    assert parse('zz') == Result.failure(ParseError.INVALID_FORMAT)
    assert parse('12 g4') == Result.failure(ParseError.INVALID_FORMAT)
    # a sign is not a hex digit even if int() would accept it
    assert parse('+1') == Result.failure(ParseError.INVALID_FORMAT)


def test_parse_stops_at_first_error():
    """the first bad token decides the error"""
    assert parse('zz 1') == Result.failure(ParseError.INVALID_FORMAT)
    assert parse('1 zz') == Result.failure(ParseError.BAD_LENGTH)


def test_unwrap():
    assert parse('0102').unwrap() == b'\x01\x02'

    with pytest.raises(ResultException) as e:
        parse('zz').unwrap()

    assert e.value.error == ParseError.INVALID_FORMAT


def test_to_hex():
    assert to_hex(0x0a) == '0A'
    assert to_hex(0x0a, uppercase=False) == '0a'
    assert to_hex(0x0a, digits=4) == '000A'
    assert to_hex(0x1234, digits=2) == '1234'


def test_render():
    assert render(b'') == ''
    assert render(b'\x1a\xbc') == '1ABC'
    assert render(b'\x1a\xbc', uppercase=False, separator=' ') == '1a bc'


@given(data=st.binary())
def test_render_parse_roundtrip(data):
    assert parse(render(data)) == Result.success(data)


def test_split_by():
    assert split_by('12345', 2) == ['12', '34', '5']
    assert split_by('', 2) == []
    assert split_by('1234', 0) == []


def test_contains_whitespace():
    assert contains_whitespace('12 34')
    assert contains_whitespace('12\n')
    assert not contains_whitespace('1234')
