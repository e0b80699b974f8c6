"""
Conversion between byte sequences and their hexadecimal textual form.

The parser accepts both the compact form ("123456") and the separated one
("12 34 56"): in the latter each token must be exactly two hex digits.
"""
import logging
import string
from typing import Iterable, List

from .enum import ParseError
from .result import Result


logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


def contains_whitespace(text: str) -> bool:
    return any(_.isspace() for _ in text)


def split_by(text: str, length: int) -> List[str]:
    '''Splits the string into parts of size "length", the last one can be shorter.'''
    if length <= 0:
        return []

    return [text[_:_ + length] for _ in range(0, len(text), length)]


def _parse_token(token: str):
    if len(token) != 2:
        logger.warning('hex token %r has not length 2' % token)
        return ParseError.BAD_LENGTH

    if not all(_ in HEX_DIGITS for _ in token):
        logger.warning('hex token %r is not hexadecimal' % token)
        return ParseError.INVALID_FORMAT

    return int(token, 16)


def parse(text: str) -> Result:
    '''Parses a hex string into bytes.

    It returns a failed Result with BAD_LENGTH for a token that is not two
    characters long and INVALID_FORMAT for non hex characters; the parsing
    stops at the first bad token.'''
    if len(text) == 0:
        return Result.success(b'')

    if contains_whitespace(text):
        tokens = text.split()
    else:
        tokens = split_by(text, 2)

    result = bytearray()
    for token in tokens:
        value = _parse_token(token)
        if isinstance(value, ParseError):
            return Result.failure(value)

        result.append(value)

    logger.debug('parsed %d bytes' % len(result))

    return Result.success(bytes(result))


def to_hex(byte: int, uppercase: bool = True, digits: int = 2) -> str:
    formatter = '%%0%d%s' % (digits, 'X' if uppercase else 'x')
    return formatter % byte


def render(data: Iterable[int], uppercase: bool = True, separator: str = '') -> str:
    return separator.join(to_hex(_, uppercase=uppercase) for _ in data)
