from typing import Iterable, List, Sequence, Tuple


def as_bytes(data: Iterable[int]) -> bytes:
    '''Copies a sequence of integers into bytes.'''
    assert not isinstance(data, int), 'a byte sequence is needed, not an integer'
    return bytes(data)


def interleave(first: Iterable[int], second: Iterable[int]) -> bytes:
    '''Alternates the elements of the two sequences starting with "first";
    the excess of the longer one is dropped.'''
    result = bytearray()
    for a, b in zip(first, second):
        result += bytes([a, b])

    return bytes(result)


def deinterleave(data: Iterable[int]) -> Tuple[bytes, bytes]:
    '''Even-indexed elements go to the first sequence, odd-indexed to the second
    one that, for an odd length, is one element shorter.'''
    data = as_bytes(data)
    return data[0::2], data[1::2]


def chunked(data: Sequence, size: int) -> List[Sequence]:
    '''Splits the sequence into chunks of "size" elements or less.'''
    assert size > 0, 'chunk size must be positive'
    return [data[_:_ + size] for _ in range(0, len(data), size)]
