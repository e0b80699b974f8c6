"""
Explicit success/failure values returned by the operations that work on
external data (hex text, format strings).

    >>> result = parse('12 34')
    >>> if result:
    ...     print(result.value)
    b'\\x124'
"""
from .exceptions import ResultException


class Result(object):
    """Either a value or a ParseError, never both."""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def __bool__(self):
        return self.is_success

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented

        return (self.value, self.error) == (other.value, other.error)

    def __repr__(self):
        if self.is_success:
            return f'<{self.__class__.__name__}.success({self.value!r})>'

        return f'<{self.__class__.__name__}.failure({self.error})>'

    def unwrap(self):
        '''Returns the value or raises ResultException with the error kind.'''
        if not self.is_success:
            raise ResultException(self.error)

        return self.value
