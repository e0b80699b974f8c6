class BytekitException(Exception):
    '''Base class to extend in order to throw exception in bytekit.

    It takes the kind of error (a ParseError) and the chain of positions
    in the input that caused the exception.
    '''

    def __init__(self, error, chain=None):
        self.error = error
        self.chain = chain if chain is not None else []
        super().__init__(error, self.chain)


class FormatException(BytekitException):
    '''The format string cannot be compiled.'''
    pass


class UnpackException(BytekitException):
    '''A field cannot be read from the data.'''
    pass


class ResultException(BytekitException):
    '''Raised when unwrapping a failed Result.'''
    pass
