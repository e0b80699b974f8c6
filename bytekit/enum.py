from enum import Enum, Flag, auto


class NybbleOrder(Enum):
    '''Order of the nybbles of a byte once expanded into two bytes'''
    LOW_FIRST  = auto()
    HIGH_FIRST = auto()


class ParseError(Enum):
    '''Kind of failure returned by the codec operations working on external data'''
    INVALID_FORMAT = auto()
    BAD_LENGTH     = auto()
    OUT_OF_RANGE   = auto()


class ValueKind(Enum):
    '''Tag of an unpacked value'''
    BOOLEAN   = auto()
    BYTE      = auto()
    CHARACTER = auto()
    INT16     = auto()
    UINT16    = auto()
    INT32     = auto()
    UINT32    = auto()
    # reserved: no format character produces them
    INT64     = auto()
    UINT64    = auto()


class DumpOption(Flag):
    '''It indicates which optional columns a hex dump contains'''
    NONE                 = 0
    OFFSET               = 1 << 0
    PRINTABLE_CHARACTERS = 1 << 1
    MID_LINE_GAP         = 1 << 2
