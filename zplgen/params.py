'''
Literal parameter values accepted by the ZPL II commands in zplgen.commands.

Each member's value is the token written to the printer.
'''

from enum import Enum


class Justification(Enum):
    '''field justification used by ^FO and ^FW'''
    LEFT = 0
    RIGHT = 1
    AUTO = 2  # script dependent


class TextJustification(Enum):
    '''text justification inside a ^FB field block'''
    LEFT = 'L'
    CENTER = 'C'
    RIGHT = 'R'
    JUSTIFIED = 'J'


class CompressionType(Enum):
    '''
    ^GF data encoding.

    ASCII_HEX follows the format of the other download commands, BINARY data is
    strictly binary and COMPRESSED_BINARY is binary data compressed on the host
    with Zebra's compression algorithm.
    '''
    ASCII_HEX = 'A'
    BINARY = 'B'
    COMPRESSED_BINARY = 'C'


class FieldOrientation(Enum):
    NORMAL = 'N'
    DEGREES_90 = 'R'  # clockwise
    DEGREES_180 = 'I'
    DEGREES_270 = 'B'  # read from bottom up


class LineColor(Enum):
    BLACK = 'B'
    WHITE = 'W'


class YesNo(Enum):
    NO = 'N'
    YES = 'Y'


# ^PQ flags
OverridePauseCount = YesNo
CutOnErrorLabel = YesNo


class Code128Mode(Enum):
    NONE = 'N'
    UCC_CASE = 'U'
    AUTOMATIC = 'A'
    UCC_EAN = 'D'


class QRErrorCorrection(Enum):
    '''
    H is the most reliable and least dense, L the least reliable and most
    dense.
    '''
    ULTRA_HIGH = 'H'
    HIGH = 'Q'
    STANDARD = 'M'
    HIGH_DENSITY = 'L'
