'''
ZPL II command strings.

Every function is a pure mapping from its parameters to one command. Values are
not validated, the printer is the final judge of what it accepts.

Positional parameters follow ZPL's convention: they are joined by commas and
trailing parameters left at ``None`` are omitted. A ``None`` followed by a
supplied parameter is written as an empty slot, so the printer falls back to
its default for that position instead of reading the later value in its place::

    >>> field_block(400, None, None, 'C')
    '^FB400,,,C'
'''

from enum import Enum

from .params import CompressionType

START_FORMAT = '^XA'
END_FORMAT = '^XZ'

FIELD_ORIGIN = '^FO'
FIELD_SEPARATOR = '^FS'
FIELD_DATA = '^FD'
FIELD_BLOCK = '^FB'
FIELD_ORIENTATION = '^FW'
COMMENT = '^FX'
LABEL_HOME = '^LH'
GRAPHIC_FIELD = '^GF'
GRAPHIC_BOX = '^GB'
GRAPHIC_ELLIPSE = '^GE'
SCALABLE_FONT = '^A'
CHANGE_ALPHANUMERIC_DEFAULT_FONT = '^CF'
CHANGE_INTERNATIONAL_FONT = '^CI'
BAR_CODE_FIELD_DEFAULT = '^BY'
CODE_128_BAR_CODE = '^BC'
QR_CODE = '^BQ'
PRINT_QUANTITY = '^PQ'
SERIALIZATION_FIELD = '^SF'
MEDIA_DARKNESS = '~SD'


def _param(value):
    if isinstance(value, Enum):
        value = value.value
    if value is True:
        return 'Y'
    if value is False:
        return 'N'
    return str(value)


def _join(*params):
    params = list(params)
    while params and params[-1] is None:
        params.pop()
    return ','.join('' if p is None else _param(p) for p in params)


def _command(prefix, *params):
    return prefix + _join(*params)


def _with_trailing(head, *params):
    '''*head* is a command with its leading single letter parameters inlined'''
    tail = _join(*params)
    if tail:
        return head + ',' + tail
    return head


def field_origin(x, y, justification=None):
    """
    sets the upper-left corner of the field area at *x* and *y* (in dots),
    relative to the label home position.
    """
    return _command(FIELD_ORIGIN, x, y, justification)


def field_separator():
    return FIELD_SEPARATOR


def field_data(data):
    return FIELD_DATA + _param(data)


def comment(text):
    """non printing comment, ignored by the printer"""
    return COMMENT + _param(text)


def label_home(x, y):
    return _command(LABEL_HOME, x, y)


def field_orientation(orientation, justification=None):
    """
    sets the default orientation (and optionally justification) of all
    following fields
    """
    return _command(FIELD_ORIENTATION, orientation, justification)


def field_block(width, max_lines=None, line_spacing=None, justification=None,
                hanging_indent=None):
    """
    prints the following field data as a text block *width* dots wide.

    Printer defaults: 1 line, 0 dots spacing, left justified, no indent.
    """
    return _command(FIELD_BLOCK, width, max_lines, line_spacing, justification,
                    hanging_indent)


def graphic_field(compression_type, binary_byte_count, graphic_field_count,
                  bytes_per_row, data):
    """
    downloads graphic field *data* directly into the bitmap at the current field
    origin.

    All five parameters are always written, *data* is inserted verbatim.
    """
    return '%s%s,%s,%s,%s,%s' % (GRAPHIC_FIELD, _param(compression_type),
                                 binary_byte_count, graphic_field_count,
                                 bytes_per_row, data)


def ascii_graphic_field(payload):
    """^GF for an ASCII hex GraphicsPayload as produced by zplgen.graphics"""
    return graphic_field(CompressionType.ASCII_HEX, payload.total_bytes,
                         payload.total_bytes, payload.row_bytes, payload.data)


def graphic_box(width, height, thickness=None, color=None, rounding=None):
    """
    draws a box. Printer defaults: thickness 1, black, no rounding.
    """
    return _command(GRAPHIC_BOX, width, height, thickness, color, rounding)


def graphic_ellipse(width, height, thickness=None, color=None):
    return _command(GRAPHIC_ELLIPSE, width, height, thickness, color)


def scalable_font(font, orientation=None, height=None, width=None):
    """
    selects *font* for the current field, *height* and *width* in dots
    """
    head = SCALABLE_FONT + _param(font)
    if orientation is not None:
        head += _param(orientation)
    return _with_trailing(head, height, width)


def change_alphanumeric_default_font(font, height=None, width=None):
    return _command(CHANGE_ALPHANUMERIC_DEFAULT_FONT, font, height, width)


def change_international_font(character_set, remaps=()):
    """
    selects the international character set.

    *remaps* is a sequence of (source, destination) character number pairs.
    """
    params = [character_set]
    for src, dest in remaps:
        params.extend((src, dest))
    return _command(CHANGE_INTERNATIONAL_FONT, *params)


def bar_code_field_default(module_width=None, ratio=None, height=None):
    """
    changes the default bar code module width, wide to narrow bar ratio and
    height. Printer defaults: 2 dots, 3.0 and 10 dots.
    """
    return _command(BAR_CODE_FIELD_DEFAULT, module_width, ratio, height)


def code128_bar_code(orientation=None, height=None, print_interpretation_line=True,
                     print_interpretation_line_above=False, ucc_check_digit=False,
                     mode=None):
    """
    Code 128 bar code.

    *orientation* may be given on its own. The interpretation line flags and the
    UCC check digit flag are only written together with *height*, as is *mode*.
    """
    head = CODE_128_BAR_CODE
    if orientation is not None:
        head += _param(orientation)
    if height is None:
        return head
    return _with_trailing(head, height, print_interpretation_line,
                          print_interpretation_line_above, ucc_check_digit, mode)


def qr_code(orientation=None, model=None, magnification=None, error_correction=None,
            mask=None):
    head = QR_CODE
    if orientation is not None:
        head += _param(orientation)
    return _with_trailing(head, model, magnification, error_correction, mask)


def print_quantity(quantity, pause_count=None, replicates=None, override_pause=None,
                   cut_on_error=None):
    """
    prints *quantity* labels of the current format, pausing (or cutting) every
    *pause_count* labels
    """
    return _command(PRINT_QUANTITY, quantity, pause_count, replicates, override_pause,
                    cut_on_error)


def serialization_field(mask, increment=None):
    """
    serializes the current field data using *mask*, incrementing by
    *increment* on each label
    """
    return _command(SERIALIZATION_FIELD, mask, increment)


def media_darkness(value):
    """darkness between 0 (none) and 30 (full), relative to the current setting"""
    return MEDIA_DARKNESS + _param(value)
